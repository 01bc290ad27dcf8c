from typing import Optional

from .client_base import BaseClient, Form
from .errors import ParameterError
from .models.related import RelatedParams, RelatedResponse


class Related(BaseClient):
    """
    Client to retrieve phrases related to a given phrase.
    """
    def __call__(self, *args, **kwargs):
        return self.get_related(*args, **kwargs)

    def get_related(self, params: Optional[RelatedParams] = None, **kwargs) -> RelatedResponse:
        params = self.resolve_params(RelatedParams, params, kwargs)
        if not params.phrase:
            raise ParameterError("you must provide a phrase")
        form: Form = {"phrase": params.phrase}
        self.add_if_set(form, "count", params.count)
        return self.call("/related", form, RelatedResponse)
