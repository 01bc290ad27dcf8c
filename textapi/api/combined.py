from typing import Optional

from .client_base import BaseClient, Form
from .errors import ParameterError
from .models.combined import CombinedParams, CombinedResponse


class Combined(BaseClient):
    """
    Runs several analysis endpoints over one document in a single call.
    Endpoints are any of: [ extract, language, entities, concepts, classify,
    hashtags, sentiment, summarize ]
    """
    def __call__(self, *args, **kwargs):
        return self.combined(*args, **kwargs)

    def combined(self, params: Optional[CombinedParams] = None, **kwargs) -> CombinedResponse:
        params = self.resolve_params(CombinedParams, params, kwargs)
        form: Form = {}
        self.text_or_url(form, params.text, params.url)
        if len(params.endpoints) < 2:
            raise ParameterError("you must provide at least two endpoints")
        form["endpoint"] = list(params.endpoints)
        return self.call("/combined", form, CombinedResponse)
