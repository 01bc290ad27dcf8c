from typing import Optional

from .client_base import BaseClient, Form
from .errors import ParameterError
from .models.extract import ExtractParams, ExtractResponse


class Extract(BaseClient):
    """
    Extracts the main article, author, media and feeds of a web page.
    """
    def __call__(self, *args, **kwargs):
        return self.article(*args, **kwargs)

    def article(self, params: Optional[ExtractParams] = None, **kwargs) -> ExtractResponse:
        params = self.resolve_params(ExtractParams, params, kwargs)
        form: Form = {}
        if params.html:
            form["html"] = params.html
        elif params.url:
            form["url"] = params.url
        else:
            raise ParameterError("you must either provide url or html")
        # best_image is always sent
        self.add_if_set(form, "best_image", params.best_image)
        return self.call("/extract", form, ExtractResponse)
