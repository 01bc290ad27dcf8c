from typing import Optional

from .client_base import BaseClient, Form
from .errors import ParameterError
from .models.microformats import MicroformatsParams, MicroformatsResponse


class Microformats(BaseClient):
    """
    Extracts hCard microformats from a web page.
    """
    def __call__(self, *args, **kwargs):
        return self.extract(*args, **kwargs)

    def extract(self, params: Optional[MicroformatsParams] = None, **kwargs) -> MicroformatsResponse:
        params = self.resolve_params(MicroformatsParams, params, kwargs)
        if not params.url:
            raise ParameterError("you must provide a url")
        form: Form = {"url": params.url}
        return self.call("/microformats", form, MicroformatsResponse)
