from typing import Optional

from .client_base import BaseClient, Form
from .models.language import LanguageParams, LanguageResponse


class Language(BaseClient):
    def __call__(self, *args, **kwargs):
        return self.detect(*args, **kwargs)

    def detect(self, params: Optional[LanguageParams] = None, **kwargs) -> LanguageResponse:
        params = self.resolve_params(LanguageParams, params, kwargs)
        form: Form = {}
        self.text_or_url(form, params.text, params.url)
        return self.call("/language", form, LanguageResponse)
