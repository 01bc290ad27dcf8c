from typing import Optional

from .client_base import BaseClient, Form
from .models.hashtags import HashtagsParams, HashtagsResponse


class Hashtags(BaseClient):
    def __call__(self, *args, **kwargs):
        return self.suggest(*args, **kwargs)

    def suggest(self, params: Optional[HashtagsParams] = None, **kwargs) -> HashtagsResponse:
        params = self.resolve_params(HashtagsParams, params, kwargs)
        form: Form = {}
        self.text_or_url(form, params.text, params.url)
        self.add_if_set(form, "language", params.language)
        return self.call("/hashtags", form, HashtagsResponse)
