from typing import Optional

from .client_base import BaseClient, Form
from .models.sentiment import SentimentParams, SentimentResponse


class Sentiment(BaseClient):
    """
    Detects polarity (positive, negative, neutral) and subjectivity
    (subjective, objective) of a document.
    """
    def __call__(self, *args, **kwargs):
        return self.analyze(*args, **kwargs)

    def analyze(self, params: Optional[SentimentParams] = None, **kwargs) -> SentimentResponse:
        params = self.resolve_params(SentimentParams, params, kwargs)
        form: Form = {}
        self.text_or_url(form, params.text, params.url)
        self.add_if_set(form, "mode", params.mode)
        return self.call("/sentiment", form, SentimentResponse)
