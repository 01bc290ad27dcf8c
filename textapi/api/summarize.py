from typing import Optional

from .client_base import BaseClient, Form
from .errors import ParameterError
from .models.summarize import SummarizeParams, SummarizeResponse


class Summarize(BaseClient):
    def __call__(self, *args, **kwargs):
        return self.summarize(*args, **kwargs)

    def summarize(self, params: Optional[SummarizeParams] = None, **kwargs) -> SummarizeResponse:
        params = self.resolve_params(SummarizeParams, params, kwargs)
        form: Form = {}
        if params.url:
            form["url"] = params.url
        elif params.title and params.text:
            form["title"] = params.title
            form["text"] = params.text
        else:
            raise ParameterError("you must either provide url or a pair of text and title")
        form["mode"] = params.mode or "default"
        self.add_if_set(form, "sentences_number", params.number_of_sentences)
        self.add_if_set(form, "sentences_percentage", params.percentage_of_sentences)
        return self.call("/summarize", form, SummarizeResponse)
