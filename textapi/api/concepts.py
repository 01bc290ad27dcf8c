from typing import Optional

from .client_base import BaseClient, Form
from .models.concepts import ConceptsParams, ConceptsResponse


class Concepts(BaseClient):
    """
    Client to interact with the concept extraction endpoint.
    """
    def __call__(self, *args, **kwargs):
        return self.get_concepts(*args, **kwargs)

    def get_concepts(self, params: Optional[ConceptsParams] = None, **kwargs) -> ConceptsResponse:
        params = self.resolve_params(ConceptsParams, params, kwargs)
        form: Form = {}
        self.text_or_url(form, params.text, params.url)
        self.add_if_set(form, "language", params.language)
        return self.call("/concepts", form, ConceptsResponse)
