from typing import Optional

from .client_base import BaseClient, Form
from .models.entities import EntitiesParams, EntitiesResponse


class Entities(BaseClient):
    """
    Client to interact with the entity extraction endpoint.
    """
    def __call__(self, *args, **kwargs):
        return self.get_entities(*args, **kwargs)

    def get_entities(self, params: Optional[EntitiesParams] = None, **kwargs) -> EntitiesResponse:
        params = self.resolve_params(EntitiesParams, params, kwargs)
        form: Form = {}
        self.text_or_url(form, params.text, params.url)
        return self.call("/entities", form, EntitiesResponse)
