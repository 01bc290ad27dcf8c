from typing import Optional

from .client_base import BaseClient, Form
from .errors import ParameterError
from .models.images import ImageTagsParams, ImageTagsResponse


class ImageTags(BaseClient):
    def __call__(self, *args, **kwargs):
        return self.tag(*args, **kwargs)

    def tag(self, params: Optional[ImageTagsParams] = None, **kwargs) -> ImageTagsResponse:
        params = self.resolve_params(ImageTagsParams, params, kwargs)
        if not params.url:
            raise ParameterError("you must provide a url")
        form: Form = {"url": params.url}
        return self.call("image-tags", form, ImageTagsResponse)
