from typing import List, Optional
from pydantic import BaseModel, Field

from .base import TextAPIModel


class ImageTagsParams(BaseModel):
    url: Optional[str] = None

class ImageTag(TextAPIModel):
    tag: str = ""
    confidence: float = 0.0

class ImageTagsResponse(TextAPIModel):
    image: str = Field(default="", alias="string")
    tags: List[ImageTag] = Field(default_factory=list)
