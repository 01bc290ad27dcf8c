from typing import List, Optional
from pydantic import BaseModel, Field

from .base import TextAPIModel


class ExtractParams(BaseModel):
    """Either `url` or raw `html` of the page is required."""
    url: Optional[str] = None
    html: Optional[str] = None
    best_image: bool = False

class ExtractResponse(TextAPIModel):
    title: str = ""
    article: str = ""
    image: str = ""
    author: str = ""
    videos: List[str] = Field(default_factory=list)
    feeds: List[str] = Field(default_factory=list)
