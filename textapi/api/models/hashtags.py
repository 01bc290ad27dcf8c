from typing import List, Optional
from pydantic import BaseModel, Field

from .base import TextAPIModel


class HashtagsParams(BaseModel):
    text: Optional[str] = None
    url: Optional[str] = None
    language: Optional[str] = None

class HashtagsResponse(TextAPIModel):
    text: str = ""
    language: str = ""
    hashtags: List[str] = Field(default_factory=list)
