from typing import List, Optional
from pydantic import BaseModel, Field

from .base import TextAPIModel


class SummarizeParams(BaseModel):
    """Either `url` or both `title` and `text` are required."""
    url: Optional[str] = None
    title: Optional[str] = None
    text: Optional[str] = None
    # "default" or "short"; short produces shorter sentences
    mode: Optional[str] = None
    # Only used by the default mode
    number_of_sentences: Optional[int] = None
    percentage_of_sentences: Optional[int] = None

class SummarizeResponse(TextAPIModel):
    text: str = ""
    sentences: List[str] = Field(default_factory=list)
