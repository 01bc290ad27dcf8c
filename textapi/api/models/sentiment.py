from typing import Optional
from pydantic import BaseModel

from .base import TextAPIModel


class SentimentParams(BaseModel):
    text: Optional[str] = None
    url: Optional[str] = None
    # "tweet" (default) for short text, "document" for longer bodies
    mode: Optional[str] = None

class SentimentResponse(TextAPIModel):
    text: str = ""
    polarity: str = ""
    polarity_confidence: float = 0.0
    subjectivity: str = ""
    subjectivity_confidence: float = 0.0
