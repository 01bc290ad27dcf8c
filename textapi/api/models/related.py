from typing import List, Optional
from pydantic import BaseModel, Field

from .base import TextAPIModel


class RelatedParams(BaseModel):
    phrase: Optional[str] = None
    count: Optional[int] = None

class RelatedPhrase(TextAPIModel):
    phrase: str = ""
    distance: float = 0.0

class RelatedResponse(TextAPIModel):
    phrase: str = ""
    related: List[RelatedPhrase] = Field(default_factory=list)
