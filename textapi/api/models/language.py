from typing import Optional
from pydantic import BaseModel, Field

from .base import TextAPIModel


class LanguageParams(BaseModel):
    text: Optional[str] = None
    url: Optional[str] = None

class LanguageResponse(TextAPIModel):
    text: str = ""
    language: str = Field(default="", alias="lang")
    confidence: float = 0.0
