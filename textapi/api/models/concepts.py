from typing import Dict, List, Optional
from pydantic import BaseModel, Field

from .base import TextAPIModel


class ConceptsParams(BaseModel):
    text: Optional[str] = None
    url: Optional[str] = None
    language: Optional[str] = None

class SurfaceForm(TextAPIModel):
    string: str = ""
    score: float = 0.0
    offset: int = 0

class Concept(TextAPIModel):
    surface_forms: List[SurfaceForm] = Field(default_factory=list, alias="surfaceForms")
    types: List[str] = Field(default_factory=list)
    support: int = 0

class ConceptsResponse(TextAPIModel):
    """Concepts keyed by their URI."""
    text: str = ""
    language: str = ""
    concepts: Dict[str, Concept] = Field(default_factory=dict)
