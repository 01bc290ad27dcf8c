from typing import Dict, List, Optional
from pydantic import BaseModel, Field

from .base import TextAPIModel


class EntitiesParams(BaseModel):
    text: Optional[str] = None
    url: Optional[str] = None

class EntitiesResponse(TextAPIModel):
    """Mentions grouped by entity type (keyword, location, person, ...)."""
    text: str = ""
    entities: Dict[str, List[str]] = Field(default_factory=dict)
