from typing import List, Optional
from pydantic import BaseModel, Field

from .base import TextAPIModel


class ClassifyParams(BaseModel):
    """Either `url` or `text` is required. `text` wins when both are set."""
    text: Optional[str] = None
    url: Optional[str] = None
    # en, de, fr, es, it, pt or auto. The service defaults to en.
    language: Optional[str] = None

class Category(TextAPIModel):
    # IPTC subject code
    code: str = ""
    label: str = ""
    confidence: float = 0.0

class ClassifyResponse(TextAPIModel):
    text: str = ""
    language: str = ""
    categories: List[Category] = Field(default_factory=list)


class ClassifyByTaxonomyParams(BaseModel):
    text: Optional[str] = None
    url: Optional[str] = None
    language: Optional[str] = None
    # iab-qag or iptc-subjectcode
    taxonomy: Optional[str] = None

class TaxonomyLink(TextAPIModel):
    link: str = ""
    rel: str = ""

class TaxonomyCategory(TextAPIModel):
    id: str = ""
    label: str = ""
    score: float = 0.0
    confident: bool = False
    links: List[TaxonomyLink] = Field(default_factory=list)

class ClassifyByTaxonomyResponse(TextAPIModel):
    text: str = ""
    language: str = ""
    taxonomy: str = ""
    categories: List[TaxonomyCategory] = Field(default_factory=list)


class UnsupervisedClassifyParams(BaseModel):
    text: Optional[str] = None
    url: Optional[str] = None
    # At least two labels to choose from
    classes: List[str] = Field(default_factory=list)
    # Number of concepts used to measure semantic similarity
    number_of_concepts: Optional[int] = None

class UnsupervisedClass(TextAPIModel):
    label: str = ""
    score: float = 0.0

class UnsupervisedClassifyResponse(TextAPIModel):
    text: str = ""
    classes: List[UnsupervisedClass] = Field(default_factory=list)
