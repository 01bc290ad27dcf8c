from .base import ErrorEnvelope, TextAPIModel
from .classification import (
    Category,
    ClassifyByTaxonomyParams,
    ClassifyByTaxonomyResponse,
    ClassifyParams,
    ClassifyResponse,
    TaxonomyCategory,
    TaxonomyLink,
    UnsupervisedClass,
    UnsupervisedClassifyParams,
    UnsupervisedClassifyResponse,
)
from .combined import COMBINED_ENDPOINTS, CombinedParams, CombinedResponse, EndpointResult
from .concepts import Concept, ConceptsParams, ConceptsResponse, SurfaceForm
from .entities import EntitiesParams, EntitiesResponse
from .extract import ExtractParams, ExtractResponse
from .hashtags import HashtagsParams, HashtagsResponse
from .images import ImageTag, ImageTagsParams, ImageTagsResponse
from .language import LanguageParams, LanguageResponse
from .microformats import Address, HCard, Location, MicroformatsParams, MicroformatsResponse, Name
from .related import RelatedParams, RelatedPhrase, RelatedResponse
from .sentiment import SentimentParams, SentimentResponse
from .summarize import SummarizeParams, SummarizeResponse

__all__ = [
    "TextAPIModel", "ErrorEnvelope",
    "ClassifyParams", "ClassifyResponse", "Category",
    "ClassifyByTaxonomyParams", "ClassifyByTaxonomyResponse", "TaxonomyCategory", "TaxonomyLink",
    "UnsupervisedClassifyParams", "UnsupervisedClassifyResponse", "UnsupervisedClass",
    "CombinedParams", "CombinedResponse", "EndpointResult", "COMBINED_ENDPOINTS",
    "ConceptsParams", "ConceptsResponse", "Concept", "SurfaceForm",
    "EntitiesParams", "EntitiesResponse",
    "ExtractParams", "ExtractResponse",
    "HashtagsParams", "HashtagsResponse",
    "ImageTagsParams", "ImageTagsResponse", "ImageTag",
    "LanguageParams", "LanguageResponse",
    "MicroformatsParams", "MicroformatsResponse", "HCard", "Name", "Location", "Address",
    "RelatedParams", "RelatedResponse", "RelatedPhrase",
    "SentimentParams", "SentimentResponse",
    "SummarizeParams", "SummarizeResponse",
]
