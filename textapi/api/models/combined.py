from typing import Any, Dict, List, Optional, Tuple, Type
from pydantic import BaseModel, Field, model_validator

from .base import TextAPIModel, drop_nulls
from .classification import ClassifyResponse
from .concepts import ConceptsResponse
from .entities import EntitiesResponse
from .extract import ExtractResponse
from .hashtags import HashtagsResponse
from .language import LanguageResponse
from .sentiment import SentimentResponse
from .summarize import SummarizeResponse


class CombinedParams(BaseModel):
    text: Optional[str] = None
    url: Optional[str] = None
    # At least two of the COMBINED_ENDPOINTS keys
    endpoints: List[str] = Field(default_factory=list)

class EndpointResult(TextAPIModel):
    endpoint: str = ""
    # Shape depends on `endpoint`
    result: Any = None

class CombinedRawResponse(TextAPIModel):
    text: str = ""
    results: List[EndpointResult] = Field(default_factory=list)


# endpoint tag -> (CombinedResponse field, response model)
COMBINED_ENDPOINTS: Dict[str, Tuple[str, Type[TextAPIModel]]] = {
    "extract": ("article", ExtractResponse),
    "language": ("language", LanguageResponse),
    "entities": ("entities", EntitiesResponse),
    "concepts": ("concepts", ConceptsResponse),
    "classify": ("classifications", ClassifyResponse),
    "hashtags": ("hashtags", HashtagsResponse),
    "sentiment": ("sentiment", SentimentResponse),
    "summarize": ("summary", SummarizeResponse),
}


def decode_results(raw: CombinedRawResponse) -> Dict[str, Any]:
    """
    Turn the `{endpoint, result}` list into CombinedResponse fields.

    Each result is validated against the model its endpoint tag selects.
    Unknown tags and `null` results are skipped. A later entry with the same
    tag replaces an earlier one.
    """
    fields: Dict[str, Any] = {"text": raw.text}
    for entry in raw.results:
        target = COMBINED_ENDPOINTS.get(entry.endpoint)
        if target is None or entry.result is None:
            continue
        field_name, model = target
        fields[field_name] = model.model_validate(entry.result, by_alias=True, by_name=False)
    return fields


class CombinedResponse(TextAPIModel):
    """
    Outcome of a combined call, one field per sub-endpoint.

    Sub-endpoints that were not requested keep their default (empty) model.
    Always built from the `{text, results}` wire form.
    """
    text: str = ""
    article: ExtractResponse = Field(default_factory=ExtractResponse)
    summary: SummarizeResponse = Field(default_factory=SummarizeResponse)
    concepts: ConceptsResponse = Field(default_factory=ConceptsResponse)
    entities: EntitiesResponse = Field(default_factory=EntitiesResponse)
    hashtags: HashtagsResponse = Field(default_factory=HashtagsResponse)
    language: LanguageResponse = Field(default_factory=LanguageResponse)
    sentiment: SentimentResponse = Field(default_factory=SentimentResponse)
    classifications: ClassifyResponse = Field(default_factory=ClassifyResponse)

    @model_validator(mode="before")
    @classmethod
    def normalize_wire(cls, data: Any) -> Any:
        # Sub-endpoint fields only ever come from tagged `results` entries
        if isinstance(data, dict):
            return decode_results(CombinedRawResponse.model_validate(drop_nulls(data)))
        return data

    def to_wire(self) -> dict:
        results = [
            {"endpoint": tag, "result": getattr(self, field_name).to_wire()}
            for tag, (field_name, _) in COMBINED_ENDPOINTS.items()
        ]
        return {"text": self.text, "results": results}
