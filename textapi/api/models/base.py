from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator


def drop_nulls(data: Any) -> Any:
    # `null` on the wire means "use the default"
    if isinstance(data, dict):
        return {k: v for k, v in data.items() if v is not None}
    return data


class TextAPIModel(BaseModel):
    """
    Base for response models: wire aliases, unknown keys ignored, nulls defaulted.

    Field names are accepted when building models in Python. Server bodies are
    decoded with `by_alias=True, by_name=False` so only wire names count.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def normalize_wire(cls, data: Any) -> Any:
        return drop_nulls(data)

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True)


class ErrorEnvelope(TextAPIModel):
    error: str = ""
