from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

FALLBACK_MODEL = "fallback"


class PatternResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True, protected_namespaces=())

    pattern: str = Field(min_length=1)
    model_used: Optional[str] = Field(default=None, alias="modelUsed")
    error: Optional[str] = None

    @property
    def is_fallback(self) -> bool:
        return self.model_used == FALLBACK_MODEL

    def to_response(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)
