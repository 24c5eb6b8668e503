from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SkillLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class PatternRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    project_type: str = Field(alias="projectType", min_length=1)
    skill_level: SkillLevel = Field(alias="skillLevel")
    yarn_weight: Optional[str] = Field(default="", alias="yarnWeight")
    size: Optional[str] = ""
    description: str = Field(min_length=1)

    @field_validator("project_type", "yarn_weight", "size", "description", mode="before")
    @classmethod
    def _strip(cls, value):
        if value is None:
            return ""
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("skill_level", mode="before")
    @classmethod
    def _normalise_level(cls, value):
        if isinstance(value, str):
            return value.strip().lower()
        return value

    def to_payload(self) -> dict[str, str]:
        """Five-field JSON body in the wire's camelCase."""
        return self.model_dump(by_alias=True, mode="json")
