"""Data transfer objects returned by the demo service."""
from enum import Enum
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field


class PatternCategory(str, Enum):
    """Classic catalogue grouping of the patterns."""
    STRUCTURAL = "structural"
    CREATIONAL = "creational"
    BEHAVIOURAL = "behavioural"


class DemoInfo(BaseModel):
    """Metadata describing a registered demo."""
    model_config = ConfigDict(frozen=True)

    name: str
    category: PatternCategory
    description: str
    intent: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")


class DemoResult(BaseModel):
    """Lines emitted by one demo run."""

    name: str
    category: PatternCategory
    lines: List[str] = Field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")
