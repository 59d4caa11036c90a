"""Demo configuration schema."""

from typing import List

from pydantic import BaseModel, Field, field_validator, model_validator


class LevelBoundsConfig(BaseModel):
    """Inclusive bounds for the Bridge demo's volume and channel levels."""

    min_level: int = Field(0, description="Lowest reachable level")
    max_level: int = Field(100, description="Highest reachable level")

    @model_validator(mode="after")
    def validate_bounds(self) -> "LevelBoundsConfig":
        """Ensure the range is not empty."""
        if self.min_level >= self.max_level:
            raise ValueError("min_level must be lower than max_level")
        return self


class DemoConfig(BaseModel):
    """Inputs used by the driving scripts."""

    strategy_sample: List[str] = Field(
        default_factory=lambda: ["c", "e", "a", "d", "b"],
        description="Data handed to each extraction strategy",
    )
    editor_texts: List[str] = Field(
        default_factory=lambda: ["Smart Building Ltd.", "Smartest Building Ltd."],
        description="Initial text of the Command demo's editors",
    )
    level_bounds: LevelBoundsConfig = Field(default_factory=LevelBoundsConfig)

    @field_validator("editor_texts")
    @classmethod
    def validate_editor_texts(cls, v: List[str]) -> List[str]:
        """The Command demo needs two editors to move text between."""
        if len(v) < 2:
            raise ValueError("editor_texts must contain at least two entries")
        return v
