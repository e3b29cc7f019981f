"""Models for vision detection results."""

import math

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DetectedFoodCandidate(BaseModel):
    """Single food hypothesis produced by the vision model."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1)
    portion_grams: float = Field(alias="portionGrams", gt=0)
    confidence: float = 0.0

    @field_validator("confidence", mode="before")
    @classmethod
    def clamp_confidence(cls, value: object) -> object:
        if value is None:
            return 0.0
        if isinstance(value, bool) or not isinstance(value, int | float):
            return value
        if math.isnan(value):
            return 0.0
        return min(max(float(value), 0.0), 1.0)
