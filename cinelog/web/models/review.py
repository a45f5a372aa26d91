"""
Pydantic schemas for Review forms.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ReviewCreate(BaseModel):
    """Form body for adding a review to a movie."""

    model_config = ConfigDict(allow_inf_nan=False)

    content: str = Field(..., min_length=1)
    rating: float | None = Field(None, ge=1.0, le=5.0)

    @field_validator("rating", mode="before")
    @classmethod
    def blank_rating_is_none(cls, value):
        # HTML forms submit an empty string for an untouched number input
        if isinstance(value, str) and not value.strip():
            return None
        return value
