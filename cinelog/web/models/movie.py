"""
Pydantic schemas for Movie forms and JSON results.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

# Largest year accepted for a movie
MAX_YEAR = 9999


class MovieCreate(BaseModel):
    """Request body for creating a movie."""

    model_config = ConfigDict(allow_inf_nan=False)

    name: str = Field(..., min_length=1)
    year: int = Field(..., ge=1, le=MAX_YEAR)
    rating: float = Field(..., ge=0)


class MovieUpdate(BaseModel):
    """Request body for updating a movie (all fields optional)."""

    model_config = ConfigDict(allow_inf_nan=False)

    name: str | None = Field(None, min_length=1)
    year: int | None = Field(None, ge=1, le=MAX_YEAR)
    rating: float | None = Field(None, ge=0)

    def changes(self) -> dict:
        """Fields that were supplied with a value."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


class MovieResponse(BaseModel):
    """Response model for a single movie."""

    movie_id: int
    name: str
    year: int
    rating: float
    created_by: int | None

    class Config:
        from_attributes = True


class MovieResult(BaseModel):
    """Structured result returned by the update and delete endpoints."""

    status: Literal["updated", "deleted", "not_found", "invalid"]
    movie: MovieResponse | None = None
    detail: str | None = None
