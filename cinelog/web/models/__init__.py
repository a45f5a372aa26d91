"""
Pydantic schemas for request validation and JSON responses.
"""

from pydantic import ValidationError

from cinelog.web.models.user import SignUpForm, SignInForm
from cinelog.web.models.movie import MovieCreate, MovieUpdate, MovieResponse, MovieResult
from cinelog.web.models.review import ReviewCreate


def describe_validation_error(exc: ValidationError) -> str:
    """Flatten a ValidationError into a single human-readable line."""
    parts = []
    for error in exc.errors():
        field = ".".join(str(loc) for loc in error["loc"])
        parts.append(f"{field}: {error['msg']}" if field else error["msg"])
    return "; ".join(parts)


__all__ = [
    "SignUpForm",
    "SignInForm",
    "MovieCreate",
    "MovieUpdate",
    "MovieResponse",
    "MovieResult",
    "ReviewCreate",
    "describe_validation_error",
]
