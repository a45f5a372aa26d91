"""
Pydantic schemas for sign-up and sign-in forms.
"""

from pydantic import BaseModel, Field, field_validator

# bcrypt only uses the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


class SignUpForm(BaseModel):
    """Form body for creating an account."""

    username: str = Field(..., min_length=1, max_length=50)
    password: str = Field(..., min_length=1)

    @field_validator("username")
    @classmethod
    def strip_username(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Username must not be blank")
        return value

    @field_validator("password")
    @classmethod
    def check_password_length(cls, value: str) -> str:
        if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return value


class SignInForm(BaseModel):
    """Form body for signing in."""

    username: str
    password: str

    @field_validator("username")
    @classmethod
    def strip_username(cls, value: str) -> str:
        # Usernames are stored stripped at sign-up
        return value.strip()
