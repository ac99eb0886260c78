"""User schemas for API validation."""

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def normalize_email(value: str) -> str:
    """Trim and lowercase an email, rejecting obviously malformed ones."""
    value = value.strip().lower()
    if not EMAIL_PATTERN.match(value):
        raise ValueError("Invalid email address")
    return value


def _require_text(value: str) -> str:
    if not value.strip():
        raise ValueError("Must not be blank")
    return value.strip()


class UserBase(BaseModel):
    """Fields shared by user creation and responses."""

    email: str = Field(..., max_length=254, description="Login identity, unique across users")
    name: str = Field(..., max_length=100, description="Display name")

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return normalize_email(v)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _require_text(v)


class UserCreate(UserBase):
    """Registration request body."""

    password: str = Field(..., min_length=1, max_length=72, description="Plaintext password")

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Password must not be blank")
        # bcrypt only looks at the first 72 bytes
        if len(v.encode("utf-8")) > 72:
            raise ValueError("Password must be at most 72 bytes")
        return v


class UserUpdate(BaseModel):
    """Partial update request body.

    Omitted (or null) fields are left unchanged.
    """

    name: str | None = Field(default=None, max_length=100)
    active: bool | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str | None) -> str | None:
        if v is None:
            return v
        return _require_text(v)


class UserResponse(BaseModel):
    """Public projection of a user. Never includes the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    name: str
    active: bool


class UserPage(BaseModel):
    """One page of active users."""

    content: list[UserResponse]
    page: int
    size: int
    total_elements: int
    total_pages: int
