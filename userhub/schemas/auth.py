"""Authentication schemas for API validation."""

from pydantic import BaseModel, Field, field_validator

from .user import normalize_email


class UserLogin(BaseModel):
    """Login request body."""

    email: str = Field(..., max_length=254)
    password: str = Field(..., min_length=1, max_length=72)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return normalize_email(v)


class AuthResponse(BaseModel):
    """Successful login response."""

    token: str
    email: str
    name: str


class TokenPayload(BaseModel):
    """Decoded JWT claims. The subject is the user's email."""

    sub: str
    iat: int
    exp: int
