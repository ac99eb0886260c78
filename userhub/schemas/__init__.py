"""Pydantic schemas for API validation."""

from .auth import AuthResponse, TokenPayload, UserLogin
from .user import (
    UserCreate,
    UserPage,
    UserResponse,
    UserUpdate,
)

__all__ = [
    "UserCreate",
    "UserUpdate",
    "UserResponse",
    "UserPage",
    "UserLogin",
    "AuthResponse",
    "TokenPayload",
]
