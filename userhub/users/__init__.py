"""User registration, lookup, and profile mutation."""

from . import service

__all__ = ["service"]
