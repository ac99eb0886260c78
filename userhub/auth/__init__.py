"""Authentication module for UserHub.

This module provides:
- Password hashing and verification (bcrypt)
- JWT token generation and validation
- The login flow
- The @auth_required decorator for protected endpoints
"""

from . import decorators, service, token

__all__ = ["decorators", "service", "token"]
