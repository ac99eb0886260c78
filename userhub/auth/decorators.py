"""Authentication decorators for protected endpoints.

@auth_required resolves the caller from the bearer token and hands it to
the view as an explicit ``caller`` keyword argument. Views pass it on to
the service layer; nothing reads identity from global state.
"""

import logging
from functools import wraps

import jwt
from flask import request

from ..exceptions import AuthenticationError
from . import token

logger = logging.getLogger(__name__)


def authenticate_request() -> str:
    """
    Resolve the caller's email from the Authorization header.

    Expects: Authorization: Bearer <token>

    Returns:
        The email carried in the verified token

    Raises:
        AuthenticationError: If the header is missing, malformed, or the
            token is expired or invalid
    """
    auth_header = request.headers.get("Authorization")
    if auth_header is None:
        logger.warning("Unauthenticated request to protected endpoint")
        raise AuthenticationError(
            "Authentication required",
            {"code": "missing_auth"}
        )

    parts = auth_header.split(" ")
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise AuthenticationError(
            "Invalid authorization header format",
            {"expected": "Authorization: Bearer <token>"}
        )

    try:
        payload = token.validate_access_token(parts[1])
    except jwt.ExpiredSignatureError:
        logger.warning("JWT token expired")
        raise AuthenticationError("Token has expired", {"code": "token_expired"})
    except jwt.InvalidTokenError as e:
        logger.warning(f"Invalid JWT token: {e}")
        raise AuthenticationError("Invalid token", {"code": "invalid_token"})

    logger.debug(f"JWT authentication successful for {payload.sub}")
    return payload.sub


def auth_required(f):
    """
    Decorator to require a valid bearer token.

    The wrapped view receives the authenticated email as ``caller``.

    Example:
    ```python
    @users_bp.delete("/<int:user_id>")
    @auth_required
    def delete_user(user_id: int, caller: str):
        ...
    ```
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        kwargs["caller"] = authenticate_request()
        return f(*args, **kwargs)

    return wrapper
