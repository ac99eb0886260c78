"""JWT token service.

Tokens are HS256-signed and carry the user's email as subject:

    {"sub": "a@x.com", "iat": 1767225600, "exp": 1769817600}

The signing key, algorithm and lifetime come from settings.
"""

import logging
from datetime import timedelta

import jwt

from ..config import settings
from ..schemas import TokenPayload
from ..utils import isodatetime

logger = logging.getLogger(__name__)


def generate_access_token(email: str) -> str:
    """Issue a bearer token bound to the given email.

    Args:
        email: Identity claim (stored as "sub")

    Returns:
        Encoded JWT string
    """
    issued_at = isodatetime.now_unix()
    expires_at = issued_at + int(timedelta(days=settings.jwt_expiry_days).total_seconds())

    payload = {
        "sub": email,
        "iat": issued_at,
        "exp": expires_at,
    }
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def validate_access_token(token: str) -> TokenPayload:
    """Verify signature and expiry, returning the decoded claims.

    Raises:
        jwt.ExpiredSignatureError: If the token has expired
        jwt.InvalidTokenError: If the token is malformed or badly signed
    """
    payload = jwt.decode(
        token,
        settings.jwt_secret_key,
        algorithms=[settings.jwt_algorithm],
        options={"require": ["sub", "iat", "exp"]},
    )
    return TokenPayload(**payload)

