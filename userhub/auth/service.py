"""Credential handling and the login flow.

Password hashing uses bcrypt with the work factor from settings.
"""

import logging

import bcrypt

from ..config import settings
from ..db import Core
from ..exceptions import AccountDisabled, InvalidCredentials
from ..schemas import AuthResponse
from . import token

logger = logging.getLogger(__name__)


# ============================================================================
# Password Hashing
# ============================================================================


def hash_password(password: str) -> str:
    """Hash a plaintext password with a fresh salt."""
    salt = bcrypt.gensalt(rounds=settings.bcrypt_work_factor)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plaintext password against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Malformed hash or over-long password
        return False


# ============================================================================
# Login
# ============================================================================


def authenticate(core: Core, email: str, password: str) -> AuthResponse:
    """
    Authenticate a user and issue a bearer token.

    Checks run in a fixed order: the account must exist, then be active,
    then the password must match. Unknown email and wrong password raise
    the same InvalidCredentials error.

    Args:
        core: Database Core
        email: Normalized login email
        password: Plaintext password

    Returns:
        AuthResponse with token, email and name

    Raises:
        InvalidCredentials: Unknown email or wrong password
        AccountDisabled: Account exists but is inactive
    """
    row = core.user.get_by_email(email)
    if row is None:
        logger.warning(f"Failed login attempt for email: {email}")
        raise InvalidCredentials()

    if not row["active"]:
        logger.warning(f"Login attempt on disabled account: {email}")
        raise AccountDisabled()

    if not verify_password(password, row["password_hash"]):
        logger.warning(f"Failed login attempt for email: {email}")
        raise InvalidCredentials()

    access_token = token.generate_access_token(row["email"])
    logger.info(f"Successful login: {row['email']}")

    return AuthResponse(token=access_token, email=row["email"], name=row["name"])
