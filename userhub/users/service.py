"""User service: registration, lookup, listing, update and soft delete.

Every mutating operation that touches an existing record takes the caller's
email explicitly and only proceeds when it equals the record's email. There
is no administrative override.

Functions here never commit; callers use get_core(atomic=True) or commit
the Core themselves.
"""

import logging
import math
import sqlite3

from ..auth.service import hash_password
from ..config import settings
from ..db import Core
from ..exceptions import DuplicateEmail, Forbidden, ValidationError
from ..schemas import UserCreate, UserPage, UserResponse, UserUpdate

logger = logging.getLogger(__name__)

# SQLite binds integers as signed 64-bit
MAX_SQLITE_INTEGER = 2**63 - 1


def _row_to_user_response(row: sqlite3.Row) -> UserResponse:
    """Project a users row onto the public response (drops password_hash)."""
    return UserResponse(
        id=row["id"],
        email=row["email"],
        name=row["name"],
        active=bool(row["active"]),
    )


def _get_owned(core: Core, user_id: int, caller: str, action: str) -> sqlite3.Row:
    """Load a user and require that the caller owns it.

    Raises:
        ResourceNotFound: If user_id doesn't exist
        Forbidden: If caller's email differs from the record's email
    """
    row = core.user.get_by_id(user_id)
    if row["email"] != caller:
        logger.warning(f"User {caller} attempted to {action} user ID {user_id}")
        raise Forbidden(
            f"You are not authorized to {action} this user.",
            {"user_id": user_id}
        )
    return row


# ============================================================================
# Registration
# ============================================================================


def register(core: Core, data: UserCreate) -> UserResponse:
    """
    Create a new active user.

    The existence check is a fast path. The UNIQUE constraint on email is
    the real guard, and a conflict on insert is reported as DuplicateEmail.

    Raises:
        DuplicateEmail: If the email is already registered
    """
    logger.info(f"Attempting to create user with email: {data.email}")

    if core.user.exists_by_email(data.email):
        logger.warning(f"Creation failed. Email already exists: {data.email}")
        raise DuplicateEmail(details={"email": data.email})

    password_hash = hash_password(data.password)

    try:
        user_id = core.user.create(
            email=data.email,
            password_hash=password_hash,
            name=data.name,
            active=True
        )
    except sqlite3.IntegrityError:
        logger.warning(f"Creation failed. Email taken concurrently: {data.email}")
        raise DuplicateEmail(details={"email": data.email})

    logger.info(f"User created successfully with ID: {user_id}")
    return _row_to_user_response(core.user.get_by_id(user_id))


# ============================================================================
# Lookup and Listing
# ============================================================================


def get_user(core: Core, user_id: int) -> UserResponse:
    """Get a user by ID (active or not).

    Raises:
        ResourceNotFound: If user_id doesn't exist
    """
    return _row_to_user_response(core.user.get_by_id(user_id))


def get_user_by_email(core: Core, email: str) -> UserResponse | None:
    """Get a user by email, or None."""
    row = core.user.get_by_email(email)
    return _row_to_user_response(row) if row else None


def list_active_users(
    core: Core,
    page: int = 0,
    size: int | None = None,
    sort: str = "name"
) -> UserPage:
    """
    List active users, one page at a time.

    Args:
        core: Database Core
        page: Zero-based page index
        size: Page size (defaults to settings.default_page_size)
        sort: "field" or "field,asc|desc" where field is id, email or name

    Raises:
        ValidationError: If page, size or sort is invalid
    """
    if size is None:
        size = settings.default_page_size

    if page < 0:
        raise ValidationError("Page index must not be negative", {"page": page})
    if size < 1 or size > settings.max_page_size:
        raise ValidationError(
            f"Page size must be between 1 and {settings.max_page_size}",
            {"size": size}
        )
    if page * size > MAX_SQLITE_INTEGER:
        raise ValidationError("Page index is too large", {"page": page})

    logger.debug(f"Fetching active users: page={page} size={size} sort={sort}")

    try:
        rows = core.user.list_active(limit=size, offset=page * size, sort=sort)
    except ValueError as e:
        raise ValidationError(str(e), {"sort": sort})

    total = core.user.count_active()

    return UserPage(
        content=[_row_to_user_response(row) for row in rows],
        page=page,
        size=size,
        total_elements=total,
        total_pages=math.ceil(total / size),
    )


# ============================================================================
# Profile Mutation
# ============================================================================


def update_user(core: Core, user_id: int, caller: str, data: UserUpdate) -> UserResponse:
    """
    Apply a partial update to the caller's own user record.

    Only fields present in the request are changed.

    Raises:
        ResourceNotFound: If user_id doesn't exist
        Forbidden: If the caller does not own the record
    """
    _get_owned(core, user_id, caller, "update")

    update_data = data.model_dump(exclude_unset=True)

    if update_data:
        core.user.update(user_id, update_data)
        if data.active is not None:
            logger.info(f"User ID {user_id} status changed to: {data.active}")

    return _row_to_user_response(core.user.get_by_id(user_id))


def deactivate_user(core: Core, user_id: int, caller: str) -> None:
    """
    Soft delete the caller's own user record by setting active=false.

    Idempotent: deactivating an inactive user succeeds.

    Raises:
        ResourceNotFound: If user_id doesn't exist
        Forbidden: If the caller does not own the record
    """
    logger.info(f"Request to deactivate (soft delete) user ID: {user_id}")

    _get_owned(core, user_id, caller, "delete")
    core.user.update(user_id, {"active": False})

    logger.info(f"User ID {user_id} deactivated successfully.")
