"""User CRUD endpoints for UserHub API.

- POST   /api/v1/users            - Register user (public)
- GET    /api/v1/users            - List active users (paginated)
- GET    /api/v1/users/{id}       - Get single user
- PUT    /api/v1/users/{id}       - Update own user (partial)
- DELETE /api/v1/users/{id}       - Deactivate own user (soft delete)

Update and delete are only allowed when the token's email matches the
target user's email.
"""

from flask import Blueprint, jsonify, request

from ...auth.decorators import auth_required
from ...db import get_core
from ...exceptions import ValidationError
from ...schemas import UserCreate, UserUpdate
from ...users import service
from ..validation import validate_request

users_bp = Blueprint("users", __name__, url_prefix="/users")


def _int_arg(name: str, default: int | None) -> int | None:
    """Read an integer query parameter, raising ValidationError if malformed."""
    raw = request.args.get(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValidationError(
            f"Query parameter '{name}' must be an integer",
            {name: raw}
        )


@users_bp.post("")
@validate_request
def create_user(data: UserCreate):
    """
    Register a new user.

    Request Body (UserCreate):
        - email: str (required, unique)
        - password: str (required)
        - name: str (required)

    Returns:
        201: UserResponse
        400: Validation error
        409: Email already exists
    """
    with get_core(atomic=True) as core:
        user = service.register(core, data)

    return jsonify(user.model_dump()), 201


@users_bp.get("")
@auth_required
def list_users(caller: str):
    """
    List active users.

    Query Parameters:
        - page: int - Zero-based page index (default: 0)
        - size: int - Page size (default: settings.default_page_size)
        - sort: str - "name", "email" or "id", optionally ",asc"/",desc"
                      (default: "name")

    Returns:
        200: UserPage
        400: Invalid paging parameters
    """
    page = _int_arg("page", 0)
    size = _int_arg("size", None)
    sort = request.args.get("sort") or "name"

    core = get_core()
    result = service.list_active_users(core, page=page, size=size, sort=sort)

    return jsonify(result.model_dump())


@users_bp.get("/<int:user_id>")
@auth_required
def get_user(user_id: int, caller: str):
    """
    Get a single user by ID.

    Returns:
        200: UserResponse
        404: User not found
    """
    core = get_core()
    user = service.get_user(core, user_id)

    return jsonify(user.model_dump())


@users_bp.put("/<int:user_id>")
@auth_required
@validate_request
def update_user(user_id: int, caller: str, data: UserUpdate):
    """
    Update the caller's own user.

    Only provided fields are updated (partial update).

    Request Body (UserUpdate):
        - name: str | None
        - active: bool | None

    Returns:
        200: UserResponse
        400: Validation error
        403: Caller does not own this user
        404: User not found
    """
    with get_core(atomic=True) as core:
        user = service.update_user(core, user_id, caller, data)

    return jsonify(user.model_dump())


@users_bp.delete("/<int:user_id>")
@auth_required
def delete_user(user_id: int, caller: str):
    """
    Deactivate the caller's own user (soft delete).

    Returns:
        204: No content
        403: Caller does not own this user
        404: User not found
    """
    with get_core(atomic=True) as core:
        service.deactivate_user(core, user_id, caller)

    return "", 204
