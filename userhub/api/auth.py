"""Authentication endpoints for UserHub.

These endpoints are top-level routes, not under /api/v1/:
- POST /auth/register - Create a user account
- POST /auth/login    - Authenticate and return a JWT token
- GET  /auth/me       - Get the authenticated user's profile

All endpoints return JSON responses.
"""

import logging

from flask import Blueprint, jsonify

from ..auth import service
from ..auth.decorators import auth_required
from ..db import get_core
from ..exceptions import ResourceNotFound
from ..schemas import UserCreate, UserLogin
from ..users import service as user_service
from .validation import validate_request

logger = logging.getLogger(__name__)


auth_bp = Blueprint("auth", __name__, url_prefix="/auth")


@auth_bp.post("/register")
@validate_request
def register(data: UserCreate):
    """
    Register a new user.

    Same behavior as POST /api/v1/users.

    Example request:
    ```json
    {"email": "a@x.com", "password": "p1", "name": "A"}
    ```

    Example response (201):
    ```json
    {"id": 1, "email": "a@x.com", "name": "A", "active": true}
    ```
    """
    with get_core(atomic=True) as core:
        user = user_service.register(core, data)

    return jsonify(user.model_dump()), 201


@auth_bp.post("/login")
@validate_request
def login(data: UserLogin):
    """
    Authenticate user and return JWT token.

    Returns:
        200: {"token": "...", "email": "...", "name": "..."}
        401: InvalidCredentials or AccountDisabled

    Example request:
    ```json
    {"email": "a@x.com", "password": "p1"}
    ```
    """
    core = get_core()
    auth = service.authenticate(core, data.email, data.password)

    return jsonify(auth.model_dump()), 200


@auth_bp.get("/me")
@auth_required
def me(caller: str):
    """
    Get the authenticated user's profile.

    Requires: Authorization: Bearer <token>

    Returns:
        200: {"id": 1, "email": "a@x.com", "name": "A", "active": true}
        401: Missing or invalid token
        404: Token subject no longer matches a user
    """
    core = get_core()
    user = user_service.get_user_by_email(core, caller)
    if user is None:
        raise ResourceNotFound("User not found", {"email": caller})

    return jsonify(user.model_dump()), 200
