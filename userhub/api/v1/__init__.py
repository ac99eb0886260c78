"""API v1 endpoints for UserHub.

The ApiV1 blueprint aggregates all v1 resources:
- Users

Registration is public. Every other user endpoint requires a bearer token
(see userhub.auth.decorators.auth_required).
"""

from flask import Blueprint

from ...config import settings
from . import users

api_v1_bp = Blueprint("api_v1", __name__, url_prefix=settings.api_v1_prefix)

# users_bp has url_prefix="/users", so full path is /api/v1/users
api_v1_bp.register_blueprint(users.users_bp)

__all__ = ["api_v1_bp"]
