"""HTTP layer for UserHub.

- auth: registration, login and current-user endpoints (top-level /auth/...)
- v1: user resource endpoints under the API v1 prefix
- validation: @validate_request decorator shared by both
"""
