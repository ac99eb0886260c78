"""
Tests for Pydantic schemas (API validation).

Tests verify that:
- Emails are normalized and malformed ones rejected
- Required fields must be non-blank
- Partial updates track which fields were actually sent
- Responses never carry a password hash
"""

import pytest
from pydantic import ValidationError

from userhub.schemas import (
    AuthResponse,
    TokenPayload,
    UserCreate,
    UserLogin,
    UserPage,
    UserResponse,
    UserUpdate,
)


class TestUserCreate:
    """Tests for UserCreate schema (registration)."""

    def test_create_with_valid_data(self):
        user = UserCreate(email="a@x.com", password="p1", name="A")
        assert user.email == "a@x.com"
        assert user.password == "p1"
        assert user.name == "A"

    def test_email_normalized(self):
        """Email should be trimmed and lowercased."""
        user = UserCreate(email="  Alice@Example.COM ", password="p1", name="Alice")
        assert user.email == "alice@example.com"

    @pytest.mark.parametrize("email", ["", "not-an-email", "a@b", "a b@x.com", "@x.com"])
    def test_invalid_email_rejected(self, email):
        with pytest.raises(ValidationError):
            UserCreate(email=email, password="p1", name="A")

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError):
            UserCreate(email="a@x.com", password="p1", name="   ")

    def test_name_trimmed(self):
        user = UserCreate(email="a@x.com", password="p1", name="  Alice  ")
        assert user.name == "Alice"

    def test_blank_password_rejected(self):
        with pytest.raises(ValidationError):
            UserCreate(email="a@x.com", password="   ", name="A")

    def test_empty_password_rejected(self):
        with pytest.raises(ValidationError):
            UserCreate(email="a@x.com", password="", name="A")

    def test_password_over_72_bytes_rejected(self):
        """bcrypt ignores bytes past 72, so longer passwords are refused."""
        with pytest.raises(ValidationError):
            UserCreate(email="a@x.com", password="é" * 40, name="A")

    def test_missing_fields_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            UserCreate(email="a@x.com")

        fields = {err["loc"][0] for err in exc_info.value.errors()}
        assert fields == {"password", "name"}


class TestUserLogin:
    """Tests for UserLogin schema."""

    def test_email_normalized(self):
        login = UserLogin(email="A@X.com", password="p1")
        assert login.email == "a@x.com"

    def test_password_is_not_trimmed(self):
        login = UserLogin(email="a@x.com", password=" p1 ")
        assert login.password == " p1 "

    def test_empty_password_rejected(self):
        with pytest.raises(ValidationError):
            UserLogin(email="a@x.com", password="")


class TestUserUpdate:
    """Tests for UserUpdate schema (partial update)."""

    def test_all_fields_optional(self):
        update = UserUpdate()
        assert update.model_dump(exclude_unset=True) == {}

    def test_only_name_is_set(self):
        update = UserUpdate(name="B")
        assert update.model_dump(exclude_unset=True) == {"name": "B"}

    def test_only_active_is_set(self):
        update = UserUpdate(active=False)
        assert update.model_dump(exclude_unset=True) == {"active": False}

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError):
            UserUpdate(name="  ")

    def test_null_name_allowed(self):
        update = UserUpdate(name=None)
        assert update.name is None


class TestResponses:
    """Tests for response schemas."""

    def test_user_response_has_no_password_field(self):
        assert set(UserResponse.model_fields) == {"id", "email", "name", "active"}

    def test_user_page_serializes(self):
        page = UserPage(
            content=[UserResponse(id=1, email="a@x.com", name="A", active=True)],
            page=0,
            size=10,
            total_elements=1,
            total_pages=1,
        )
        data = page.model_dump()
        assert data["content"][0]["email"] == "a@x.com"
        assert data["total_elements"] == 1

    def test_auth_response_fields(self):
        auth = AuthResponse(token="t", email="a@x.com", name="A")
        assert auth.model_dump() == {"token": "t", "email": "a@x.com", "name": "A"}

    def test_token_payload(self):
        payload = TokenPayload(sub="a@x.com", iat=1, exp=2)
        assert payload.sub == "a@x.com"


def test_package_exports():
    import userhub.schemas

    assert "UserBase" not in userhub.schemas.__all__
    assert "UserCreate" in userhub.schemas.__all__
