"""Shared test fixtures for userhub."""

import os
import sqlite3
import tempfile

# Keep the import-time database out of the working tree and make bcrypt fast
os.environ.setdefault("DATABASE_PATH", os.path.join(tempfile.gettempdir(), "userhub-test.db"))
os.environ.setdefault("BCRYPT_WORK_FACTOR", "4")

import pytest

from userhub.main import app
from userhub.config import settings
from userhub.db import Core
from userhub.schema import get_schema_sql
from userhub.schemas import UserCreate
from userhub.auth import token as auth_token
from userhub.users import service as user_service


@pytest.fixture
def test_db():
    """Create in-memory test database with schema."""
    db = sqlite3.connect(":memory:")
    db.row_factory = sqlite3.Row
    db.execute("PRAGMA foreign_keys = ON")
    db.executescript(get_schema_sql())
    db.commit()

    yield db

    db.close()


@pytest.fixture
def core(test_db):
    """Core wrapping the in-memory test database (autocommit mode)."""
    return Core(test_db)


@pytest.fixture
def client():
    """Create test client for API testing.

    Each test gets a fresh temp-file database.
    """
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)
    original_db_path = settings.database_path

    try:
        settings.database_path = db_path

        from userhub.db import init_db
        init_db()

        app.config['TESTING'] = True
        with app.test_client() as client:
            yield client

    finally:
        settings.database_path = original_db_path
        try:
            os.unlink(db_path)
        except OSError:
            pass


@pytest.fixture
def registered_user(core):
    """Register a@x.com in the in-memory database.

    Returns a tuple of (user, password).
    """
    password = "p1"
    user = user_service.register(core, UserCreate(email="a@x.com", password=password, name="A"))
    core.commit()
    return user, password


def register_via_api(client, email: str, password: str = "Secret123", name: str = "User") -> dict:
    """Register a user through the HTTP API and return the response JSON."""
    response = client.post(
        "/api/v1/users",
        json={"email": email, "password": password, "name": name}
    )
    assert response.status_code == 201, response.get_json()
    return response.get_json()


def bearer(email: str) -> dict:
    """Authorization header for a token issued to email."""
    return {"Authorization": f"Bearer {auth_token.generate_access_token(email)}"}


@pytest.fixture
def alice(client):
    """Alice, registered through the API, with her auth headers."""
    user = register_via_api(client, "alice@example.com", name="Alice")
    return user, bearer("alice@example.com")


@pytest.fixture
def bob(client):
    """Bob, registered through the API, with his auth headers."""
    user = register_via_api(client, "bob@example.com", name="Bob")
    return user, bearer("bob@example.com")
