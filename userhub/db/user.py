"""User store operations.

IMPORT CONVENTION:
- Core accesses these through core.user property
- NO direct import needed when using Core API

Rows are never deleted. Deactivation is an UPDATE of the active column.
"""

import sqlite3
from typing import Any

from . import query
from ..exceptions import ResourceNotFound
from ..utils import isodatetime

SORTABLE_COLUMNS = {"id", "email", "name"}


class UserOperations:
    """User store operations backed by the users table."""

    def __init__(self, conn: sqlite3.Connection):
        """Initialize user operations with a database connection.

        Args:
            conn: SQLite connection with row_factory set to sqlite3.Row
        """
        self._conn = conn

    def get_by_id(self, user_id: int) -> sqlite3.Row:
        """Get user by ID.

        Raises:
            ResourceNotFound: If user_id doesn't exist
        """
        row = self._conn.execute(
            "SELECT * FROM users WHERE id = ?",
            (user_id,)
        ).fetchone()

        if not row:
            raise ResourceNotFound(
                f"User not found with id: {user_id}",
                {"user_id": user_id}
            )

        return row

    def get_by_email(self, email: str) -> sqlite3.Row | None:
        """Get user by email, or None if no such user exists."""
        return self._conn.execute(
            "SELECT * FROM users WHERE email = ?",
            (email,)
        ).fetchone()

    def exists_by_email(self, email: str) -> bool:
        """Check whether a user with this email exists (active or not)."""
        row = self._conn.execute(
            "SELECT 1 FROM users WHERE email = ?",
            (email,)
        ).fetchone()
        return row is not None

    def create(
        self,
        email: str,
        password_hash: str,
        name: str,
        active: bool = True
    ) -> int:
        """Insert a new user.

        Returns:
            The store-assigned integer ID

        Raises:
            sqlite3.IntegrityError: If the email is already taken
        """
        now = isodatetime.now()
        cursor = self._conn.execute(
            """INSERT INTO users (email, password_hash, name, active, created_at, updated_at)
               VALUES (?, ?, ?, ?, ?, ?)""",
            (email, password_hash, name, int(active), now, now)
        )
        return cursor.lastrowid

    def update(self, user_id: int, data: dict[str, Any]) -> None:
        """Update user with partial data.

        Note:
            - None values are skipped
            - id, email and created_at are never updated
            - updated_at is bumped whenever something changes
        """
        if "active" in data and data["active"] is not None:
            data["active"] = int(data["active"])

        update_clause, params = query.build_update_clause(
            data,
            exclude={"id", "email", "created_at", "updated_at"}
        )

        if update_clause:
            update_clause += ", updated_at = ?"
            params.extend([isodatetime.now(), user_id])
            self._conn.execute(
                f"UPDATE users SET {update_clause} WHERE id = ?",
                params
            )

    def list_active(
        self,
        limit: int = 10,
        offset: int = 0,
        sort: str = "name"
    ) -> list[sqlite3.Row]:
        """List active users.

        Args:
            limit: Maximum number of rows to return
            offset: Number of rows to skip
            sort: "column" or "column,asc|desc"; id is used as tie-breaker

        Raises:
            ValueError: If sort names an unknown column or direction
        """
        order_by = query.build_order_clause(sort, SORTABLE_COLUMNS, default="name")
        if not order_by.startswith("id "):
            order_by += ", id ASC"

        return self._conn.execute(
            f"""SELECT * FROM users
                WHERE active = 1
                ORDER BY {order_by}
                LIMIT ? OFFSET ?""",
            (limit, offset)
        ).fetchall()

    def count_active(self) -> int:
        """Count active users."""
        row = self._conn.execute(
            "SELECT COUNT(*) FROM users WHERE active = 1"
        ).fetchone()
        return row[0]
