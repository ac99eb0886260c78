"""Schema module for UserHub.

schema.sql is the source of truth for the data model.
"""

from pathlib import Path

SCHEMA_PATH = Path(__file__).parent / "schema.sql"


def get_schema_sql() -> str:
    """Return the contents of schema.sql."""
    with open(SCHEMA_PATH, "r") as f:
        return f.read()


__all__ = ["SCHEMA_PATH", "get_schema_sql"]
