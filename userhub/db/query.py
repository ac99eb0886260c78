"""SQL clause builders for parameterized queries.

Values always travel as parameters. Column names are interpolated, so
callers must only pass column names from trusted sources.
"""

from typing import Any


def build_update_clause(
    data: dict[str, Any],
    exclude: set[str] | None = None
) -> tuple[str, list[Any]]:
    """Build the SET part of an UPDATE statement.

    Args:
        data: Column names mapped to new values; None values are skipped
        exclude: Columns that must never be updated (e.g. {"id"})

    Returns:
        Tuple of (clause, params). Returns ("", []) when nothing applies.
    """
    exclude = exclude or set()
    fragments = []
    params = []

    for key, value in data.items():
        if key in exclude or value is None:
            continue
        fragments.append(f"{key} = ?")
        params.append(value)

    return ", ".join(fragments), params


def build_order_clause(
    sort: str,
    allowed: set[str],
    default: str
) -> str:
    """Build an ORDER BY clause from a "field" or "field,direction" string.

    Args:
        sort: Sort expression such as "name" or "email,desc"
        allowed: Column names that may be sorted on
        default: Column used when sort is empty

    Returns:
        Clause like "name ASC"

    Raises:
        ValueError: If the column is not allowed or the direction is unknown
    """
    parts = [p.strip() for p in (sort or default).split(",")]
    column = parts[0] or default
    direction = parts[1].upper() if len(parts) > 1 and parts[1] else "ASC"

    if len(parts) > 2:
        raise ValueError(f"Invalid sort expression: {sort!r}")
    if column not in allowed:
        raise ValueError(f"Cannot sort by {column!r}")
    if direction not in {"ASC", "DESC"}:
        raise ValueError(f"Invalid sort direction: {parts[1]!r}")

    return f"{column} {direction}"
