"""Tests for db/query.py clause builders."""

import pytest

from userhub.db.query import build_order_clause, build_update_clause


class TestBuildUpdateClause:
    """Tests for build_update_clause function."""

    def test_empty_dict_returns_empty_clause(self):
        assert build_update_clause({}) == ("", [])

    def test_fields_joined_with_comma(self):
        clause, params = build_update_clause({"name": "B", "active": 0})
        assert clause == "name = ?, active = ?"
        assert params == ["B", 0]

    def test_none_values_excluded(self):
        clause, params = build_update_clause({"name": "B", "active": None})
        assert clause == "name = ?"
        assert params == ["B"]

    def test_falsy_values_kept(self):
        """0 and False are real values, only None means 'not provided'."""
        clause, params = build_update_clause({"active": 0})
        assert clause == "active = ?"
        assert params == [0]

    def test_excluded_fields_skipped(self):
        clause, params = build_update_clause(
            {"id": 9, "email": "x@y.com", "name": "B"},
            exclude={"id", "email"}
        )
        assert clause == "name = ?"
        assert params == ["B"]


class TestBuildOrderClause:
    """Tests for build_order_clause function."""

    ALLOWED = {"id", "email", "name"}

    def test_field_only_defaults_to_ascending(self):
        assert build_order_clause("name", self.ALLOWED, default="name") == "name ASC"

    def test_explicit_direction(self):
        assert build_order_clause("email,desc", self.ALLOWED, default="name") == "email DESC"

    def test_direction_case_insensitive(self):
        assert build_order_clause("id,Asc", self.ALLOWED, default="name") == "id ASC"

    def test_empty_sort_uses_default(self):
        assert build_order_clause("", self.ALLOWED, default="name") == "name ASC"

    def test_whitespace_tolerated(self):
        assert build_order_clause(" name , desc ", self.ALLOWED, default="name") == "name DESC"

    def test_unknown_column_rejected(self):
        with pytest.raises(ValueError):
            build_order_clause("password_hash", self.ALLOWED, default="name")

    def test_unknown_direction_rejected(self):
        with pytest.raises(ValueError):
            build_order_clause("name,sideways", self.ALLOWED, default="name")

    def test_injection_attempt_rejected(self):
        with pytest.raises(ValueError):
            build_order_clause("name; DROP TABLE users", self.ALLOWED, default="name")
