"""Test fixtures for fuzzyrank tests."""

import pytest

from fuzzyrank.search.schema import ColumnSchema, TableSchema


@pytest.fixture
def clean_env(monkeypatch):
    """Clean environment variables for testing."""
    # Remove all custom env vars to test defaults
    env_vars = [
        "FUZZY_RESULT_LIMIT",
        "FUZZY_MIN_SCORE",
        "FUZZY_MAX_TEXT_LENGTH",
    ]
    for var in env_vars:
        monkeypatch.delenv(var, raising=False)
    yield


@pytest.fixture
def named_items():
    """Items exposing their text through a `name` field."""
    return [{"name": "users"}, {"name": "user_roles"}, {"name": "posts"}]


@pytest.fixture
def sample_schema():
    """A small database schema."""
    return [
        TableSchema(
            table_name="users",
            columns=[ColumnSchema("id", "integer"), ColumnSchema("email", "text")],
        ),
        TableSchema(
            table_name="orders",
            columns=[
                ColumnSchema("id", "integer"),
                ColumnSchema("user_id", "integer"),
                ColumnSchema("total", "numeric"),
            ],
        ),
        TableSchema(
            table_name="posts",
            columns=[ColumnSchema("id", "integer"), ColumnSchema("title", "text")],
        ),
    ]
