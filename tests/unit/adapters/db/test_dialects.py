"""Unit tests for database dialect handling."""

import pytest

from geodex.adapters.db.dialects import DialectName, UnsupportedDialect


@pytest.mark.parametrize(
    "input_str,expected",
    [
        ("postgresql", DialectName.POSTGRES),
        ("postgres", DialectName.POSTGRES),
        ("postgresql+psycopg", DialectName.POSTGRES),
        ("  PostgreSQL ", DialectName.POSTGRES),
        ("sqlite", DialectName.SQLITE),
        ("sqlite+pysqlite", DialectName.SQLITE),
    ],
)
def test_from_string_aliases(input_str, expected):
    """Backend names map to members, with or without a driver suffix."""
    assert DialectName.from_string(input_str) is expected


@pytest.mark.parametrize("bad", [None, "", "  ", "pg", "mysql", "mssql+pyodbc"])
def test_from_string_rejects_unsupported(bad):
    """Anything but SQLite or PostgreSQL raises UnsupportedDialect."""
    with pytest.raises(UnsupportedDialect):
        DialectName.from_string(bad)


def test_members_are_sqlalchemy_backend_names():
    assert DialectName.POSTGRES.value == "postgresql"
    assert DialectName.SQLITE.value == "sqlite"
