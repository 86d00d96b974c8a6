"""Supported database dialect names.

GEODEX ships dialect-specific SQL for a few string functions (see
:mod:`geodex.interfaces.sql_functions`), so the set of backends it runs on is
closed and named here instead of being spelled as string literals.
"""

from __future__ import annotations

from enum import Enum


class UnsupportedDialect(Exception):
    """Raised when a database URL names a backend GEODEX does not support."""


class DialectName(str, Enum):
    """Backends GEODEX can store records in.

    Attributes:
        POSTGRES: PostgreSQL dialect (``"postgresql"``).
        SQLITE:   SQLite dialect (``"sqlite"``).
    """

    POSTGRES = "postgresql"
    SQLITE = "sqlite"

    @classmethod
    def from_string(cls, dialect_str: str) -> DialectName:
        """Map a backend or driver-qualified name to a member.

        ``"postgres"``, ``"postgresql+psycopg"`` and ``"sqlite+pysqlite"`` are
        all accepted.

        Raises:
            UnsupportedDialect: if the backend is not one GEODEX supports.
        """
        base = (dialect_str or "").strip().lower().split("+", 1)[0]
        if base in {"postgres", "postgresql"}:
            return cls.POSTGRES
        if base == "sqlite":
            return cls.SQLITE
        raise UnsupportedDialect(f"Unsupported dialect: {dialect_str!r}")
