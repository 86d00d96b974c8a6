"""Dialect-aware SQL string functions used by record filters.

``contains_text(haystack, needle)``
    Case-sensitive substring test. SQL ``LIKE`` is case-insensitive for ASCII
    on SQLite, so the test is compiled to ``instr`` on SQLite and ``strpos``
    on PostgreSQL instead.

``casefold(value)``
    Unicode case folding, compared against ``str.casefold()`` for name
    uniqueness. SQLite's built-in ``lower`` only folds ASCII, so SQLite
    connections made by ``make_engine`` (:mod:`geodex.adapters.db.engine`) register
    a ``casefold`` function backed by Python. PostgreSQL's ``lower`` is
    Unicode-aware.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import Boolean, String
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.sql.functions import FunctionElement

__all__ = ["SQLITE_CASEFOLD", "casefold", "contains_text", "py_casefold"]

#: Name of the Python-backed function registered on SQLite connections.
SQLITE_CASEFOLD = "geodex_casefold"


def py_casefold(value: str | None) -> str | None:
    """Implementation of ``casefold`` for SQLite connections."""
    return None if value is None else value.casefold()


class contains_text(FunctionElement):  # pylint: disable=invalid-name,too-many-ancestors
    """``haystack`` contains ``needle``, case-sensitively."""

    type = Boolean()
    inherit_cache = True


class casefold(FunctionElement):  # pylint: disable=invalid-name,too-many-ancestors
    """Unicode case folding of a string expression."""

    type = String()
    inherit_cache = True


def _arguments(element: FunctionElement, compiler: Any, **kw: Any) -> list[str]:
    return [compiler.process(arg, **kw) for arg in element.clauses]


@compiles(contains_text)
def _contains_text_default(element, compiler, **kw):
    haystack, needle = _arguments(element, compiler, **kw)
    return f"(position({needle} in {haystack}) > 0)"


@compiles(contains_text, "sqlite")
def _contains_text_sqlite(element, compiler, **kw):
    haystack, needle = _arguments(element, compiler, **kw)
    return f"(instr({haystack}, {needle}) > 0)"


@compiles(contains_text, "postgresql")
def _contains_text_postgres(element, compiler, **kw):
    haystack, needle = _arguments(element, compiler, **kw)
    return f"(strpos({haystack}, {needle}) > 0)"


@compiles(casefold)
def _casefold_default(element, compiler, **kw):
    (value,) = _arguments(element, compiler, **kw)
    return f"lower({value})"


@compiles(casefold, "sqlite")
def _casefold_sqlite(element, compiler, **kw):
    (value,) = _arguments(element, compiler, **kw)
    return f"{SQLITE_CASEFOLD}({value})"
