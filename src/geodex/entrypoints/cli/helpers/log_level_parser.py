"""Parse ``NAME=LEVEL`` logger-level options.

Values may be repeated (``-L sqlalchemy=INFO -L httpx=DEBUG``) or given as a
comma/space separated list (``GEODEX_LOGGER_LEVELS="sqlalchemy=INFO,httpx=DEBUG"``).
"""

import logging
import re

import click

DEFAULT_LIB_LEVELS = {
    "sqlalchemy": logging.WARNING,
    "alembic": logging.WARNING,
    "httpx": logging.WARNING,
}

_SEPARATORS = re.compile(r"[,\s]+")


def _normalize_items(value: str | list[str] | tuple[str, ...] | None) -> list[str]:
    """Flatten one string or a sequence of strings into non-empty items."""
    if not value:
        return []
    chunks = [value] if isinstance(value, str) else list(value)
    return [item for chunk in chunks for item in _SEPARATORS.split(chunk) if item]


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...] | None,
) -> dict[str, int]:
    """Click callback returning DEFAULT_LIB_LEVELS updated with ``value``.

    Raises:
        click.BadParameter: for an item that is not NAME=LEVEL or names an
            unknown level.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _normalize_items(value):
        name, sep, level_str = item.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        level = logging.getLevelName(level_str.strip().upper())
        if not isinstance(level, int):
            raise click.BadParameter(f"Invalid log level: {level_str}")
        levels[name.strip()] = level
    return levels
