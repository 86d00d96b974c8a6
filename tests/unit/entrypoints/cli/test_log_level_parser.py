"""Unit tests for the ``-L NAME=LEVEL`` option parser."""

import logging
import types

import click
import pytest

from geodex.entrypoints.cli.helpers.log_level_parser import (
    DEFAULT_LIB_LEVELS,
    parse_log_level,
)

CTX = types.SimpleNamespace()  # unused by the callback


def test_empty_uses_defaults():
    """No value keeps the quiet defaults for the chatty libraries."""
    assert parse_log_level(CTX, None, ()) == {
        "sqlalchemy": logging.WARNING,
        "alembic": logging.WARNING,
        "httpx": logging.WARNING,
    }


def test_defaults_are_not_mutated():
    """Overrides never leak into the module-level defaults."""
    parse_log_level(CTX, None, ("httpx=DEBUG",))
    assert DEFAULT_LIB_LEVELS["httpx"] == logging.WARNING


def test_later_items_win():
    """Repeated names keep the last level."""
    out = parse_log_level(CTX, None, ("httpx=INFO", "httpx=ERROR"))
    assert out["httpx"] == logging.ERROR


def test_env_style_string():
    """A comma/space separated string parses like repeated options."""
    out = parse_log_level(CTX, None, "sqlalchemy=info,  geodex.adapters=debug httpx=error")
    assert out["sqlalchemy"] == logging.INFO
    assert out["geodex.adapters"] == logging.DEBUG
    assert out["httpx"] == logging.ERROR


@pytest.mark.parametrize("item", ["not-a-pair", "=INFO", "httpx=LOUD", "httpx="])
def test_bad_items_raise(item):
    """Malformed pairs and unknown levels are rejected."""
    with pytest.raises(click.BadParameter):
        parse_log_level(CTX, None, (item,))
