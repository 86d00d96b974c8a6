"""Render dispatch results on the terminal.

Rows are printed to stdout as a Rich table; outcome lines (success, errors,
counts) go to stderr through :mod:`.messages`.
"""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Any

import click
from rich.console import Console
from rich.table import Table

from geodex.entrypoints.dispatch import Outcome
from geodex.service_layer.responses import CommandResponse

from .messages import error, success, warn

if TYPE_CHECKING:
    from geodex.entrypoints.dispatch import Dispatched


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, tuple):
        return ", ".join(_cell(v) for v in value)
    if dataclasses.is_dataclass(value):
        return getattr(value, "name", repr(value))
    return str(value)


def _table(rows: list[Any], columns: list[str] | None) -> Table:
    names = columns or [f.name for f in dataclasses.fields(rows[0])]
    table = Table(*names)
    for row in rows:
        table.add_row(*(_cell(getattr(row, name)) for name in names))
    return table


def render(
    dispatched: Dispatched,
    *,
    columns: list[str] | None = None,
    console: Console | None = None,
) -> None:
    """Print ``dispatched`` and exit non-zero for failed outcomes.

    Args:
        dispatched: Result from the dispatcher.
        columns: Row attributes to show (all fields by default).
        console: Console for tables; stdout by default.
    """
    body = dispatched.body
    if dispatched.outcome is Outcome.NO_CONTENT:
        warn("No matching records.")
        if dispatched.total_count is not None:
            click.echo(f"Total: {dispatched.total_count}", err=True)
        return

    if isinstance(body, CommandResponse):
        if dispatched.outcome is Outcome.OK:
            suffix = f" (id {body.id})" if body.id is not None else ""
            success(f"{body.message}{suffix}")
            return
        for message in body.message.split("|"):
            error(message)
        raise click.exceptions.Exit(1)

    rows = body if isinstance(body, list) else [body]
    (console or Console()).print(_table(rows, columns))
    if dispatched.total_count is not None:
        click.echo(f"Total: {dispatched.total_count}", err=True)
