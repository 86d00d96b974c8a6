"""GEODEX DB CLI: forward-only Alembic wrappers and demo data.

Behavior
- Uses programmatic Alembic configuration; human-oriented notices go to
  **stderr**, Alembic output to **stdout**.
- Schema-changing and data-replacing actions prompt for confirmation unless
  ``--force`` is given.

Requirements
- ``GEODEX_DB_URL`` must be set.

Failure modes
- Missing/invalid ``GEODEX_DB_URL`` or unreachable DB -> ``ClickException``.
"""

from __future__ import annotations

import sys
from enum import Enum
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from sqlalchemy import text
from sqlalchemy.exc import ArgumentError, OperationalError

from geodex import config
from geodex.adapters.db.dialects import UnsupportedDialect
from geodex.adapters.db.engine import make_engine
from geodex.adapters.redactor import Redactor
from geodex.service_layer import commands

from ._app import MISSING_DB_URL_MSG, get_dispatcher
from .helpers import error, render, success, warn

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

INVALID_URL_FORMAT_MSG = "The value of GEODEX_DB_URL is not a valid database URL."

UNSUPPORTED_DIALECT_MSG = "GEODEX_DB_URL must point to SQLite or PostgreSQL."

CANNOT_CONNECT_MSG = (
    "GEODEX_DB_URL is set, but the database is not reachable.\n"
    "Please ensure the database is running and the URL is correct."
)

UPGRADE_SCHEMA_WARNING = (
    "This will upgrade the database schema to the latest version.\n"
    "Please ensure you have a backup before proceeding."
)

SEED_WARNING = "This will REPLACE all locations and users with demo data."

UPGRADE_SCHEMA_INSTRUCTIONS = "Run 'geodex db upgrade' to update the schema."


def _display_url(url: str) -> str:
    return Redactor().sanitize_db_url(url)


def _check_connection(url: str) -> None:
    engine = make_engine(url)
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))  # pragma: no mutate
    finally:
        engine.dispose()


def _get_url() -> str:
    try:
        url = config.get_db_url()
    except config.DatabaseUrlNotSetError as e:
        raise click.ClickException(MISSING_DB_URL_MSG) from e
    try:
        _check_connection(url)
    except OperationalError as e:
        raise click.ClickException(CANNOT_CONNECT_MSG) from e
    except ArgumentError as e:
        raise click.ClickException(INVALID_URL_FORMAT_MSG) from e
    except UnsupportedDialect as e:
        raise click.ClickException(UNSUPPORTED_DIALECT_MSG) from e
    return url


def _confirm(message: str, url: str) -> None:
    warn(message)
    click.secho(f"db: {click.style(_display_url(url), underline=True)}", err=True)
    click.confirm("Are you sure you want to proceed?", abort=True, err=True)


@click.group(cls=clickx.ExtraGroup)
def db() -> None:
    """Database management commands."""


@db.command()
@click.option("--verbose", "-v", is_flag=True, help="Show alembic's more verbose output.")
def current(verbose: bool) -> None:
    """Show current DB revision."""
    cfg = config.build_alembic_config(db_url=_get_url(), stdout=sys.stdout)
    command.current(cfg, verbose=verbose)


@db.command()
@click.option("--verbose", "-v", is_flag=True, help="Show alembic's more verbose output.")
def heads(verbose: bool) -> None:
    """Show available head revisions."""
    command.heads(config.build_alembic_config(stdout=sys.stdout), verbose=verbose)


@db.command()
@click.option("--verbose", "-v", is_flag=True, help="Show alembic's more verbose output.")
@click.option(
    "--indicate-current", "-i", is_flag=True, help="Indicate the current revision."
)
def history(verbose: bool, indicate_current: bool) -> None:
    """Show revision history."""
    url = _get_url() if indicate_current else None
    cfg = config.build_alembic_config(db_url=url, stdout=sys.stdout)
    command.history(cfg, verbose=verbose, indicate_current=indicate_current)


@db.command()
@click.option("--sql", is_flag=True, help="Generate SQL without executing.")
@click.option("--force", is_flag=True, help="Upgrade without confirmation.")
def upgrade(sql: bool, force: bool) -> None:
    """Upgrade the database to the head revision."""
    url = _get_url()
    if not force and not sql:
        _confirm(UPGRADE_SCHEMA_WARNING, url)
    command.upgrade(
        config.build_alembic_config(db_url=url, stdout=sys.stdout),
        revision="head",
        sql=sql,
    )
    success("Upgrade complete!")


@db.command()
@click.option("--force", is_flag=True, help="Seed without confirmation.")
@click.pass_context
def seed(ctx: click.Context, force: bool) -> None:
    """Replace all locations and users with demo data."""
    url = _get_url()
    if not force:
        _confirm(SEED_WARNING, url)
    dispatcher = get_dispatcher(ctx)
    render(dispatcher.dispatch(commands.SeedLocations()))
    render(dispatcher.dispatch(commands.SeedUsers()))


def _get_current_revision(engine: Engine) -> str | None:
    with engine.connect() as conn:
        return MigrationContext.configure(conn).get_current_revision()


def _get_head_revision(cfg: Config) -> str | None:
    heads_ = ScriptDirectory.from_config(cfg).get_heads()
    return heads_[0] if heads_ else None


class MigrationStatus(Enum):
    """Describes the migration status of the database schema."""

    UP_TO_DATE = "up to date"
    OUT_OF_DATE = "out of date"
    UNINITIALIZED = "uninitialized"


@db.command()
def status() -> None:
    """Show database connection and schema status."""
    try:
        url = _get_url()
    except click.ClickException as e:
        error("Cannot connect to database")
        click.echo(e.format_message())
        raise click.exceptions.Exit(1) from e

    engine = make_engine(url)
    success("Database reachable")
    click.echo(f"Backend : {engine.dialect.name}")
    click.echo(f"URL     : {_display_url(url)}")
    rev = _get_current_revision(engine)
    head = _get_head_revision(config.build_alembic_config(db_url=url))
    engine.dispose()

    if rev == head:
        migration_status = MigrationStatus.UP_TO_DATE
    elif rev is None:
        migration_status = MigrationStatus.UNINITIALIZED
    else:
        migration_status = MigrationStatus.OUT_OF_DATE

    click.echo(
        f"Schema  : {rev} ({migration_status.value})"
        if rev is not None
        else f"Schema  : {migration_status.value}"
    )
    if migration_status is not MigrationStatus.UP_TO_DATE:
        warn(UPGRADE_SCHEMA_INSTRUCTIONS)
