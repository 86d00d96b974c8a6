"""GEODEX CLI entry point.

Defines the top-level ``geodex`` command (via Click-Extra) and registers the
subcommands:

- ``geodex db``: forward-only schema migrations and demo data.
- ``geodex locations``: countries joined with their cities.
- ``geodex countries`` / ``cities`` / ``groups`` / ``users``: record commands.

Examples
    $ geodex --version
    $ geodex db upgrade
    $ geodex locations --left --country-name Chi
"""

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from platformdirs import user_log_dir

from geodex import __version__, config
from geodex.adapters.redactor import Redactor
from geodex.interfaces.redactor import RedactorMode
from geodex.logging import (
    config_console_handler,
    config_flight_recorder,
    configure_logging,
    log_startup,
)

from .db import db as db_group
from .helpers import parse_log_level
from .records import cities, countries, groups, locations, users

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """GEODEX command-line interface.

    GEODEX manages countries, cities, groups and users in a relational store,
    and answers filtered, ordered and paged queries over them.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help="Increase the default WARNING verbosity by one level per repetition.",
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help="Decrease the default WARNING verbosity by one level per repetition.",
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (timestamps, logger names and source paths).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path the flight recorder writes to.",
    default=Path(user_log_dir("geodex", appauthor=False, ensure_exists=True))
    / "latest.log",
    envvar="GEODEX_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar="GEODEX_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Keep the last N log records at DEBUG granularity and write them to "
        "--log-path when a WARNING/ERROR occurs, or on exit with --force-flush."
    ),
    default=True,
    envvar="GEODEX_FLIGHT_RECORDER",
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help="Write the flight recorder buffer to --log-path on exit.",
    default=False,
    envvar="GEODEX_FORCE_FLUSH_FLIGHT_RECORDER",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Applies to both "
        "console and flight recorder. Repeatable (e.g. -L sqlalchemy=INFO "
        "-L httpx=DEBUG) or via GEODEX_LOGGER_LEVELS (comma/space list)."
    ),
    default=("sqlalchemy=WARNING", "alembic=WARNING", "httpx=WARNING"),
    envvar="GEODEX_LOGGER_LEVELS",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--redactor-mode",
    "redactor_mode",
    type=click.Choice(["lenient", "strict"], case_sensitive=False),
    help=(
        "'lenient' redacts passwords/tokens; 'strict' also redacts "
        "usernames/ids."
    ),
    default="lenient",
    show_envvar=True,
    show_default=True,
)
@clickx.pass_context
def geodex(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
    redactor_mode: str,
) -> None:
    """GEODEX command-line interface."""

    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    handlers: list[Handler] = [
        config_console_handler(
            level=level, debug_mode=debug, color=ctx.color is not False
        )
    ]
    if flight_recorder:
        handlers.append(
            config_flight_recorder(
                path=log_path,
                capacity=flight_recorder_capacity,
                flush_on_close=force_flush_flight_recorder,
            )
        )
    configure_logging(handlers, logger_levels)

    redactor = Redactor(RedactorMode(redactor_mode.lower()))
    raw_url = os.environ.get(config.DB_URL_ENV)
    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        log_path=log_path if flight_recorder else None,
        flight_capacity=flight_recorder_capacity if flight_recorder else None,
        logger_levels=logger_levels,
        db_url=redactor.sanitize_db_url(raw_url) if raw_url else None,
    )

    ctx.ensure_object(dict)
    ctx.call_on_close(logging.shutdown)


geodex.add_command(db_group)
geodex.add_command(locations)
geodex.add_command(countries)
geodex.add_command(cities)
geodex.add_command(groups)
geodex.add_command(users)
