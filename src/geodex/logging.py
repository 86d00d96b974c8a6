"""Logging setup for the GEODEX CLI.

Console output goes through Rich. An optional in-memory "flight recorder"
keeps recent records at DEBUG granularity and writes them to a file when a
WARNING or worse is logged, so a failed run leaves a trail even when the
console was quiet.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

import alembic
import httpx
import sqlalchemy
from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "geodex"

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


class ThirdPartyPrefixFilter(logging.Filter):
    """Set ``record.prefix`` to ``[package]`` for third-party records.

    GEODEX's own records get an empty prefix. Never drops a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith(PROJECT_PREFIX):
            record.prefix = ""
        else:
            # "httpx._client" -> "[httpx]"
            record.prefix = f"[{record.name.split('.')[0]}]"
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the stderr RichHandler.

    In debug mode the handler logs at DEBUG with timestamps, logger names and
    source links; otherwise it prints messages with a third-party prefix.

    Args:
        level: Minimum console level (forced to DEBUG in debug mode).
        debug_mode: Enable developer formatting.
        color: False disables color, matching click-extra's ``--no-color``.
    """
    color_system: ColorSystem | None = "auto" if color else None
    console = Console(color_system=color_system, stderr=True)

    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s: %(message)s"))
    else:
        handler.setFormatter(logging.Formatter("%(prefix)s %(message)s"))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Build a MemoryHandler that dumps its buffer to ``path``.

    The buffer holds up to ``capacity`` records and is written out when a
    record at ``flush_level`` or above arrives, or on close when
    ``flush_on_close`` is set.
    """
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(process)d:%(threadName)s] %(levelname)s "
            "%(name)s:%(lineno)d: %(message)s"
        )
    )
    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=file_handler,
        flushOnClose=flush_on_close,
    )


def configure_logging(
    handlers: list[logging.Handler], logger_levels: dict[str, int]
) -> None:
    """Install ``handlers`` on the root logger and apply per-logger levels.

    The root logger passes everything; the handlers filter.
    """
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)


def log_startup(  # pylint: disable=too-many-arguments
    logger: Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[logging.Handler],
    log_path: Path | None,
    flight_capacity: int | None,
    logger_levels: dict[str, int],
    db_url: str | None = None,
) -> None:
    """Log a one-line summary at INFO and environment diagnostics at DEBUG.

    ``db_url`` must already be redacted.
    """
    logger.info(
        "GEODEX %s: console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(level),
        "ON" if flight_capacity else "OFF",
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("CWD: %s", Path.cwd())
    logger.debug(
        "Alembic: %s, SQLAlchemy: %s, httpx: %s",
        alembic.__version__,
        sqlalchemy.__version__,
        httpx.__version__,
    )
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    logger.debug("Database: %s", db_url or "<unset>")
    if flight_capacity:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s",
            log_path or "<none>",
            flight_capacity,
        )
    logger.debug(
        "Per-logger overrides: %s",
        {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()},
    )
