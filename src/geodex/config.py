"""Configuration for GEODEX.

Settings come from environment variables:

| Variable                    | Meaning                                         |
|-----------------------------|-------------------------------------------------|
| ``GEODEX_DB_URL``           | SQLAlchemy URL of the record store (required)   |
| ``GEODEX_COUNTRIES_API_URL``| Location directory: country listing endpoint    |
| ``GEODEX_CITIES_API_URL``   | Location directory: city listing endpoint       |
| ``GEODEX_GUID_GENERATOR``   | ``uuid4`` (default), ``ulid`` or ``sequential`` |

The CLI adds ``GEODEX_LOG_PATH`` and ``GEODEX_FLIGHT_RECORDER_CAPACITY``
(see :mod:`geodex.entrypoints.cli.main`).
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from importlib.resources import files
from typing import TextIO

from alembic.config import Config

DB_URL_ENV = "GEODEX_DB_URL"
COUNTRIES_API_URL_ENV = "GEODEX_COUNTRIES_API_URL"
CITIES_API_URL_ENV = "GEODEX_CITIES_API_URL"
GUID_GENERATOR_ENV = "GEODEX_GUID_GENERATOR"

ALEMBIC_URL_KEY = "sqlalchemy.url"  # pragma: no mutate
ALEMBIC_SCRIPT_LOCATION_KEY = "script_location"  # pragma: no mutate
ALEMBIC_PACKAGE = "geodex.adapters.db.alembic"


class DatabaseUrlNotSetError(Exception):
    """Raised when the GEODEX_DB_URL environment variable is not set."""

    def __init__(self) -> None:
        super().__init__(f"Set {DB_URL_ENV} to your database URL.")


def get_db_url() -> str:
    """Get the database URL from the environment.

    Raises:
        DatabaseUrlNotSetError: If `GEODEX_DB_URL` is not set.
    """
    if not (url := os.environ.get(DB_URL_ENV)):
        raise DatabaseUrlNotSetError
    return url


@dataclass(frozen=True)
class LocationDirectorySettings:
    """Endpoints of the external location directory.

    Either URL may be None, in which case enrichment is skipped.
    """

    countries_url: str | None = None
    cities_url: str | None = None

    @property
    def is_configured(self) -> bool:
        return bool(self.countries_url and self.cities_url)


def get_location_directory_settings() -> LocationDirectorySettings:
    """Read the location directory endpoints from the environment."""
    return LocationDirectorySettings(
        countries_url=os.environ.get(COUNTRIES_API_URL_ENV) or None,
        cities_url=os.environ.get(CITIES_API_URL_ENV) or None,
    )


def get_guid_generator_name() -> str:
    """Name of the guid generator to use for new records."""
    return os.environ.get(GUID_GENERATOR_ENV) or "uuid4"


def build_alembic_config(
    db_url: str | None = None, stdout: TextIO = sys.stdout
) -> Config:
    """Build an Alembic `Config` object for GEODEX's migrations.

    Sets only Alembic "main" options:
    - `sqlalchemy.url` → the database URL you pass
    - `script_location` → GEODEX's packaged Alembic scripts

    Args:
        db_url: SQLAlchemy database URL. Can be `None` only where Alembic
            won't connect (e.g. listing heads or history).
        stdout: Stream Alembic writes status lines to; override in tests.
    """
    cfg = Config(stdout=stdout)
    if db_url is not None:
        cfg.set_main_option(ALEMBIC_URL_KEY, db_url)
    cfg.set_main_option(ALEMBIC_SCRIPT_LOCATION_KEY, str(files(ALEMBIC_PACKAGE)))
    return cfg
