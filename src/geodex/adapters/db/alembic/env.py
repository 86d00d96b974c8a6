"""Alembic environment for GEODEX.

Policy defaults:
  - compare_type=True (catch column type drift)
  - compare_server_default=True (catch server default drift)
  - render_as_batch=True on SQLite (ALTER TABLE emulation)
  - URL precedence: `-x url=...` > config sqlalchemy.url > GEODEX_DB_URL
"""

from logging.config import fileConfig

from alembic import context
from sqlalchemy import engine_from_config, pool

# Imported so the tables are registered on the metadata for autogenerate
import geodex.adapters.db.schema  # noqa: F401 # pylint: disable=unused-import
from geodex.adapters.db.dialects import DialectName
from geodex.adapters.db.metadata import metadata
from geodex.config import ALEMBIC_URL_KEY, get_db_url

# pylint: disable=no-member

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = metadata


def get_url() -> str:
    """Resolve DB URL with precedence: `-x url` > config > env."""
    url = context.get_x_argument(as_dictionary=True).get("url")
    if not url:
        url = config.get_main_option(ALEMBIC_URL_KEY)
    if not url or "%(" in url:  # placeholder counts as unset
        url = get_db_url()
    return url


def run_migrations_offline() -> None:
    """Emit migration SQL for the configured URL without connecting."""
    context.configure(
        url=get_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        compare_type=True,
        compare_server_default=True,
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run migrations against a live connection.

    A connection handed over through ``config.attributes["connection"]`` (as
    the test suite does for in-memory SQLite) is used as is.
    """
    connection = config.attributes.get("connection")
    if connection is not None:
        _run_with(connection)
        return

    connectable = engine_from_config(
        {ALEMBIC_URL_KEY: get_url()},
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    with connectable.connect() as connection:
        _run_with(connection)


def _run_with(connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        compare_type=True,
        compare_server_default=True,
        render_as_batch=connection.dialect.name == DialectName.SQLITE.value,
    )
    with context.begin_transaction():
        context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
