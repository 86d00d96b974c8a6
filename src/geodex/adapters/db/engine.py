"""Database engine factory.

Every Engine GEODEX uses comes from :func:`make_engine` so that connections
are configured the same way everywhere:

- **SQLite**: PRAGMAs enforcing foreign keys and tuning durability, plus the
  Python-backed ``casefold`` SQL function used for name uniqueness.
- **PostgreSQL**: no tuning.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import create_engine, event
from sqlalchemy.engine import URL, make_url

from geodex.adapters.db.dialects import DialectName
from geodex.interfaces.sql_functions import SQLITE_CASEFOLD, py_casefold

if TYPE_CHECKING:
    from sqlite3 import Connection as SQLiteConnection

    from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)


def is_sqlite(url: str | URL) -> bool:
    """Return True if the given SQLAlchemy URL or string corresponds to SQLite."""
    return make_url(str(url)).get_backend_name() == DialectName.SQLITE.value


def is_memory_sqlite(url: str | URL) -> bool:
    """Return True for a private in-memory SQLite database URL."""
    u = make_url(str(url))
    return is_sqlite(u) and u.database in (None, "", ":memory:")


def make_engine(url: str | URL, *, echo: bool = False) -> Engine:
    """Create a configured SQLAlchemy Engine for ``url``.

    On SQLite every new DBAPI connection gets:
        - ``foreign_keys=ON`` (enforce referential integrity)
        - ``journal_mode=WAL`` (file databases only)
        - ``synchronous=NORMAL``
        - ``temp_store=MEMORY``
        - the ``casefold`` function (see :mod:`geodex.interfaces.sql_functions`)

    Args:
        url: Database connection URL (str or :class:`URL`).
        echo: If True, log SQL statements.

    Raises:
        UnsupportedDialect: if the URL names a backend other than SQLite or
            PostgreSQL.
    """
    dialect = DialectName.from_string(make_url(str(url)).get_backend_name())
    engine = create_engine(url, echo=echo)

    if dialect is DialectName.SQLITE:
        in_memory = is_memory_sqlite(url)

        @event.listens_for(engine, "connect")
        def _sqlite_setup(dbapi_conn: SQLiteConnection, conn_record):  # type: ignore #pylint: disable=W0613
            dbapi_conn.create_function(
                SQLITE_CASEFOLD, 1, py_casefold, deterministic=True
            )
            cur = dbapi_conn.cursor()
            cur.execute("PRAGMA foreign_keys=ON;")
            if not in_memory:
                cur.execute("PRAGMA journal_mode=WAL;")
            cur.execute("PRAGMA synchronous=NORMAL;")
            cur.execute("PRAGMA temp_store=MEMORY;")
            cur.close()

    logger.debug("Created %s engine", dialect.value)
    return engine
