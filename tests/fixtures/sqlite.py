"""sqlite-specific fixtures"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from alembic import command
from sqlalchemy.engine import URL

from geodex import config
from geodex.adapters.db.engine import make_engine
from geodex.adapters.db.orm import mapper_registry, start_mappers
from geodex.adapters.id_generators import SequentialIdGenerator
from geodex.adapters.unit_of_work import SqlAlchemyUnitOfWork
from geodex.bootstrap import build_message_bus

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

    from geodex.service_layer.messagebus import MessageBus


@pytest.fixture
def sqlite_engine_memory() -> Iterator[Engine]:
    """In-memory SQLite engine with the schema created from metadata.

    Uses `make_engine()` so PRAGMAs and the casefold function are applied.

    Yields:
        Engine: SQLAlchemy engine bound to an in-memory DB.
    """
    start_mappers()
    test_engine = make_engine("sqlite+pysqlite:///:memory:")
    mapper_registry.metadata.create_all(test_engine)
    yield test_engine
    mapper_registry.metadata.drop_all(test_engine)
    test_engine.dispose()


@pytest.fixture
def sqlite_url_file(tmp_path: Path) -> str:
    """URL of a file-backed SQLite database migrated to head via Alembic."""
    url = str(URL.create("sqlite+pysqlite", database=str(tmp_path / "test.db")))
    command.upgrade(config.build_alembic_config(url), "head")
    return url


@pytest.fixture
def sqlite_engine_file(sqlite_url_file: str) -> Iterator[Engine]:
    """File-backed SQLite engine migrated via Alembic (per test).

    Each test gets its own database file, so nothing is downgraded on
    teardown.
    """
    test_engine = make_engine(sqlite_url_file)
    try:
        yield test_engine
    finally:
        test_engine.dispose()


@pytest.fixture
def uow(sqlite_engine_memory: Engine) -> SqlAlchemyUnitOfWork:
    """Unit of work over the in-memory database with predictable guids."""
    return SqlAlchemyUnitOfWork(sqlite_engine_memory, SequentialIdGenerator())


@pytest.fixture
def bus(uow: SqlAlchemyUnitOfWork) -> MessageBus:
    """Message bus wired with every GEODEX handler and no location directory."""
    return build_message_bus(uow)
