"""SQLAlchemy-backed Unit of Work for GEODEX.

Each outermost ``with uow:`` block opens one ORM ``Session`` (and through it
one connection) and exposes a :class:`SqlAlchemyRepository` per record type.
The session and repositories belong to the thread that opened the block.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy.orm import sessionmaker

from geodex.adapters.db.orm import start_mappers
from geodex.adapters.id_generators import UUIDv4Generator
from geodex.adapters.repository import SqlAlchemyRepository
from geodex.domain.records import City, Country, Group, Record, Role, User
from geodex.interfaces.cancellation import ensure_signal
from geodex.interfaces.unit_of_work import AbstractUnitOfWork

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine
    from sqlalchemy.orm import Session

    from geodex.interfaces.cancellation import CancellationSignal
    from geodex.interfaces.id_generator import IdGenerator

logger = logging.getLogger(__name__)

RECORD_TYPES: tuple[type[Record], ...] = (Country, City, Group, Role, User)


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """SQLAlchemy-backed Unit of Work.

    Args:
        engine: Engine from :func:`geodex.adapters.db.engine.make_engine`.
        guid_generator: Guid source for created records (UUIDv4 by default).
    """

    def __init__(self, engine: Engine, guid_generator: IdGenerator | None = None):
        super().__init__()
        start_mappers()
        self.engine = engine
        self.guid_generator = guid_generator or UUIDv4Generator()
        # records stay readable after commit (e.g. to report their id)
        self._session_factory = sessionmaker(bind=engine, expire_on_commit=False)

    def _open(self) -> None:
        session = self._session_factory()
        self._scope.session = session
        self._scope.repositories = {
            record_type: SqlAlchemyRepository(session, record_type, self.guid_generator)
            for record_type in RECORD_TYPES
        }

    def _close(self) -> None:
        try:
            self._scope.session.close()
        finally:
            del self._scope.session
            del self._scope.repositories

    @property
    def session(self) -> Session:
        """Session of the calling thread's open scope."""
        return self._scope.session

    @property
    def countries(self) -> SqlAlchemyRepository[Country]:  # type: ignore[override]
        return self._scope.repositories[Country]

    @property
    def cities(self) -> SqlAlchemyRepository[City]:  # type: ignore[override]
        return self._scope.repositories[City]

    @property
    def groups(self) -> SqlAlchemyRepository[Group]:  # type: ignore[override]
        return self._scope.repositories[Group]

    @property
    def roles(self) -> SqlAlchemyRepository[Role]:  # type: ignore[override]
        return self._scope.repositories[Role]

    @property
    def users(self) -> SqlAlchemyRepository[User]:  # type: ignore[override]
        return self._scope.repositories[User]

    def commit(self, cancellation: CancellationSignal | None = None):
        ensure_signal(cancellation).raise_if_cancelled()
        self.session.commit()
        logger.debug("Unit of work committed")

    def rollback(self):
        self.session.rollback()
