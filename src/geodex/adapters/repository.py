"""SQLAlchemy-backed generic repository.

A :class:`SqlAlchemyRepository` wraps the unit of work's ORM ``Session`` for
one mapped record type. Mutations flush right away, so the store assigns
``id`` on ``create`` and constraint violations surface at the call that
caused them. Flushed changes stay inside the unit of work's transaction and
are only visible elsewhere after :meth:`persist`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypeVar

from geodex.domain.records import Record
from geodex.interfaces.cancellation import ensure_signal
from geodex.interfaces.query import Query, TrackingMode
from geodex.interfaces.repository import Repository

if TYPE_CHECKING:
    from sqlalchemy.orm import Session

    from geodex.interfaces.cancellation import CancellationSignal
    from geodex.interfaces.id_generator import IdGenerator

T = TypeVar("T", bound=Record)

logger = logging.getLogger(__name__)


class SqlAlchemyRepository(Repository[T]):
    """Repository for one record type over an ORM session.

    Args:
        session: The unit of work's session.
        entity: Mapped record class.
        guid_generator: Source of guids for new records.
    """

    def __init__(
        self, session: Session, entity: type[T], guid_generator: IdGenerator
    ) -> None:
        self._session = session
        self._entity = entity
        self._guid_generator = guid_generator

    @property
    def entity(self) -> type[T]:
        """Record class served by this repository."""
        return self._entity

    def query(self, tracking: TrackingMode = TrackingMode.NO_TRACKING) -> Query[T]:
        return Query.for_entity(self._session, self._entity, tracking)

    def create(self, record: T) -> T:
        if record.guid is None:
            record.guid = self._guid_generator.new_id()
        self._session.add(record)
        self._session.flush()
        logger.debug("Staged new %s id=%s", self._entity.__name__, record.id)
        return record

    def update(self, record: T) -> T:
        tracked = self._session.merge(record)
        self._session.flush()
        logger.debug("Staged update of %s id=%s", self._entity.__name__, tracked.id)
        return tracked

    def delete(self, record: T) -> None:
        tracked = record if record in self._session else self._session.merge(record)
        self._session.delete(tracked)
        self._session.flush()
        logger.debug("Staged removal of %s id=%s", self._entity.__name__, tracked.id)

    def persist(self, cancellation: CancellationSignal | None = None) -> None:
        ensure_signal(cancellation).raise_if_cancelled()
        self._session.commit()
