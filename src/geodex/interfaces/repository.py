"""Generic repository contract over the record store.

One repository type serves every record type. Mutations are **staged**: they
become visible to other units of work only once :meth:`Repository.persist`
commits the unit of work's batch.
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Generic, TypeVar

from .query import TrackingMode

if TYPE_CHECKING:
    from .cancellation import CancellationSignal
    from .query import Query

T = TypeVar("T")


class Repository(abc.ABC, Generic[T]):
    """CRUD primitives for one record type."""

    @abc.abstractmethod
    def query(self, tracking: TrackingMode = TrackingMode.NO_TRACKING) -> Query[T]:
        """Return a lazy query over every record of this type.

        Args:
            tracking: ``NO_TRACKING`` for read-only views, ``TRACKING`` when the
                caller intends to mutate and persist the loaded records.
        """

    @abc.abstractmethod
    def create(self, record: T) -> T:
        """Stage a new record.

        Assigns the record's ``guid`` (when unset) and its store ``id``.

        Returns:
            The staged record, with ``id`` and ``guid`` populated.
        """

    @abc.abstractmethod
    def update(self, record: T) -> T:
        """Stage an overwrite of a stored record with ``record``'s fields.

        Returns:
            The record instance tracked by the unit of work.
        """

    @abc.abstractmethod
    def delete(self, record: T) -> None:
        """Stage the removal of a stored record."""

    @abc.abstractmethod
    def persist(self, cancellation: CancellationSignal | None = None) -> None:
        """Commit every staged mutation of the unit of work as one batch.

        Raises:
            OperationCancelledError: If ``cancellation`` is set; nothing is
                committed in that case.
        """
