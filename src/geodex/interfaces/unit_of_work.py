"""Unit of Work interface for GEODEX.

Defines the AbstractUnitOfWork contract: a context-managed, request-scoped
unit of work exposing one repository per record type and abstract
commit/rollback methods.

Scoping:
    Entering the unit of work opens its store connection; leaving the
    outermost ``with`` block rolls back anything not committed and releases
    the connection. Nested ``with`` blocks join the outermost scope, so a
    handler may open the unit of work itself while a caller (e.g. a transport
    adapter that must materialize a lazy query result) already holds it open.

    Scopes are tracked per thread. Requests handled concurrently through one
    unit of work each get their own scope and connection.
"""

from __future__ import annotations

import abc
import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from geodex.domain.records import City, Country, Group, Role, User

    from .cancellation import CancellationSignal
    from .repository import Repository


class AbstractUnitOfWork(abc.ABC):
    """Contract for a transactional, request-scoped unit of work."""

    countries: Repository[Country]
    cities: Repository[City]
    groups: Repository[Group]
    roles: Repository[Role]
    users: Repository[User]

    def __init__(self) -> None:
        self._scope = threading.local()

    @property
    def _depth(self) -> int:
        return getattr(self._scope, "depth", 0)

    @_depth.setter
    def _depth(self, value: int) -> None:
        self._scope.depth = value

    def __enter__(self) -> AbstractUnitOfWork:
        """Enter the unit of work context and return the unit.

        Implementations acquire transactional resources when the outermost
        scope is entered (see :meth:`_open`).
        """
        if self._depth == 0:
            self._open()
        self._depth += 1
        return self

    def __exit__(self, *args):
        """Exit the unit of work context.

        Leaving the outermost scope rolls back uncommitted work and releases
        resources.
        """
        self._depth -= 1
        if self._depth == 0:
            try:
                self.rollback()
            finally:
                self._close()

    @property
    def is_open(self) -> bool:
        """Whether the unit of work holds its resources in the calling thread."""
        return self._depth > 0

    def _open(self) -> None:
        """Acquire transactional resources (outermost scope only)."""

    def _close(self) -> None:
        """Release transactional resources (outermost scope only)."""

    @abc.abstractmethod
    def commit(self, cancellation: CancellationSignal | None = None):
        """Persist staged changes and finalize the transaction."""

    @abc.abstractmethod
    def rollback(self):
        """Revert staged changes."""
