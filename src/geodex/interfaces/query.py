"""Lazy, immutable query builder over the record store.

A :class:`Query` accumulates predicate, order, join, projection and paging
stages on a SQLAlchemy ``Select`` without touching the store. Every builder
method returns a **new** ``Query``; the receiver is never modified, so a stage
can be shared safely (e.g. counted and then paged).

Only the terminal operations perform I/O:

  - :meth:`Query.count`: number of rows of the stage, ignoring its ordering.
  - :meth:`Query.materialize`: rows of the stage as a list.
  - :meth:`Query.first` and :meth:`Query.exists`: convenience terminals.

Each terminal accepts a :class:`~geodex.interfaces.cancellation.CancellationSignal`
and checks it before executing.

Tracking:
    Entity queries honor a :class:`TrackingMode`. ``TRACKING`` loads records
    into the unit-of-work session, so changes made to them are flushed on
    ``persist()``. ``NO_TRACKING`` loads records through a short-lived reader
    session bound to the same connection and returns them detached, so
    changes made to them are never written.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from enum import Enum
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from .cancellation import CancellationSignal, ensure_signal

if TYPE_CHECKING:
    from sqlalchemy.orm.interfaces import ORMOption
    from sqlalchemy.sql import ColumnElement, Select

T = TypeVar("T")
R = TypeVar("R")


class TrackingMode(Enum):
    """Whether materialized records participate in the unit of work."""

    NO_TRACKING = "no_tracking"
    TRACKING = "tracking"


class JoinKind(Enum):
    """Supported join variants."""

    INNER = "inner"
    LEFT = "left"


class QueryShapeError(Exception):
    """Raised when a builder stage does not fit the current query shape."""


class Query(Generic[T]):
    """Immutable, lazily evaluated query.

    Args:
        session: Unit-of-work session used by the terminal operations.
        statement: The accumulated ``Select``.
        entity: Mapped record class selected by the statement, or None for
            projected queries.
        tracking: Tracking mode for entity results.
        row_factory: Callable receiving the labeled columns of a projected row
            as keyword arguments.
        transforms: Batch transforms applied, in order, to the materialized list.
    """

    def __init__(  # pylint: disable=too-many-arguments
        self,
        session: Session,
        statement: Select,
        *,
        entity: type | None = None,
        tracking: TrackingMode = TrackingMode.NO_TRACKING,
        row_factory: Callable[..., Any] | None = None,
        transforms: tuple[Callable[[list[Any]], list[Any]], ...] = (),
    ) -> None:
        self._session = session
        self._statement = statement
        self._entity = entity
        self._tracking = tracking
        self._row_factory = row_factory
        self._transforms = transforms

    @classmethod
    def for_entity(
        cls, session: Session, entity: type[T], tracking: TrackingMode
    ) -> Query[T]:
        """Start a query selecting every record of ``entity``."""
        return cls(
            session,
            select(entity).select_from(entity),
            entity=entity,
            tracking=tracking,
        )

    # --------------------------------------------------------------------- #
    # Builder stages
    # --------------------------------------------------------------------- #

    @property
    def statement(self) -> Select:
        """The accumulated statement (read-only)."""
        return self._statement

    @property
    def entity(self) -> type | None:
        """Mapped class selected by this query, or None once projected."""
        return self._entity

    def where(self, *criteria: ColumnElement[bool]) -> Query[T]:
        """Add predicates; all of them must hold."""
        return self._derive(statement=self._statement.where(*criteria))

    def order_by(self, *clauses: ColumnElement[Any]) -> Query[T]:
        """Replace the ordering of the query."""
        return self._derive(statement=self._statement.order_by(None).order_by(*clauses))

    def including(self, *options: ORMOption) -> Query[T]:
        """Eager-load related records with SQLAlchemy loader options.

        Needed for relationships read from ``NO_TRACKING`` results, which are
        detached and cannot lazy-load.
        """
        return self._derive(statement=self._statement.options(*options))

    def skip(self, count: int) -> Query[T]:
        """Skip the first ``count`` rows."""
        return self._derive(statement=self._statement.offset(count))

    def take(self, count: int) -> Query[T]:
        """Return at most ``count`` rows."""
        return self._derive(statement=self._statement.limit(count))

    def join(
        self,
        other: Query[Any],
        onclause: ColumnElement[bool],
        *,
        kind: JoinKind = JoinKind.INNER,
    ) -> Query[T]:
        """Join another entity query.

        Predicates already applied to ``other`` become part of the join
        condition, so a left join still preserves unmatched left-side rows.

        Raises:
            QueryShapeError: If ``other`` is not an entity query.
        """
        if other.entity is None:
            raise QueryShapeError("only entity queries can be joined")
        other_criteria = other.statement.whereclause
        if other_criteria is not None:
            onclause = onclause & other_criteria
        return self._derive(
            statement=self._statement.join(
                other.entity, onclause, isouter=kind is JoinKind.LEFT
            )
        )

    def project(
        self, row_factory: Callable[..., R], **columns: ColumnElement[Any]
    ) -> Query[R]:
        """Select labeled columns and build each row with ``row_factory``.

        Column labels are the keyword names, and they are passed to
        ``row_factory`` as keyword arguments.
        """
        labeled = [column.label(name) for name, column in columns.items()]
        return Query(
            self._session,
            self._statement.with_only_columns(*labeled),
            entity=None,
            tracking=self._tracking,
            row_factory=row_factory,
            transforms=(),
        )

    def map(self, transform: Callable[[T], R]) -> Query[R]:
        """Transform every materialized item."""
        return self.map_all(lambda items: [transform(item) for item in items])

    def map_all(self, transform: Callable[[list[T]], Iterable[R]]) -> Query[R]:
        """Transform the whole materialized list at once."""

        def _as_list(items: list[Any]) -> list[Any]:
            return list(transform(items))

        return self._derive(transforms=(*self._transforms, _as_list))  # type: ignore[return-value]

    # --------------------------------------------------------------------- #
    # Terminal operations
    # --------------------------------------------------------------------- #

    def count(self, cancellation: CancellationSignal | None = None) -> int:
        """Count the rows of this stage (ordering is ignored)."""
        signal = ensure_signal(cancellation)
        signal.raise_if_cancelled()
        counted = select(func.count()).select_from(
            self._statement.order_by(None).subquery()
        )
        return int(self._session.scalar(counted) or 0)

    def exists(self, cancellation: CancellationSignal | None = None) -> bool:
        """Return True if the stage yields at least one row."""
        signal = ensure_signal(cancellation)
        signal.raise_if_cancelled()
        return bool(self._session.scalar(select(self._statement.exists())))

    def first(self, cancellation: CancellationSignal | None = None) -> T | None:
        """Return the first row of the stage, or None."""
        rows = self.take(1).materialize(cancellation)
        return rows[0] if rows else None

    def materialize(self, cancellation: CancellationSignal | None = None) -> list[T]:
        """Execute the stage and return its rows."""
        signal = ensure_signal(cancellation)
        signal.raise_if_cancelled()
        items: list[Any] = self._fetch()
        for transform in self._transforms:
            signal.raise_if_cancelled()
            items = transform(items)
        return items

    # --------------------------------------------------------------------- #
    # Internals
    # --------------------------------------------------------------------- #

    def _fetch(self) -> list[Any]:
        if self._row_factory is not None:
            result = self._session.execute(self._statement).mappings()
            return [self._row_factory(**row) for row in result]
        if self._tracking is TrackingMode.TRACKING:
            return list(self._session.scalars(self._statement))
        # pending changes must be visible to the reader session
        self._session.flush()
        with Session(bind=self._session.connection(), autoflush=False) as reader:
            return list(reader.scalars(self._statement))

    def _derive(self, **changes: Any) -> Query[Any]:
        params: dict[str, Any] = {
            "statement": self._statement,
            "entity": self._entity,
            "tracking": self._tracking,
            "row_factory": self._row_factory,
            "transforms": self._transforms,
        }
        params.update(changes)
        statement = params.pop("statement")
        return Query(self._session, statement, **params)

