"""Dynamic filter, order and page composition over lazy queries.

Every list query handler feeds its base :class:`~geodex.interfaces.query.Query`
through :func:`compose`:

1. The default order of the response shape applies, followed by the identity
   columns as tie-breakers so equal keys still sort deterministically.
2. If the requested :class:`~geodex.service_layer.paging.OrderSpec` names one
   of the shape's :class:`OrderField` members, that field replaces the
   default order (tie-breakers are kept). Other names are ignored.
3. Active filters add predicates. A :class:`TextFilter` is active when its
   value has non-whitespace content and matches case-sensitively on the
   trimmed value.
4. The result is a :class:`QueryResult`. ``count()`` counts the filtered,
   unpaged stage and ``materialize()`` pages that same stage.

Nothing here touches the store; only the :class:`QueryResult` terminals do.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from sqlalchemy import func

from geodex.interfaces.sql_functions import contains_text

from .paging import OrderSpec, PageSpec

if TYPE_CHECKING:
    from sqlalchemy.sql import ColumnElement

    from geodex.interfaces.cancellation import CancellationSignal
    from geodex.interfaces.query import Query

T = TypeVar("T")
R = TypeVar("R")


class OrderField(Enum):
    """Base for the closed set of orderable fields of a response shape.

    Member values are response attribute names (``"country_name"``). A
    requested property name matches regardless of case and underscores, so
    ``"CountryName"`` selects ``country_name`` too.
    """

    def matches(self, property_name: str) -> bool:
        return _squash(property_name) == _squash(self.value)


def _squash(name: str) -> str:
    return name.replace("_", "").strip().casefold()


@dataclass(frozen=True)
class TextFilter:
    """Case-sensitive "contains" filter on a string column.

    Attributes:
        column: Column (or expression) to search.
        value: Requested text; blank values apply no predicate.
        nullable: The column can be NULL (right side of a left join); it is
            coalesced to ``""`` before matching.
    """

    column: Any
    value: str | None
    nullable: bool = False

    @property
    def is_active(self) -> bool:
        return bool(self.value and self.value.strip())

    def predicate(self) -> ColumnElement[bool]:
        column = func.coalesce(self.column, "") if self.nullable else self.column
        return contains_text(column, self.value.strip())  # type: ignore[union-attr]


@dataclass(frozen=True)
class EqualsFilter:
    """Exact-match filter; a None value applies no predicate."""

    column: Any
    value: Any

    @property
    def is_active(self) -> bool:
        return self.value is not None

    def predicate(self) -> ColumnElement[bool]:
        return self.column == self.value


Filter = TextFilter | EqualsFilter


class QueryResult(Generic[T]):
    """Lazy, filtered and ordered result with deferred paging.

    Args:
        stage: Filtered, ordered and unpaged query.
        page: Requested page; None returns the whole stage.
    """

    def __init__(self, stage: Query[T], page: PageSpec | None = None) -> None:
        self._stage = stage
        self._page = page or PageSpec(page_number=0)

    @property
    def stage(self) -> Query[T]:
        """The filtered, ordered, unpaged query."""
        return self._stage

    @property
    def page(self) -> PageSpec:
        """Requested page; ``total_count`` is set once :meth:`count` ran."""
        return self._page

    @property
    def total_count(self) -> int:
        return self._page.total_count

    def count(self, cancellation: CancellationSignal | None = None) -> int:
        """Count the unpaged stage and record it as ``page.total_count``."""
        total = self._stage.count(cancellation)
        self._page = dataclasses.replace(self._page, total_count=total)
        return total

    def paged(self) -> Query[T]:
        """The stage with the requested page applied, if any."""
        if not self._page.is_paged:
            return self._stage
        return self._stage.skip(self._page.offset).take(self._page.count_per_page)

    def materialize(self, cancellation: CancellationSignal | None = None) -> list[T]:
        """Return the requested page (or everything if unpaged)."""
        return self.paged().materialize(cancellation)

    def map(self, transform: Callable[[T], R]) -> QueryResult[R]:
        """Transform every materialized item; paging is unaffected."""
        return QueryResult(self._stage.map(transform), self._page)

    def map_all(self, transform: Callable[[list[T]], Iterable[R]]) -> QueryResult[R]:
        """Transform each materialized page as a whole."""
        return QueryResult(self._stage.map_all(transform), self._page)


def order_clauses(
    order: OrderSpec | None,
    *,
    orderable: Mapping[OrderField, Any],
    default_order: Sequence[Any],
    tie_breakers: Sequence[Any] = (),
) -> list[Any]:
    """Resolve the ORDER BY clauses for a request.

    Args:
        order: Requested sort, or None.
        orderable: Orderable fields of the response shape and their columns.
        default_order: Clauses used when ``order`` names no orderable field.
        tie_breakers: Columns appended, ascending, after the chosen order.

    A requested field sorts NULLs last in either direction, on every backend.
    """
    field = None
    if order is not None and order.property_name:
        field = next((f for f in orderable if f.matches(order.property_name)), None)
    if field is None:
        clauses = list(default_order)
    else:
        column = orderable[field]
        direction = column.desc() if order.descending else column.asc()  # type: ignore[union-attr]
        clauses = [direction.nulls_last()]
    return clauses + [column.asc() for column in tie_breakers]


def compose(  # pylint: disable=too-many-arguments
    query: Query[T],
    *,
    order: OrderSpec | None = None,
    page: PageSpec | None = None,
    orderable: Mapping[OrderField, Any] | None = None,
    default_order: Sequence[Any] = (),
    tie_breakers: Sequence[Any] = (),
    filters: Iterable[Filter] = (),
) -> QueryResult[T]:
    """Apply order and filters to ``query`` and defer paging.

    Returns:
        A :class:`QueryResult` over the filtered, ordered stage.
    """
    stage = query.order_by(
        *order_clauses(
            order,
            orderable=orderable or {},
            default_order=default_order,
            tie_breakers=tie_breakers,
        )
    )
    predicates = [f.predicate() for f in filters if f.is_active]
    if predicates:
        stage = stage.where(*predicates)
    return QueryResult(stage, page)
