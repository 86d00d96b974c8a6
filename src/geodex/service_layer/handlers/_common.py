"""Building blocks shared by the record handlers.

Mutation handlers follow the same sequence:
``validate -> check uniqueness -> locate target -> apply -> respond``.
Validation happens in the message bus; the helpers here cover the rest.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from geodex.domain.records import Record, normalize_name
from geodex.interfaces.query import TrackingMode
from geodex.interfaces.sql_functions import casefold

if TYPE_CHECKING:
    from geodex.interfaces.cancellation import CancellationSignal
    from geodex.interfaces.repository import Repository
    from geodex.interfaces.unit_of_work import AbstractUnitOfWork

T = TypeVar("T", bound=Record)


class UnitOfWorkNotOpenError(RuntimeError):
    """A lazy query was requested outside an open unit of work."""


def require_open(uow: AbstractUnitOfWork) -> None:
    """Lazy results read through the caller's unit of work, so it must be open.

    Raises:
        UnitOfWorkNotOpenError: if ``uow`` is not open.
    """
    if not uow.is_open:
        raise UnitOfWorkNotOpenError(
            "List queries must be handled inside an open unit of work"
        )


def name_exists(  # pylint: disable=too-many-arguments
    repository: Repository[T],
    column: Any,
    name: str,
    *,
    exclude_id: int | None = None,
    id_column: Any = None,
    cancellation: CancellationSignal | None = None,
) -> bool:
    """Whether another record already uses ``name``, ignoring case and padding."""
    query = repository.query().where(casefold(column) == normalize_name(name))
    if exclude_id is not None:
        query = query.where(id_column != exclude_id)
    return query.exists(cancellation)


def find_by_id(
    repository: Repository[T],
    id_column: Any,
    record_id: int,
    cancellation: CancellationSignal | None = None,
) -> T | None:
    """Load one record for mutation, or None."""
    return (
        repository.query(TrackingMode.TRACKING)
        .where(id_column == record_id)
        .first(cancellation)
    )


def duplicate_name(entity: str) -> str:
    return f"{entity} with the same name exists!"


def not_found(entity: str) -> str:
    return f"{entity} not found!"


def has_children(entity: str, children: str) -> str:
    return f"{entity} can not be deleted because it has relational {children}!"


def done(entity: str, verb: str) -> str:
    return f"{entity} {verb} successfully."
