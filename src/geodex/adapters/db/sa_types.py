"""Custom SQLAlchemy column types for GEODEX records."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import TYPE_CHECKING, Any

from sqlalchemy import Integer
from sqlalchemy.types import DateTime, TypeDecorator

from geodex.adapters.db.dialects import DialectName

if TYPE_CHECKING:
    from sqlalchemy.engine.interfaces import Dialect

__all__ = ["IntegerEnum", "UTCDateTime"]


class UTCDateTime(TypeDecorator[datetime]):  # pylint: disable=too-many-ancestors
    """Timezone-aware UTC datetime.

    Naive values are taken to be UTC. SQLite has no timezone support, so the
    value is stored there as naive UTC and declared UTC again on load.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect: Dialect) -> Any:
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        value = value.astimezone(timezone.utc)
        if dialect.name == DialectName.SQLITE.value:
            return value.replace(tzinfo=None)
        return value

    def process_result_value(self, value: Any, dialect: Dialect) -> datetime | None:
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    @property
    def python_type(self) -> type[datetime]:
        return datetime


class IntegerEnum(TypeDecorator[Enum]):  # pylint: disable=too-many-ancestors
    """Store an :class:`~enum.Enum` member as its integer value.

    Args:
        enum_cls: Enum whose members have integer values.
    """

    impl = Integer
    cache_ok = True

    def __init__(self, enum_cls: type[Enum]) -> None:
        super().__init__()
        self._enum_cls = enum_cls

    def process_bind_param(self, value: Enum | int | None, dialect: Dialect) -> Any:
        if value is None:
            return None
        return self._enum_cls(value).value

    def process_result_value(self, value: Any, dialect: Dialect) -> Enum | None:
        if value is None:
            return None
        return self._enum_cls(value)

    @property
    def python_type(self) -> type[Enum]:
        return self._enum_cls
