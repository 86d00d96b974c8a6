"""Record types for the locations and users services.

Records are plain dataclasses. The record store maps them imperatively
(see ``geodex.adapters.db.orm``), so nothing here depends on SQLAlchemy.

Conventions:
  - ``id`` is assigned by the store when the record is created and is never
    reassigned afterwards.
  - ``guid`` is assigned once at creation from an ``IdGenerator`` and is stable.
  - Name-bearing records store their name trimmed but not case-folded; use
    :func:`normalize_name` to compare names.
  - Relationship attributes are excluded from ``__init__``; they are populated
    by the store on load, or assigned explicitly before ``create``.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

# pylint: disable=too-many-instance-attributes

COUNTRY_NAME_MAX_LENGTH = 125
CITY_NAME_MAX_LENGTH = 175
GROUP_TITLE_MAX_LENGTH = 100
ROLE_NAME_MAX_LENGTH = 10
USER_NAME_MAX_LENGTH = 30
PERSON_NAME_MAX_LENGTH = 50


def normalize_name(value: str) -> str:
    """Return the comparison form of a name: trimmed and case-folded.

    The normalized form is only used for comparisons; stored values keep
    their original casing.
    """
    return value.strip().casefold()


@dataclass(eq=False, kw_only=True)
class Record:
    """Base for every persisted record."""

    id: int | None = None
    guid: str | None = None


@dataclass(eq=False, kw_only=True)
class Country(Record):
    """A country; owns many cities."""

    name: str
    cities: list[City] = field(init=False, repr=False)


@dataclass(eq=False, kw_only=True)
class City(Record):
    """A city belonging to exactly one country."""

    name: str
    country_id: int
    country: Country = field(init=False, repr=False)


@dataclass(eq=False, kw_only=True)
class Group(Record):
    """A user group."""

    title: str


@dataclass(eq=False, kw_only=True)
class Role(Record):
    """A role that can be granted to users."""

    name: str


class Gender(Enum):
    """Gender values stored for users."""

    WOMAN = 1
    MAN = 2


@dataclass(eq=False, kw_only=True)
class User(Record):
    """A user account.

    ``country_id`` and ``city_id`` reference records owned by the locations
    service and are therefore not foreign keys; their display names are
    resolved through a ``LocationDirectory``.
    """

    user_name: str
    password: str
    first_name: str
    last_name: str
    gender: Gender
    registration_date: datetime.datetime
    is_active: bool = True
    score: Decimal = Decimal("0")
    birth_date: datetime.date | None = None
    address: str | None = None
    country_id: int | None = None
    city_id: int | None = None
    group_id: int | None = None
    group: Group | None = field(init=False, repr=False)
    roles: list[Role] = field(init=False, repr=False)
