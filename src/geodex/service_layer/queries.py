"""Read requests and the response shapes they produce.

List queries are answered with a lazy
:class:`~geodex.service_layer.composer.QueryResult` of responses; the caller
decides when to count and materialize it (inside the same unit of work).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from .composer import OrderField
from .paging import OrderSpec, PageSpec

if TYPE_CHECKING:
    from geodex.domain.records import City, Country, Group, User

# pylint: disable=too-many-instance-attributes


@dataclass(frozen=True)
class QueryRequest:
    """Base class for all read requests."""


# --------------------------------------------------------------------------- #
# Countries and cities
# --------------------------------------------------------------------------- #


@dataclass(frozen=True)
class CountryQuery(QueryRequest):
    """Countries with their cities, by name. ``id`` selects a single country."""

    id: int | None = None


@dataclass(frozen=True)
class CityQuery(QueryRequest):
    """Cities by name, optionally of one country."""

    id: int | None = None
    country_id: int | None = None


@dataclass(frozen=True)
class CityResponse:
    id: int
    guid: str
    name: str
    country_id: int
    country_name: str | None = None

    @classmethod
    def from_record(cls, city: City, country_name: str | None = None) -> CityResponse:
        return cls(
            id=city.id,  # type: ignore[arg-type]
            guid=city.guid,  # type: ignore[arg-type]
            name=city.name,
            country_id=city.country_id,
            country_name=country_name,
        )


@dataclass(frozen=True)
class CountryResponse:
    id: int
    guid: str
    name: str
    cities: tuple[CityResponse, ...] = ()

    @classmethod
    def from_record(cls, country: Country) -> CountryResponse:
        return cls(
            id=country.id,  # type: ignore[arg-type]
            guid=country.guid,  # type: ignore[arg-type]
            name=country.name,
            cities=tuple(CityResponse.from_record(c) for c in country.cities),
        )


# --------------------------------------------------------------------------- #
# Locations (country/city joins)
# --------------------------------------------------------------------------- #


class LocationOrderField(OrderField):
    COUNTRY_NAME = "country_name"
    CITY_NAME = "city_name"


@dataclass(frozen=True)
class LocationQuery(QueryRequest):
    """Country/city pairs filtered by name fragments, ordered and paged.

    Attributes:
        country_name: Case-sensitive fragment of the country name.
        city_name: Case-sensitive fragment of the city name.
        order: Sort; orderable by ``country_name`` or ``city_name``.
        page: Requested page.
    """

    country_name: str | None = None
    city_name: str | None = None
    order: OrderSpec = field(
        default_factory=lambda: OrderSpec(LocationOrderField.COUNTRY_NAME.value)
    )
    page: PageSpec = field(default_factory=PageSpec)


@dataclass(frozen=True)
class LocationInnerJoinQuery(LocationQuery):
    """Only countries that have cities, one row per city."""


@dataclass(frozen=True)
class LocationLeftJoinQuery(LocationQuery):
    """Every country; countries without cities appear once with no city."""


@dataclass(frozen=True)
class LocationResponse:
    country_id: int
    country_name: str
    city_id: int | None
    city_name: str | None


# --------------------------------------------------------------------------- #
# Groups
# --------------------------------------------------------------------------- #


@dataclass(frozen=True)
class GroupQuery(QueryRequest):
    id: int | None = None


@dataclass(frozen=True)
class GroupResponse:
    id: int
    guid: str
    title: str

    @classmethod
    def from_record(cls, group: Group) -> GroupResponse:
        return cls(id=group.id, guid=group.guid, title=group.title)  # type: ignore[arg-type]


# --------------------------------------------------------------------------- #
# Users
# --------------------------------------------------------------------------- #


class UserOrderField(OrderField):
    USER_NAME = "user_name"
    FULL_NAME = "full_name"
    REGISTRATION_DATE = "registration_date"
    SCORE = "score"
    IS_ACTIVE = "is_active"


@dataclass(frozen=True)
class UserQuery(QueryRequest):
    """Users, active first, then by registration date and user name.

    Attributes:
        id: Select a single user.
        user_name: Case-sensitive fragment of the user name.
        full_name: Case-sensitive fragment of "first last".
        group_id: Only users of this group.
        is_active: Only active (True) or inactive (False) users.
    """

    id: int | None = None
    user_name: str | None = None
    full_name: str | None = None
    group_id: int | None = None
    is_active: bool | None = None
    order: OrderSpec = field(default_factory=OrderSpec)
    page: PageSpec = field(default_factory=PageSpec)


@dataclass(frozen=True)
class UserResponse:
    """A user with display-formatted fields (the ``*_f`` attributes).

    The password is never part of a response.
    """

    id: int
    guid: str
    user_name: str
    first_name: str
    last_name: str
    gender: str
    birth_date: date | None
    registration_date: datetime
    score: Decimal
    is_active: bool
    address: str | None
    country_id: int | None
    city_id: int | None
    group_id: int | None
    role_ids: tuple[int, ...]
    full_name: str
    gender_f: str
    birth_date_f: str
    registration_date_f: str
    score_f: str
    is_active_f: str
    country: str
    city: str
    group: str | None
    roles: tuple[str, ...]

    @classmethod
    def from_record(cls, user: User) -> UserResponse:
        roles = sorted(user.roles, key=lambda role: role.name)
        return cls(
            id=user.id,  # type: ignore[arg-type]
            guid=user.guid,  # type: ignore[arg-type]
            user_name=user.user_name,
            first_name=user.first_name,
            last_name=user.last_name,
            gender=user.gender.name,
            birth_date=user.birth_date,
            registration_date=user.registration_date,
            score=user.score,
            is_active=user.is_active,
            address=user.address,
            country_id=user.country_id,
            city_id=user.city_id,
            group_id=user.group_id,
            role_ids=tuple(role.id for role in roles),  # type: ignore[misc]
            full_name=f"{user.first_name} {user.last_name}",
            gender_f=user.gender.name.title(),
            birth_date_f=user.birth_date.strftime("%m/%d/%Y") if user.birth_date else "",
            registration_date_f=short_date(user.registration_date),
            score_f=f"{user.score:,.1f}",
            is_active_f="Active" if user.is_active else "Not Active",
            country=str(user.country_id or 0),
            city=str(user.city_id or 0),
            group=user.group.title if user.group is not None else None,
            roles=tuple(role.name for role in roles),
        )


def short_date(value: date) -> str:
    """Format as month/day/year without zero padding (``8/21/1980``)."""
    return f"{value.month}/{value.day}/{value.year}"


@dataclass(frozen=True)
class UserLocationQuery(QueryRequest):
    """Users with country and city names from the location directory.

    Attributes:
        authorization: The caller's ``Authorization`` header value; forwarded
            to the directory without its ``Bearer`` prefix.
    """

    authorization: str | None = None


@dataclass(frozen=True)
class UserLocationResponse:
    id: int
    guid: str
    user_name: str
    full_name: str
    address: str | None
    country_id: int | None
    country: str
    city_id: int | None
    city: str
