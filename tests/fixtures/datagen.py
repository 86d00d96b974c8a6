"""Fixtures for generating test data."""

from __future__ import annotations

import datetime
from collections.abc import Callable, Mapping, Sequence
from decimal import Decimal
from typing import TYPE_CHECKING, Any

import pytest

from geodex.domain.records import City, Country, Gender, Group, Role, User

if TYPE_CHECKING:
    from geodex.interfaces.unit_of_work import AbstractUnitOfWork

# pylint: disable=redefined-outer-name


@pytest.fixture
def add_locations(uow: AbstractUnitOfWork) -> Callable[..., dict[str, int]]:
    """Factory fixture: insert countries with their cities and commit.

    Example:
        ids = add_locations({"Türkiye": ["Ankara", "İzmir"], "China": []})
        ids["Türkiye"]  # country id
        ids["Ankara"]   # city id

    Returns:
        Callable[..., dict[str, int]]: A builder returning name -> id.
    """

    def _add(locations: Mapping[str, Sequence[str]]) -> dict[str, int]:
        ids: dict[str, int] = {}
        with uow:
            for country_name, city_names in locations.items():
                country = uow.countries.create(Country(name=country_name))
                ids[country_name] = country.id  # type: ignore[assignment]
                for city_name in city_names:
                    city = uow.cities.create(
                        City(name=city_name, country_id=country.id)  # type: ignore[arg-type]
                    )
                    ids[city_name] = city.id  # type: ignore[assignment]
            uow.commit()
        return ids

    return _add


@pytest.fixture
def make_user() -> Callable[..., User]:
    """Factory for valid, unsaved users with sensible defaults.

    Defaults can be overridden by keyword arguments; ``roles`` takes a list
    of Role records and ``group`` a Group record.
    """

    def _make(
        user_name: str = "jdoe",
        *,
        group: Group | None = None,
        roles: list[Role] | None = None,
        **overrides: Any,
    ) -> User:
        fields: dict[str, Any] = {
            "user_name": user_name,
            "password": "secret",
            "first_name": "Jane",
            "last_name": "Doe",
            "gender": Gender.WOMAN,
            "registration_date": datetime.datetime(
                2024, 1, 2, 3, 4, 5, tzinfo=datetime.timezone.utc
            ),
            "score": Decimal("1.5"),
        }
        fields.update(overrides)
        user = User(**fields, group_id=group.id if group else None)
        user.roles = list(roles or [])
        return user

    return _make


@pytest.fixture
def twenty_five_ports(add_locations) -> dict[str, int]:
    """A country with 25 cities ("Port 01" .. "Port 25") and a decoy country."""
    return add_locations(
        {
            "Atlantis": [f"Port {n:02d}" for n in range(1, 26)],
            "Borduria": ["Szohôd", "Szprodj"],
        }
    )
