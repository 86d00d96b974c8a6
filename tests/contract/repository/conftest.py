"""Fixtures for repository contract tests.

Every test runs once per record type against each SQLite flavour.
"""

from __future__ import annotations

import datetime
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import pytest

from geodex.adapters.id_generators import SequentialIdGenerator
from geodex.adapters.unit_of_work import SqlAlchemyUnitOfWork
from geodex.domain.records import Country, Gender, Group, Record, Role, User

# pylint: disable=redefined-outer-name


@dataclass(frozen=True)
class RecordKind:
    """How to build and rename one record type in a generic way."""

    repository: str
    make: Callable[[str], Record]
    name_field: str
    id_column: Any


def _user(name: str) -> User:
    return User(
        user_name=name,
        password="pw",
        first_name="Ada",
        last_name="Lovelace",
        gender=Gender.WOMAN,
        registration_date=datetime.datetime(2024, 1, 1, tzinfo=datetime.timezone.utc),
    )


KINDS = {
    "country": RecordKind("countries", lambda n: Country(name=n), "name", lambda: Country.id),
    "group": RecordKind("groups", lambda n: Group(title=n), "title", lambda: Group.id),
    "role": RecordKind("roles", lambda n: Role(name=n[:10]), "name", lambda: Role.id),
    "user": RecordKind("users", _user, "user_name", lambda: User.id),
}


@pytest.fixture(params=sorted(KINDS))
def kind(request: pytest.FixtureRequest) -> RecordKind:
    """The record type under test."""
    return KINDS[request.param]


@pytest.fixture(params=["sqlite_engine_memory", "sqlite_engine_file"])
def contract_uow(request: pytest.FixtureRequest) -> SqlAlchemyUnitOfWork:
    """Unit of work over an in-memory or a migrated file database."""
    engine = request.getfixturevalue(request.param)
    return SqlAlchemyUnitOfWork(engine, SequentialIdGenerator())
