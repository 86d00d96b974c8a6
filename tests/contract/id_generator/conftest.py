"""Fixtures for id_generator contract tests."""

from collections.abc import Iterable

import pytest

from geodex.adapters.id_generators import make_id_generator
from geodex.interfaces.id_generator import IdGenerator


@pytest.fixture(params=["uuid4", "ulid", "sequential"])
def id_generator(request: pytest.FixtureRequest) -> Iterable[IdGenerator]:
    """Yield a brand-new IdGenerator for every registered kind."""
    yield make_id_generator(request.param)


@pytest.fixture(params=["ulid", "sequential"])
def monotonic_id_generator(request: pytest.FixtureRequest) -> Iterable[IdGenerator]:
    """Yield generators that promise lexicographically increasing ids."""
    yield make_id_generator(request.param)
