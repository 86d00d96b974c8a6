"""Global pytest fixtures for GEODEX.

Tests are marked by the directory they live in: everything under
``tests/unit/`` gets ``unit``, ``tests/integration/`` gets ``integration``,
and so on (see ``SUITE_MARKERS``).
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

# pylint: disable=unused-argument

pytest_plugins = [
    "tests.fixtures.sqlite",
    "tests.fixtures.datagen",
]

TESTS_ROOT = Path(__file__).parent.resolve()
SUITE_MARKERS = ("unit", "integration", "contract", "functional")


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add the suite mark of each item's top-level test directory."""
    for item in items:
        try:
            suite = item.path.resolve().relative_to(TESTS_ROOT).parts[0]
        except ValueError:
            continue
        if suite in SUITE_MARKERS and not any(
            marker.name == suite for marker in item.iter_markers()
        ):
            item.add_marker(getattr(pytest.mark, suite))


@pytest.fixture
def engine(request: pytest.FixtureRequest) -> Engine:
    """Indirection fixture to parametrize over engine-providing fixtures.

    Example:
        ```py
        @pytest.mark.parametrize(
            "engine", ["sqlite_engine_memory", "sqlite_engine_file"], indirect=True
        )
        def test_something(engine): ...
        ```
    """
    return request.getfixturevalue(request.param)
