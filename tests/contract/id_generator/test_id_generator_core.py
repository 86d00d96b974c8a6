"""Contract tests for IdGenerator implementations."""

from __future__ import annotations

import concurrent.futures as cf
from typing import TYPE_CHECKING

import pytest

from geodex.adapters.db.schema import GUID_LENGTH
from geodex.adapters.id_generators import make_id_generator

if TYPE_CHECKING:
    from geodex.interfaces.id_generator import IdGenerator


def test_returns_non_empty_str_that_fits_the_guid_column(id_generator: IdGenerator):
    """new_id() returns a non-empty string no longer than the guid column."""
    new_id = id_generator.new_id()
    assert isinstance(new_id, str)
    assert 0 < len(new_id) <= GUID_LENGTH


def test_returns_unique_ids(id_generator: IdGenerator):
    """new_id() never repeats itself."""
    ids = [id_generator.new_id() for _ in range(5000)]
    assert len(ids) == len(set(ids))


def test_threaded_uniqueness_single_instance(id_generator: IdGenerator):
    """new_id() stays unique when called from many threads."""
    with cf.ThreadPoolExecutor(max_workers=16) as ex:
        ids = list(ex.map(lambda _: id_generator.new_id(), range(8000)))
    assert len(ids) == len(set(ids))


def test_monotonic_order_single_thread(monotonic_id_generator: IdGenerator):
    """Ids from one thread sort in generation order."""
    ids = [monotonic_id_generator.new_id() for _ in range(2000)]
    assert ids == sorted(ids)


@pytest.mark.parametrize("kind", ["UUID4", " ulid "])
def test_kind_is_normalized(kind):
    """Generator names ignore case and padding."""
    assert make_id_generator(kind).new_id()


def test_unknown_kind_raises():
    """Unknown names are rejected with the known ones listed."""
    with pytest.raises(ValueError, match="sequential"):
        make_id_generator("snowflake")
