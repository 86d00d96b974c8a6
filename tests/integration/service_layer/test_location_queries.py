"""Integration tests for the country/city join queries.

Covers filtering, ordering and paging as composed by the query handlers.
"""

import pytest

from geodex.service_layer import commands, queries
from geodex.service_layer.paging import OrderSpec, PageSpec
from geodex.service_layer.queries import LocationResponse

# pylint: disable=redefined-outer-name


def _run(bus, query):
    """Return (total_count, rows) the way a transport would."""
    with bus.uow:
        result = bus.handle(query)
        total = result.count()
        return total, result.materialize()


@pytest.fixture
def world(add_locations):
    """Türkiye and the USA with cities, China without."""
    return add_locations(
        {
            "Türkiye": ["Ankara", "İzmir", "Antalya"],
            "United States of America": ["Ohio", "Texas"],
            "China": [],
        }
    )


class TestJoinVariants:
    """Inner and left joins."""

    @staticmethod
    def test_inner_join_drops_country_without_cities(bus, world):
        """China has no cities, so the inner join omits it."""
        total, rows = _run(bus, queries.LocationInnerJoinQuery())
        assert total == 5
        assert "China" not in {row.country_name for row in rows}

    @staticmethod
    def test_left_join_keeps_country_once_with_empty_city(bus, world):
        """China appears exactly once, without city fields."""
        total, rows = _run(bus, queries.LocationLeftJoinQuery())
        china = [row for row in rows if row.country_name == "China"]
        assert total == 6
        assert china == [LocationResponse(world["China"], "China", None, None)]

    @staticmethod
    def test_left_join_city_filter_drops_country_without_cities(bus, world):
        """A non-blank city filter compares empty city names."""
        _, rows = _run(bus, queries.LocationLeftJoinQuery(city_name="a"))
        assert {row.country_name for row in rows} == {"Türkiye", "United States of America"}

    @staticmethod
    def test_default_order_is_country_then_insertion(bus, world):
        """Rows sort by country name, then by identity."""
        _, rows = _run(bus, queries.LocationInnerJoinQuery())
        assert [(r.country_name, r.city_name) for r in rows] == [
            ("Türkiye", "Ankara"),
            ("Türkiye", "İzmir"),
            ("Türkiye", "Antalya"),
            ("United States of America", "Ohio"),
            ("United States of America", "Texas"),
        ]


class TestTextFilters:
    """Case-sensitive substring filters."""

    @staticmethod
    def test_lowercase_fragment_does_not_match(bus, world):
        """'tur' does not match 'Türkiye'."""
        total, rows = _run(bus, queries.LocationInnerJoinQuery(country_name="tur"))
        assert (total, rows) == (0, [])

    @staticmethod
    def test_exact_case_fragment_matches(bus, world):
        """'Tür' matches every Türkiye row."""
        total, rows = _run(bus, queries.LocationInnerJoinQuery(country_name="Tür"))
        assert total == 3
        assert {row.country_name for row in rows} == {"Türkiye"}

    @staticmethod
    def test_fragment_is_trimmed(bus, world):
        """Surrounding whitespace of a filter is ignored."""
        total, _ = _run(bus, queries.LocationInnerJoinQuery(city_name="  An "))
        assert total == 2

    @staticmethod
    @pytest.mark.parametrize("blank", [None, "", "   "])
    def test_blank_filters_match_everything(bus, world, blank):
        """Blank filters add no predicate."""
        total, _ = _run(
            bus, queries.LocationLeftJoinQuery(country_name=blank, city_name=blank)
        )
        assert total == 6

    @staticmethod
    def test_both_filters_combine(bus, world):
        """Filters are combined with AND."""
        _, rows = _run(
            bus, queries.LocationInnerJoinQuery(country_name="Tür", city_name="Ant")
        )
        assert [row.city_name for row in rows] == ["Antalya"]


class TestOrdering:
    """Dynamic ordering."""

    @staticmethod
    def test_order_by_city_descending(bus, world):
        """A known field replaces the default order."""
        _, rows = _run(
            bus,
            queries.LocationInnerJoinQuery(order=OrderSpec("CityName", descending=True)),
        )
        assert [row.city_name for row in rows] == ["İzmir", "Texas", "Ohio", "Antalya", "Ankara"]

    @staticmethod
    @pytest.mark.parametrize("descending", [False, True], ids=["asc", "desc"])
    def test_country_without_cities_sorts_last_by_city(bus, world, descending):
        """Rows without a city come after every named city in either direction."""
        _, rows = _run(
            bus,
            queries.LocationLeftJoinQuery(order=OrderSpec("city_name", descending)),
        )
        assert (rows[-1].country_name, rows[-1].city_name) == ("China", None)
        assert None not in [row.city_name for row in rows[:-1]]

    @staticmethod
    def test_unknown_field_keeps_default(bus, world):
        """Unknown names are ignored."""
        _, default_rows = _run(bus, queries.LocationInnerJoinQuery())
        _, rows = _run(
            bus, queries.LocationInnerJoinQuery(order=OrderSpec("population", True))
        )
        assert rows == default_rows

    @staticmethod
    def test_materializing_twice_is_stable(bus, world):
        """The same query gives the same rows every time."""
        with bus.uow:
            result = bus.handle(queries.LocationLeftJoinQuery())
            assert result.materialize() == result.materialize()


class TestPaging:
    """Deferred paging."""

    @staticmethod
    def test_second_page_of_twenty_five_matches(bus, twenty_five_ports):
        """Page 2 of 10 holds matches 11 to 20; the total stays 25."""
        query = queries.LocationInnerJoinQuery(
            country_name="Atlan", page=PageSpec(page_number=2, count_per_page=10)
        )
        with bus.uow:
            result = bus.handle(query)
            assert result.count() == 25
            rows = result.materialize()
            assert result.page.total_count == 25

        assert [row.city_name for row in rows] == [f"Port {n}" for n in range(11, 21)]

    @staticmethod
    def test_last_page_is_partial(bus, twenty_five_ports):
        """The final page holds the remainder."""
        _, rows = _run(
            bus,
            queries.LocationInnerJoinQuery(
                country_name="Atlan", page=PageSpec(page_number=3, count_per_page=10)
            ),
        )
        assert len(rows) == 5

    @staticmethod
    @pytest.mark.parametrize("page", [PageSpec(0, 10), PageSpec(2, 0), PageSpec(-1, -1)])
    def test_non_positive_paging_returns_everything(bus, twenty_five_ports, page):
        """Paging applies only when both numbers are positive."""
        _, rows = _run(bus, queries.LocationInnerJoinQuery(country_name="Atlan", page=page))
        assert len(rows) == 25


def test_seeded_locations(bus):
    """The demo data has two countries with cities and one without."""
    assert bus.handle(commands.SeedLocations()).is_successful

    inner_total, _ = _run(bus, queries.LocationInnerJoinQuery())
    left_total, left_rows = _run(bus, queries.LocationLeftJoinQuery(country_name="China"))

    assert inner_total == 81 + 49
    assert left_total == 1
    assert left_rows[0].city_id is None
