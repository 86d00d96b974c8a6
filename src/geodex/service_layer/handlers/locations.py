"""Country/city join queries.

Both variants filter on case-sensitive name fragments. In the left join the
city columns are NULL for countries without cities, so city filters compare
against ``""`` there: such a country is dropped by any non-blank city
filter.
"""

from collections.abc import Callable

from geodex.domain.records import City, Country
from geodex.interfaces.cancellation import CancellationSignal
from geodex.interfaces.query import JoinKind
from geodex.interfaces.unit_of_work import AbstractUnitOfWork
from geodex.service_layer import queries
from geodex.service_layer.composer import QueryResult, TextFilter, compose
from geodex.service_layer.queries import LocationOrderField, LocationResponse

from ._common import require_open


def _locations(
    query: queries.LocationQuery, uow: AbstractUnitOfWork, kind: JoinKind
) -> QueryResult[LocationResponse]:
    require_open(uow)
    joined = (
        uow.countries.query()
        .join(uow.cities.query(), Country.id == City.country_id, kind=kind)
        .project(
            LocationResponse,
            country_id=Country.id,
            country_name=Country.name,
            city_id=City.id,
            city_name=City.name,
        )
    )
    return compose(
        joined,
        order=query.order,
        page=query.page,
        orderable={
            LocationOrderField.COUNTRY_NAME: Country.name,
            LocationOrderField.CITY_NAME: City.name,
        },
        default_order=[Country.name.asc()],
        tie_breakers=[Country.id, City.id],
        filters=[
            TextFilter(Country.name, query.country_name),
            TextFilter(City.name, query.city_name, nullable=kind is JoinKind.LEFT),
        ],
    )


def query_locations_inner_join(
    query: queries.LocationInnerJoinQuery,
    cancellation: CancellationSignal,  # pylint: disable=unused-argument
    uow: AbstractUnitOfWork,
) -> QueryResult[LocationResponse]:
    """One row per city, with its country."""
    return _locations(query, uow, JoinKind.INNER)


def query_locations_left_join(
    query: queries.LocationLeftJoinQuery,
    cancellation: CancellationSignal,  # pylint: disable=unused-argument
    uow: AbstractUnitOfWork,
) -> QueryResult[LocationResponse]:
    """One row per city, plus one row for each country without cities."""
    return _locations(query, uow, JoinKind.LEFT)


QUERY_HANDLERS: dict[type, Callable[..., QueryResult]] = {
    queries.LocationInnerJoinQuery: query_locations_inner_join,
    queries.LocationLeftJoinQuery: query_locations_left_join,
}
