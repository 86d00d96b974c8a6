"""City handlers.

A city must belong to an existing country; the check runs after the name
uniqueness check and the target lookup.
"""

from collections.abc import Callable

from sqlalchemy.orm import selectinload

from geodex.domain.records import City, Country
from geodex.interfaces.cancellation import CancellationSignal
from geodex.interfaces.unit_of_work import AbstractUnitOfWork
from geodex.service_layer import commands, queries
from geodex.service_layer.composer import EqualsFilter, QueryResult, compose
from geodex.service_layer.responses import CommandResponse

from ._common import done, duplicate_name, find_by_id, name_exists, not_found, require_open

ENTITY = "City"


def _country_exists(
    uow: AbstractUnitOfWork, country_id: int, cancellation: CancellationSignal
) -> bool:
    return uow.countries.query().where(Country.id == country_id).exists(cancellation)


def create_city(
    cmd: commands.CreateCity,
    cancellation: CancellationSignal,
    uow: AbstractUnitOfWork,
) -> CommandResponse:
    with uow:
        if name_exists(uow.cities, City.name, cmd.name, cancellation=cancellation):
            return CommandResponse.error(duplicate_name(ENTITY))
        if not _country_exists(uow, cmd.country_id, cancellation):
            return CommandResponse.error(not_found("Country"))

        city = uow.cities.create(City(name=cmd.name.strip(), country_id=cmd.country_id))
        uow.commit(cancellation)
        return CommandResponse.success(done(ENTITY, "created"), city.id)


def update_city(
    cmd: commands.UpdateCity,
    cancellation: CancellationSignal,
    uow: AbstractUnitOfWork,
) -> CommandResponse:
    with uow:
        if name_exists(
            uow.cities,
            City.name,
            cmd.name,
            exclude_id=cmd.id,
            id_column=City.id,
            cancellation=cancellation,
        ):
            return CommandResponse.error(duplicate_name(ENTITY))

        city = find_by_id(uow.cities, City.id, cmd.id, cancellation)
        if city is None:
            return CommandResponse.error(not_found(ENTITY))
        if not _country_exists(uow, cmd.country_id, cancellation):
            return CommandResponse.error(not_found("Country"))

        city.name = cmd.name.strip()
        city.country_id = cmd.country_id
        uow.cities.update(city)
        uow.commit(cancellation)
        return CommandResponse.success(done(ENTITY, "updated"), city.id)


def delete_city(
    cmd: commands.DeleteCity,
    cancellation: CancellationSignal,
    uow: AbstractUnitOfWork,
) -> CommandResponse:
    with uow:
        city = find_by_id(uow.cities, City.id, cmd.id, cancellation)
        if city is None:
            return CommandResponse.error(not_found(ENTITY))

        uow.cities.delete(city)
        uow.commit(cancellation)
        return CommandResponse.success(done(ENTITY, "deleted"), cmd.id)


def query_cities(
    query: queries.CityQuery,
    cancellation: CancellationSignal,  # pylint: disable=unused-argument
    uow: AbstractUnitOfWork,
) -> QueryResult[queries.CityResponse]:
    """Cities by name, with their country's name."""
    require_open(uow)
    result = compose(
        uow.cities.query().including(selectinload(City.country)),
        default_order=[City.name.asc()],
        tie_breakers=[City.id],
        filters=[
            EqualsFilter(City.id, query.id),
            EqualsFilter(City.country_id, query.country_id),
        ],
    )
    return result.map(
        lambda city: queries.CityResponse.from_record(city, city.country.name)
    )


COMMAND_HANDLERS: dict[type, Callable[..., CommandResponse]] = {
    commands.CreateCity: create_city,
    commands.UpdateCity: update_city,
    commands.DeleteCity: delete_city,
}

QUERY_HANDLERS: dict[type, Callable[..., QueryResult]] = {
    queries.CityQuery: query_cities,
}
