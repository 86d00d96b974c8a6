"""Country handlers."""

from collections.abc import Callable

from sqlalchemy.orm import selectinload

from geodex.domain.records import City, Country
from geodex.interfaces.cancellation import CancellationSignal
from geodex.interfaces.unit_of_work import AbstractUnitOfWork
from geodex.service_layer import commands, queries
from geodex.service_layer.composer import EqualsFilter, QueryResult, compose
from geodex.service_layer.responses import CommandResponse

from ._common import (
    done,
    duplicate_name,
    find_by_id,
    has_children,
    name_exists,
    not_found,
    require_open,
)

ENTITY = "Country"


def create_country(
    cmd: commands.CreateCountry,
    cancellation: CancellationSignal,
    uow: AbstractUnitOfWork,
) -> CommandResponse:
    """Create a country unless its name is taken."""
    with uow:
        if name_exists(uow.countries, Country.name, cmd.name, cancellation=cancellation):
            return CommandResponse.error(duplicate_name(ENTITY))

        country = uow.countries.create(Country(name=cmd.name.strip()))
        uow.commit(cancellation)
        return CommandResponse.success(done(ENTITY, "created"), country.id)


def update_country(
    cmd: commands.UpdateCountry,
    cancellation: CancellationSignal,
    uow: AbstractUnitOfWork,
) -> CommandResponse:
    """Rename a country."""
    with uow:
        if name_exists(
            uow.countries,
            Country.name,
            cmd.name,
            exclude_id=cmd.id,
            id_column=Country.id,
            cancellation=cancellation,
        ):
            return CommandResponse.error(duplicate_name(ENTITY))

        country = find_by_id(uow.countries, Country.id, cmd.id, cancellation)
        if country is None:
            return CommandResponse.error(not_found(ENTITY))

        country.name = cmd.name.strip()
        uow.countries.update(country)
        uow.commit(cancellation)
        return CommandResponse.success(done(ENTITY, "updated"), country.id)


def delete_country(
    cmd: commands.DeleteCountry,
    cancellation: CancellationSignal,
    uow: AbstractUnitOfWork,
) -> CommandResponse:
    """Delete a country that has no cities."""
    with uow:
        country = find_by_id(uow.countries, Country.id, cmd.id, cancellation)
        if country is None:
            return CommandResponse.error(not_found(ENTITY))

        if uow.cities.query().where(City.country_id == country.id).exists(cancellation):
            return CommandResponse.error(has_children(ENTITY, "cities"))

        uow.countries.delete(country)
        uow.commit(cancellation)
        return CommandResponse.success(done(ENTITY, "deleted"), cmd.id)


def query_countries(
    query: queries.CountryQuery,
    cancellation: CancellationSignal,  # pylint: disable=unused-argument
    uow: AbstractUnitOfWork,
) -> QueryResult[queries.CountryResponse]:
    """Countries by name, each with its cities by name."""
    require_open(uow)
    result = compose(
        uow.countries.query().including(selectinload(Country.cities)),
        default_order=[Country.name.asc()],
        tie_breakers=[Country.id],
        filters=[EqualsFilter(Country.id, query.id)],
    )
    return result.map(queries.CountryResponse.from_record)


COMMAND_HANDLERS: dict[type, Callable[..., CommandResponse]] = {
    commands.CreateCountry: create_country,
    commands.UpdateCountry: update_country,
    commands.DeleteCountry: delete_country,
}

QUERY_HANDLERS: dict[type, Callable[..., QueryResult]] = {
    queries.CountryQuery: query_countries,
}
