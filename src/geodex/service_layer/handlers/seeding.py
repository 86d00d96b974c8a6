"""Demo data handlers.

Seeding replaces the existing records of a service in one unit of work, so
a failure leaves the previous data in place.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone

from geodex.domain import seed_data
from geodex.domain.records import City, Country, Group, Role, User
from geodex.interfaces.cancellation import CancellationSignal
from geodex.interfaces.query import TrackingMode
from geodex.interfaces.repository import Repository
from geodex.interfaces.unit_of_work import AbstractUnitOfWork
from geodex.service_layer import commands
from geodex.service_layer.responses import CommandResponse

logger = logging.getLogger(__name__)

SEED_SUCCESS = "Database seed successful."


def _delete_all(repository: Repository, cancellation: CancellationSignal) -> int:
    records = repository.query(TrackingMode.TRACKING).materialize(cancellation)
    for record in records:
        repository.delete(record)
    return len(records)


def seed_locations(
    cmd: commands.SeedLocations,  # pylint: disable=unused-argument
    cancellation: CancellationSignal,
    uow: AbstractUnitOfWork,
) -> CommandResponse:
    """Replace all countries and cities with the demo locations."""
    with uow:
        removed = _delete_all(uow.cities, cancellation)
        removed += _delete_all(uow.countries, cancellation)
        logger.debug("Removed %d location records", removed)

        for country_name, city_names in seed_data.LOCATIONS.items():
            country = uow.countries.create(Country(name=country_name))
            for city_name in city_names:
                uow.cities.create(City(name=city_name, country_id=country.id))

        uow.commit(cancellation)
    logger.info("Seeded %d countries", len(seed_data.LOCATIONS))
    return CommandResponse.success(SEED_SUCCESS, None)


def seed_users(
    cmd: commands.SeedUsers,  # pylint: disable=unused-argument
    cancellation: CancellationSignal,
    uow: AbstractUnitOfWork,
) -> CommandResponse:
    """Replace all users, roles and groups with the demo users."""
    with uow:
        removed = _delete_all(uow.users, cancellation)
        removed += _delete_all(uow.roles, cancellation)
        removed += _delete_all(uow.groups, cancellation)
        logger.debug("Removed %d user records", removed)

        roles = {name: uow.roles.create(Role(name=name)) for name in seed_data.ROLES}
        group = uow.groups.create(Group(title=seed_data.GROUP_TITLE))
        registered = datetime.now(timezone.utc)
        for data in seed_data.USERS:
            fields = dict(data)
            role = roles[fields.pop("role")]
            user = User(**fields, registration_date=registered, group_id=group.id)
            user.roles = [role]
            uow.users.create(user)

        uow.commit(cancellation)
    logger.info("Seeded %d users", len(seed_data.USERS))
    return CommandResponse.success(SEED_SUCCESS, None)


COMMAND_HANDLERS: dict[type, Callable[..., CommandResponse]] = {
    commands.SeedLocations: seed_locations,
    commands.SeedUsers: seed_users,
}
