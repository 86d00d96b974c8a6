"""User handlers."""

from __future__ import annotations

import logging
from collections.abc import Callable

from sqlalchemy.orm import selectinload

from geodex.domain.records import User
from geodex.interfaces.cancellation import CancellationSignal
from geodex.interfaces.location_directory import LocationDirectory, strip_bearer
from geodex.interfaces.unit_of_work import AbstractUnitOfWork
from geodex.service_layer import queries
from geodex.service_layer.composer import EqualsFilter, QueryResult, TextFilter, compose
from geodex.service_layer.queries import UserLocationResponse, UserOrderField

from ._common import require_open

logger = logging.getLogger(__name__)


def query_users(
    query: queries.UserQuery,
    cancellation: CancellationSignal,  # pylint: disable=unused-argument
    uow: AbstractUnitOfWork,
) -> QueryResult[queries.UserResponse]:
    """Users with their group and roles, active users first."""
    require_open(uow)
    full_name = User.first_name + " " + User.last_name
    result = compose(
        uow.users.query().including(selectinload(User.group), selectinload(User.roles)),
        order=query.order,
        page=query.page,
        orderable={
            UserOrderField.USER_NAME: User.user_name,
            UserOrderField.FULL_NAME: full_name,
            UserOrderField.REGISTRATION_DATE: User.registration_date,
            UserOrderField.SCORE: User.score,
            UserOrderField.IS_ACTIVE: User.is_active,
        },
        default_order=[
            User.is_active.desc(),
            User.registration_date.asc(),
            User.user_name.asc(),
        ],
        tie_breakers=[User.id],
        filters=[
            EqualsFilter(User.id, query.id),
            EqualsFilter(User.group_id, query.group_id),
            EqualsFilter(User.is_active, query.is_active),
            TextFilter(User.user_name, query.user_name),
            TextFilter(full_name, query.full_name),
        ],
    )
    return result.map(queries.UserResponse.from_record)


def query_user_locations(
    query: queries.UserLocationQuery,
    cancellation: CancellationSignal,
    uow: AbstractUnitOfWork,
    location_directory: LocationDirectory | None,
) -> list[UserLocationResponse]:
    """Users with country and city names from the location directory.

    Countries are fetched first, then cities, then the users are read. Ids
    the directory does not know get an empty name. Without a configured
    directory the result is empty.
    """
    if location_directory is None:
        logger.info("Location directory not configured; no user locations")
        return []

    credential = strip_bearer(query.authorization)
    countries = {e.id: e.name for e in location_directory.countries(credential, cancellation)}
    cities = {e.id: e.name for e in location_directory.cities(credential, cancellation)}

    with uow:
        users = uow.users.query().order_by(User.id).materialize(cancellation)

    return [
        UserLocationResponse(
            id=user.id,  # type: ignore[arg-type]
            guid=user.guid,  # type: ignore[arg-type]
            user_name=user.user_name,
            full_name=f"{user.first_name} {user.last_name}",
            address=user.address,
            country_id=user.country_id,
            country=countries.get(user.country_id, ""),
            city_id=user.city_id,
            city=cities.get(user.city_id, ""),
        )
        for user in users
    ]


QUERY_HANDLERS: dict[type, Callable[..., object]] = {
    queries.UserQuery: query_users,
    queries.UserLocationQuery: query_user_locations,
}
