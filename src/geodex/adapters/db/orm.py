"""Imperative ORM mapping of the domain records onto :mod:`.schema`.

The domain dataclasses stay free of SQLAlchemy; :func:`start_mappers`
instruments them once per process. Relationships load lazily; query handlers
that need related records ask for them with loader options
(:meth:`geodex.interfaces.query.Query.including`).
"""

from __future__ import annotations

import logging

from sqlalchemy import inspect
from sqlalchemy.orm import registry, relationship

from geodex.adapters.db.metadata import metadata
from geodex.adapters.db.schema import (
    cities,
    countries,
    groups,
    roles,
    user_roles,
    users,
)
from geodex.domain.records import City, Country, Group, Role, User

logger = logging.getLogger(__name__)

mapper_registry = registry(metadata=metadata)


def start_mappers() -> None:
    """Map the record classes. Calling it again is a no-op."""
    if inspect(Country, raiseerr=False) is not None:
        return

    mapper_registry.map_imperatively(
        Country,
        countries,
        properties={
            "cities": relationship(
                City,
                back_populates="country",
                order_by=cities.c.name,
                passive_deletes="all",
            ),
        },
    )
    mapper_registry.map_imperatively(
        City,
        cities,
        properties={"country": relationship(Country, back_populates="cities")},
    )
    mapper_registry.map_imperatively(Group, groups)
    mapper_registry.map_imperatively(Role, roles)
    mapper_registry.map_imperatively(
        User,
        users,
        properties={
            "group": relationship(Group),
            "roles": relationship(Role, secondary=user_roles, order_by=roles.c.name),
        },
    )
    logger.debug("Record mappers configured")
