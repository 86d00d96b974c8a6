"""Record store schema.

Tables for the Locations records (``countries``, ``cities``) and the Users
records (``groups``, ``roles``, ``users``, ``user_roles``).

Constraints (enforced here):

| Constraint                        | Purpose                                  |
|-----------------------------------|------------------------------------------|
| UNIQUE(guid) on every record      | stable external identity                 |
| UNIQUE(name) / UNIQUE(title)      | backstop for the handler uniqueness check|
| cities.country_id -> countries.id | NO ACTION; a country with cities stays   |
| users.group_id -> groups.id       | NO ACTION; a group with users stays      |
| user_roles -> users.id            | CASCADE; role links go with the user     |

Case-insensitive uniqueness is checked by the mutation handlers; the
constraints here only reject byte-identical duplicates.
"""

from __future__ import annotations

from sqlalchemy import (
    Boolean,
    Column,
    Date,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Table,
)

from geodex.adapters.db.metadata import metadata
from geodex.adapters.db.sa_types import IntegerEnum, UTCDateTime
from geodex.domain.records import (
    CITY_NAME_MAX_LENGTH,
    COUNTRY_NAME_MAX_LENGTH,
    GROUP_TITLE_MAX_LENGTH,
    PERSON_NAME_MAX_LENGTH,
    ROLE_NAME_MAX_LENGTH,
    USER_NAME_MAX_LENGTH,
    Gender,
)

__all__ = ["cities", "countries", "groups", "roles", "user_roles", "users"]

GUID_LENGTH = 36


def _identity_columns() -> list[Column]:
    return [
        Column("id", Integer, primary_key=True, autoincrement=True),
        Column(
            "guid",
            String(GUID_LENGTH),
            nullable=False,
            unique=True,
            comment="Stable external identifier assigned at creation.",
        ),
    ]


countries = Table(
    "countries",
    metadata,
    *_identity_columns(),
    Column("name", String(COUNTRY_NAME_MAX_LENGTH), nullable=False, unique=True),
)

cities = Table(
    "cities",
    metadata,
    *_identity_columns(),
    Column("name", String(CITY_NAME_MAX_LENGTH), nullable=False, unique=True),
    Column(
        "country_id",
        Integer,
        ForeignKey("countries.id", ondelete="NO ACTION"),
        nullable=False,
        index=True,
    ),
)

groups = Table(
    "groups",
    metadata,
    *_identity_columns(),
    Column("title", String(GROUP_TITLE_MAX_LENGTH), nullable=False, unique=True),
)

roles = Table(
    "roles",
    metadata,
    *_identity_columns(),
    Column("name", String(ROLE_NAME_MAX_LENGTH), nullable=False, unique=True),
)

users = Table(
    "users",
    metadata,
    *_identity_columns(),
    Column("user_name", String(USER_NAME_MAX_LENGTH), nullable=False, unique=True),
    Column("password", String(100), nullable=False),
    Column("first_name", String(PERSON_NAME_MAX_LENGTH), nullable=False),
    Column("last_name", String(PERSON_NAME_MAX_LENGTH), nullable=False),
    Column("gender", IntegerEnum(Gender), nullable=False),
    Column("birth_date", Date, nullable=True),
    Column("registration_date", UTCDateTime, nullable=False),
    Column("score", Numeric(5, 2), nullable=False),
    Column("is_active", Boolean, nullable=False),
    Column("address", String(300), nullable=True),
    Column(
        "country_id",
        Integer,
        nullable=True,
        comment="Id of a country in the location directory (not a foreign key).",
    ),
    Column(
        "city_id",
        Integer,
        nullable=True,
        comment="Id of a city in the location directory (not a foreign key).",
    ),
    Column(
        "group_id",
        Integer,
        ForeignKey("groups.id", ondelete="NO ACTION"),
        nullable=True,
        index=True,
    ),
)

user_roles = Table(
    "user_roles",
    metadata,
    Column(
        "user_id",
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "role_id",
        Integer,
        ForeignKey("roles.id", ondelete="NO ACTION"),
        primary_key=True,
    ),
)
