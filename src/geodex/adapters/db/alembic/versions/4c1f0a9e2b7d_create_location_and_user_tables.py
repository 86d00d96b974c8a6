"""create location and user tables

Revision ID: 4c1f0a9e2b7d
Revises:
Create Date: 2026-10-18 09:12:41.503112

"""

# pylint: disable=invalid-name

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

from geodex.adapters.db.sa_types import IntegerEnum, UTCDateTime
from geodex.domain.records import Gender

# pylint: disable=no-member

# revision identifiers, used by Alembic.
revision: str = "4c1f0a9e2b7d"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _identity(table: str) -> list:
    return [
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column(
            "guid",
            sa.String(length=36),
            nullable=False,
            comment="Stable external identifier assigned at creation.",
        ),
        sa.PrimaryKeyConstraint("id", name=op.f(f"pk_{table}")),
        sa.UniqueConstraint("guid", name=op.f(f"uq_{table}_guid")),
    ]


def upgrade() -> None:
    """Upgrade schema."""

    op.create_table(
        "countries",
        *_identity("countries"),
        sa.Column("name", sa.String(length=125), nullable=False),
        sa.UniqueConstraint("name", name=op.f("uq_countries_name")),
    )
    op.create_table(
        "groups",
        *_identity("groups"),
        sa.Column("title", sa.String(length=100), nullable=False),
        sa.UniqueConstraint("title", name=op.f("uq_groups_title")),
    )
    op.create_table(
        "roles",
        *_identity("roles"),
        sa.Column("name", sa.String(length=10), nullable=False),
        sa.UniqueConstraint("name", name=op.f("uq_roles_name")),
    )
    op.create_table(
        "cities",
        *_identity("cities"),
        sa.Column("name", sa.String(length=175), nullable=False),
        sa.Column("country_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(
            ["country_id"],
            ["countries.id"],
            name=op.f("fk_cities_country_id_countries"),
            ondelete="NO ACTION",
        ),
        sa.UniqueConstraint("name", name=op.f("uq_cities_name")),
    )
    op.create_index(
        op.f("ix_cities_country_id"), "cities", ["country_id"], unique=False
    )
    op.create_table(
        "users",
        *_identity("users"),
        sa.Column("user_name", sa.String(length=30), nullable=False),
        sa.Column("password", sa.String(length=100), nullable=False),
        sa.Column("first_name", sa.String(length=50), nullable=False),
        sa.Column("last_name", sa.String(length=50), nullable=False),
        sa.Column("gender", IntegerEnum(Gender), nullable=False),
        sa.Column("birth_date", sa.Date(), nullable=True),
        sa.Column("registration_date", UTCDateTime(), nullable=False),
        sa.Column("score", sa.Numeric(precision=5, scale=2), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("address", sa.String(length=300), nullable=True),
        sa.Column(
            "country_id",
            sa.Integer(),
            nullable=True,
            comment="Id of a country in the location directory (not a foreign key).",
        ),
        sa.Column(
            "city_id",
            sa.Integer(),
            nullable=True,
            comment="Id of a city in the location directory (not a foreign key).",
        ),
        sa.Column("group_id", sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(
            ["group_id"],
            ["groups.id"],
            name=op.f("fk_users_group_id_groups"),
            ondelete="NO ACTION",
        ),
        sa.UniqueConstraint("user_name", name=op.f("uq_users_user_name")),
    )
    op.create_index(op.f("ix_users_group_id"), "users", ["group_id"], unique=False)
    op.create_table(
        "user_roles",
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("role_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(
            ["user_id"],
            ["users.id"],
            name=op.f("fk_user_roles_user_id_users"),
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["role_id"],
            ["roles.id"],
            name=op.f("fk_user_roles_role_id_roles"),
            ondelete="NO ACTION",
        ),
        sa.PrimaryKeyConstraint("user_id", "role_id", name=op.f("pk_user_roles")),
    )


def downgrade() -> None:
    """Downgrade schema."""

    op.drop_table("user_roles")
    op.drop_index(op.f("ix_users_group_id"), table_name="users")
    op.drop_table("users")
    op.drop_index(op.f("ix_cities_country_id"), table_name="cities")
    op.drop_table("cities")
    op.drop_table("roles")
    op.drop_table("groups")
    op.drop_table("countries")
