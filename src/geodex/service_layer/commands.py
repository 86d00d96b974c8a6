"""Module defining Commands (mutation requests)."""

from dataclasses import dataclass

from geodex.domain.records import (
    CITY_NAME_MAX_LENGTH,
    COUNTRY_NAME_MAX_LENGTH,
    GROUP_TITLE_MAX_LENGTH,
)

from .validation import rule


@dataclass(frozen=True)
class Command:
    """Base class for all commands."""


@dataclass(frozen=True)
class CreateCountry(Command):
    name: str = rule(required=True, max_length=COUNTRY_NAME_MAX_LENGTH, label="Name")


@dataclass(frozen=True)
class UpdateCountry(Command):
    id: int
    name: str = rule(required=True, max_length=COUNTRY_NAME_MAX_LENGTH, label="Name")


@dataclass(frozen=True)
class DeleteCountry(Command):
    id: int


@dataclass(frozen=True)
class CreateCity(Command):
    name: str = rule(required=True, max_length=CITY_NAME_MAX_LENGTH, label="Name")
    country_id: int = rule(required=True, label="CountryId")


@dataclass(frozen=True)
class UpdateCity(Command):
    id: int
    name: str = rule(required=True, max_length=CITY_NAME_MAX_LENGTH, label="Name")
    country_id: int = rule(required=True, label="CountryId")


@dataclass(frozen=True)
class DeleteCity(Command):
    id: int


@dataclass(frozen=True)
class CreateGroup(Command):
    title: str = rule(required=True, max_length=GROUP_TITLE_MAX_LENGTH, label="Title")


@dataclass(frozen=True)
class UpdateGroup(Command):
    id: int
    title: str = rule(required=True, max_length=GROUP_TITLE_MAX_LENGTH, label="Title")


@dataclass(frozen=True)
class DeleteGroup(Command):
    id: int


@dataclass(frozen=True)
class SeedLocations(Command):
    """Replace every country and city with the demo locations."""


@dataclass(frozen=True)
class SeedUsers(Command):
    """Replace every user, role and group with the demo users."""
