"""Service layer handlers."""

from collections.abc import Callable

from .cities import COMMAND_HANDLERS as CITY_COMMAND_HANDLERS
from .cities import QUERY_HANDLERS as CITY_QUERY_HANDLERS
from .countries import COMMAND_HANDLERS as COUNTRY_COMMAND_HANDLERS
from .countries import QUERY_HANDLERS as COUNTRY_QUERY_HANDLERS
from .groups import COMMAND_HANDLERS as GROUP_COMMAND_HANDLERS
from .groups import QUERY_HANDLERS as GROUP_QUERY_HANDLERS
from .locations import QUERY_HANDLERS as LOCATION_QUERY_HANDLERS
from .seeding import COMMAND_HANDLERS as SEED_COMMAND_HANDLERS
from .users import QUERY_HANDLERS as USER_QUERY_HANDLERS

__all__ = ["COMMAND_HANDLERS", "QUERY_HANDLERS"]

COMMAND_HANDLERS: dict[type, Callable[..., object]] = {
    **COUNTRY_COMMAND_HANDLERS,
    **CITY_COMMAND_HANDLERS,
    **GROUP_COMMAND_HANDLERS,
    **SEED_COMMAND_HANDLERS,
}

QUERY_HANDLERS: dict[type, Callable[..., object]] = {
    **COUNTRY_QUERY_HANDLERS,
    **CITY_QUERY_HANDLERS,
    **GROUP_QUERY_HANDLERS,
    **LOCATION_QUERY_HANDLERS,
    **USER_QUERY_HANDLERS,
}
