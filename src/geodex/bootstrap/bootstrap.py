"""Wire adapters and handlers into a message bus."""

from __future__ import annotations

import functools
import inspect
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from geodex import config
from geodex.adapters.db.engine import make_engine
from geodex.adapters.id_generators import make_id_generator
from geodex.adapters.location_directory import HttpLocationDirectory
from geodex.adapters.redactor import Redactor
from geodex.adapters.unit_of_work import SqlAlchemyUnitOfWork
from geodex.service_layer.handlers import COMMAND_HANDLERS, QUERY_HANDLERS
from geodex.service_layer.messagebus import MessageBus

if TYPE_CHECKING:
    from geodex.interfaces.id_generator import IdGenerator
    from geodex.interfaces.location_directory import LocationDirectory
    from geodex.interfaces.unit_of_work import AbstractUnitOfWork

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppContainer:
    """Application wiring handed to entry points."""

    message_bus: MessageBus


def build_uow(url: str, guid_generator: IdGenerator | None = None) -> AbstractUnitOfWork:
    """Build a new unit of work over a fresh engine for ``url``."""
    return SqlAlchemyUnitOfWork(make_engine(url), guid_generator)


def build_location_directory(
    settings: config.LocationDirectorySettings,
) -> LocationDirectory | None:
    """Return an HTTP directory, or None when its URLs are not configured."""
    if not settings.is_configured:
        return None
    return HttpLocationDirectory(
        settings.countries_url,  # type: ignore[arg-type]
        settings.cities_url,  # type: ignore[arg-type]
        redactor=Redactor(),
    )


def build_message_bus(
    uow: AbstractUnitOfWork,
    command_handlers: Mapping[type, Callable[..., object]] = COMMAND_HANDLERS,
    query_handlers: Mapping[type, Callable[..., object]] = QUERY_HANDLERS,
    location_directory: LocationDirectory | None = None,
) -> MessageBus:
    """Build a message bus with injected dependencies."""
    dependencies = {"uow": uow, "location_directory": location_directory}
    return MessageBus(
        uow,
        command_handlers={
            message_type: inject_dependencies(handler, dependencies)
            for message_type, handler in command_handlers.items()
        },
        query_handlers={
            message_type: inject_dependencies(handler, dependencies)
            for message_type, handler in query_handlers.items()
        },
    )


def bootstrap() -> AppContainer:
    """Build the application from environment configuration."""
    uow = build_uow(
        config.get_db_url(), make_id_generator(config.get_guid_generator_name())
    )
    directory = build_location_directory(config.get_location_directory_settings())
    logger.debug("Location directory %s", "configured" if directory else "not configured")
    return AppContainer(message_bus=build_message_bus(uow, location_directory=directory))


def inject_dependencies(
    handler: Callable, dependencies: Mapping[str, object]
) -> Callable:
    """Bind the dependencies named in ``handler``'s signature.

    The returned callable takes ``(message, cancellation)``.
    """
    params = inspect.signature(handler).parameters
    deps = {
        name: dependency for name, dependency in dependencies.items() if name in params
    }
    return functools.partial(handler, **deps)
