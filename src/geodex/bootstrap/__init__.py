"""Bootstrap (composition root) for GEODEX.

Assembles the application at runtime: wires the SQLAlchemy unit of work, the
location directory and the handlers into a message bus, reading
configuration from :mod:`geodex.config`.

Import rules:
- Entry points import *this* package (not adapters/service_layer/interfaces/domain).
- This package may import: `geodex.adapters`, `geodex.service_layer`,
  `geodex.interfaces`, `geodex.domain`, and `geodex.config`.
- Inner layers must not import `geodex.bootstrap`.
"""

from .bootstrap import (
    AppContainer,
    bootstrap,
    build_location_directory,
    build_message_bus,
    build_uow,
    inject_dependencies,
)

__all__ = [
    "AppContainer",
    "bootstrap",
    "build_location_directory",
    "build_message_bus",
    "build_uow",
    "inject_dependencies",
]
