"""Message bus routing commands and queries to their handlers."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from geodex.interfaces.cancellation import (
    CancellationSignal,
    OperationCancelledError,
    ensure_signal,
)
from geodex.interfaces.unit_of_work import AbstractUnitOfWork

from .commands import Command
from .queries import QueryRequest
from .responses import CommandResponse
from .validation import ValidationError, ensure_valid

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods

Message = Command | QueryRequest
Handler = Callable[[Any, CancellationSignal], Any]


class NoHandlerForMessage(LookupError):
    """Exception raised when no handler is registered for a message type."""

    def __init__(self, message: Message) -> None:
        super().__init__(f"No handler found for message {type(message).__name__}")


class MessageBus:
    """Route each message to its handler.

    Before a handler runs, the message's field rules are checked. A command
    that breaks them is answered with an error
    :class:`~geodex.service_layer.responses.CommandResponse` carrying every
    message joined with ``|``; a query that breaks them raises
    :class:`~geodex.service_layer.validation.ValidationError`.

    Args:
        uow: The unit of work injected into the handlers. Callers that
            materialize lazy query results must hold it open (``with bus.uow:``)
            until they are done.
        command_handlers: Command type to handler.
        query_handlers: Query type to handler.

    Handlers are called as ``handler(message, cancellation)``; other
    dependencies are injected by :mod:`geodex.bootstrap`.
    """

    def __init__(
        self,
        uow: AbstractUnitOfWork,
        command_handlers: dict[type[Command], Handler],
        query_handlers: dict[type[QueryRequest], Handler] | None = None,
    ) -> None:
        self.uow = uow
        self._command_handlers = command_handlers
        self._query_handlers = query_handlers or {}

    def handle(
        self, message: Message, cancellation: CancellationSignal | None = None
    ) -> Any:
        """Validate ``message`` and dispatch it to its handler.

        Returns:
            A CommandResponse for commands; the handler's result for queries.

        Raises:
            NoHandlerForMessage: If no handler is registered for the type.
            ValidationError: If a query breaks its field rules.
            OperationCancelledError: If ``cancellation`` is set.
            Exception: Whatever the handler raises, after logging it.
        """
        signal = ensure_signal(cancellation)
        handler = self._lookup(message)
        handler_name = self._get_handler_name(handler)

        try:
            ensure_valid(message)
        except ValidationError as e:
            logger.info("Rejected %s: %s", type(message).__name__, e)
            if isinstance(message, Command):
                return CommandResponse.error(str(e))
            raise

        logger.debug("Handling %s with handler %s", message, handler_name)
        try:
            signal.raise_if_cancelled()
            return handler(message, signal)
        except OperationCancelledError:
            logger.info("Cancelled %s in handler %s", type(message).__name__, handler_name)
            raise
        except Exception:  # pylint: disable=broad-except
            logger.exception(
                "Exception handling %s with handler %s", message, handler_name
            )
            raise

    def _lookup(self, message: Message) -> Handler:
        handlers: dict[Any, Handler] = (
            self._command_handlers
            if isinstance(message, Command)
            else self._query_handlers
        )
        if handler := handlers.get(type(message)):
            return handler
        logger.error("No handler found for message %s", type(message).__name__)
        raise NoHandlerForMessage(message)

    @staticmethod
    def _get_handler_name(fn: Callable[..., Any]) -> str:
        if hasattr(fn, "__name__") and fn.__name__ != "<lambda>":
            return fn.__name__
        if hasattr(fn, "func") and hasattr(fn.func, "__name__"):
            return fn.func.__name__
        return repr(fn)
