"""Map message bus results to transport outcomes.

A transport (HTTP controller, CLI command) hands each request to
:meth:`Dispatcher.dispatch` and renders the returned :class:`Dispatched`:

| Result                                   | Outcome        |
|------------------------------------------|----------------|
| successful CommandResponse               | ``OK``         |
| non-empty list / query result            | ``OK``         |
| empty list / query result, missing item  | ``NO_CONTENT`` |
| error CommandResponse, ValidationError   | ``BAD_REQUEST``|
| OperationCancelledError                  | ``CANCELLED``  |
| anything else raised                     | ``SERVER_ERROR``|

Server errors carry a generic message; details only go to the log.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from geodex.interfaces.cancellation import OperationCancelledError
from geodex.service_layer.composer import QueryResult
from geodex.service_layer.responses import CommandResponse
from geodex.service_layer.validation import ValidationError

if TYPE_CHECKING:
    from geodex.interfaces.cancellation import CancellationSignal
    from geodex.service_layer.messagebus import Message, MessageBus

logger = logging.getLogger(__name__)


class Outcome(Enum):
    """Transport outcome, valued with the matching HTTP status code."""

    OK = 200
    NO_CONTENT = 204
    BAD_REQUEST = 400
    CANCELLED = 499
    SERVER_ERROR = 500


@dataclass(frozen=True)
class Dispatched:
    """What the transport should send back.

    Attributes:
        outcome: The outcome class.
        body: Rows, a single row, or a CommandResponse (None for NO_CONTENT).
        total_count: Size of the filtered set before paging, for list queries.
    """

    outcome: Outcome
    body: Any = None
    total_count: int | None = None


class Dispatcher:
    """Run messages through the bus inside a request-scoped unit of work."""

    def __init__(self, bus: MessageBus) -> None:
        self._bus = bus

    def dispatch(
        self, message: Message, cancellation: CancellationSignal | None = None
    ) -> Dispatched:
        """Handle ``message`` and map its result to an outcome."""
        return self._guarded(message, cancellation, single=False)

    def dispatch_one(
        self, message: Message, cancellation: CancellationSignal | None = None
    ) -> Dispatched:
        """Like :meth:`dispatch`, for a query expected to match one item."""
        return self._guarded(message, cancellation, single=True)

    def _guarded(
        self, message: Message, cancellation: CancellationSignal | None, single: bool
    ) -> Dispatched:
        name = type(message).__name__
        try:
            with self._bus.uow:
                result = self._bus.handle(message, cancellation)
                return self._to_outcome(result, cancellation, single)
        except ValidationError as e:
            return Dispatched(Outcome.BAD_REQUEST, CommandResponse.error(str(e)))
        except OperationCancelledError as e:
            logger.info("%s cancelled: %s", name, e)
            return Dispatched(Outcome.CANCELLED, CommandResponse.error(str(e)))
        except Exception as e:  # pylint: disable=broad-except
            logger.error("%s failed with %s", name, type(e).__name__, exc_info=e)
            return Dispatched(
                Outcome.SERVER_ERROR,
                CommandResponse.error(f"An exception occurred during {name}."),
            )

    @staticmethod
    def _to_outcome(
        result: Any, cancellation: CancellationSignal | None, single: bool
    ) -> Dispatched:
        if isinstance(result, CommandResponse):
            outcome = Outcome.OK if result.is_successful else Outcome.BAD_REQUEST
            return Dispatched(outcome, result)

        total_count = None
        if isinstance(result, QueryResult):
            total_count = result.count(cancellation)
            rows = result.materialize(cancellation)
        else:
            rows = list(result)

        if not rows:
            return Dispatched(Outcome.NO_CONTENT, total_count=total_count)
        if single:
            return Dispatched(Outcome.OK, rows[0])
        return Dispatched(Outcome.OK, rows, total_count)
