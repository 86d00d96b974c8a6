"""Uniform result of a mutation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CommandResponse:
    """Outcome of a command.

    Business-rule violations (duplicate names, missing targets) are returned
    as error responses; they are never raised.

    Attributes:
        is_successful: Whether the mutation was applied.
        message: Human-readable outcome. Validation failures carry several
            messages joined with ``|``.
        id: Id of the affected record on success, otherwise None.
    """

    is_successful: bool
    message: str
    id: int | None = None

    @classmethod
    def success(cls, message: str, id: int | None) -> CommandResponse:  # pylint: disable=redefined-builtin
        return cls(is_successful=True, message=message, id=id)

    @classmethod
    def error(cls, message: str) -> CommandResponse:
        return cls(is_successful=False, message=message)
