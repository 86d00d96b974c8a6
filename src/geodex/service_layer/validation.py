"""Declarative field rules for request dataclasses.

Rules live in dataclass field metadata, declared with :func:`rule`::

    @dataclass(frozen=True)
    class CreateCountry(Command):
        name: str = rule(required=True, max_length=125)

:func:`validate` checks every rule and collects all failures, so a caller
sees every problem with a request at once.
"""

from __future__ import annotations

import dataclasses
from typing import Any

RULES_KEY = "geodex.rules"
MESSAGE_DELIMITER = "|"


@dataclasses.dataclass(frozen=True)
class FieldRules:
    required: bool = False
    max_length: int | None = None
    label: str | None = None


class ValidationError(Exception):
    """A request broke one or more field rules.

    Attributes:
        messages: One message per broken rule, in field order.
    """

    def __init__(self, messages: list[str]) -> None:
        self.messages = tuple(messages)
        super().__init__(MESSAGE_DELIMITER.join(self.messages))


def rule(
    *,
    required: bool = False,
    max_length: int | None = None,
    label: str | None = None,
    default: Any = dataclasses.MISSING,
) -> Any:
    """Declare a dataclass field with validation rules.

    Args:
        required: The value must not be None, empty or all whitespace.
        max_length: Maximum string length.
        label: Field name used in messages (defaults to the attribute name).
        default: Field default, as for :func:`dataclasses.field`.
    """
    return dataclasses.field(
        default=default,
        metadata={RULES_KEY: FieldRules(required, max_length, label)},
    )


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def validate(message: Any) -> list[str]:
    """Return the messages of every rule ``message`` breaks."""
    errors: list[str] = []
    for f in dataclasses.fields(message):
        rules: FieldRules | None = f.metadata.get(RULES_KEY)
        if rules is None:
            continue
        value = getattr(message, f.name)
        label = rules.label or f.name
        if rules.required and _is_blank(value):
            errors.append(f"The {label} field is required.")
            continue
        if (
            rules.max_length is not None
            and isinstance(value, str)
            and len(value) > rules.max_length
        ):
            errors.append(
                f"The field {label} must be a string with a maximum length of "
                f"{rules.max_length}."
            )
    return errors


def ensure_valid(message: Any) -> None:
    """Raise :class:`ValidationError` if ``message`` breaks any rule."""
    if errors := validate(message):
        raise ValidationError(errors)
