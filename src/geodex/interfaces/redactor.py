"""Interfaces for redacting sensitive values before they are logged.

GEODEX logs two kinds of values that can carry credentials: database URLs
(CLI diagnostics and errors) and outgoing HTTP headers (the location
directory forwards the caller's bearer credential).
"""

import abc
from collections.abc import Mapping
from enum import Enum

# pylint: disable=too-few-public-methods


class RedactorMode(Enum):
    """How much a redactor hides.

    Modes:
    - LENIENT: redact passwords/tokens but keep usernames/ids visible.
    - STRICT: redact passwords/tokens and also usernames/ids.
    """

    LENIENT = "lenient"
    STRICT = "strict"


class Redactor(abc.ABC):
    """Interface for sanitizing sensitive information."""

    _mode: RedactorMode

    @abc.abstractmethod
    def sanitize_db_url(self, raw_url: str) -> str:
        """Return a display-safe DB URL."""

    @abc.abstractmethod
    def sanitize_headers(self, headers: Mapping[str, str]) -> dict[str, str]:
        """Return a copy of HTTP headers with credential values masked."""

    @property
    def mode(self) -> RedactorMode:
        """Return the redaction mode."""
        return self._mode
