"""Interface for the external location directory.

User records hold country and city ids owned by the locations service. A
:class:`LocationDirectory` resolves those ids to display names.
"""

from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .cancellation import CancellationSignal


BEARER_SCHEME = "Bearer"


class LocationDirectoryError(Exception):
    """The directory answered with something that is not a location listing."""


@dataclass(frozen=True)
class DirectoryEntry:
    id: int
    name: str


class LocationDirectory(abc.ABC):
    """Lookup of country and city names."""

    @abc.abstractmethod
    def countries(
        self,
        credential: str | None = None,
        cancellation: CancellationSignal | None = None,
    ) -> list[DirectoryEntry]:
        """List every country.

        Args:
            credential: Caller's bearer credential, forwarded as is.
            cancellation: Checked before the call is made.
        """

    @abc.abstractmethod
    def cities(
        self,
        credential: str | None = None,
        cancellation: CancellationSignal | None = None,
    ) -> list[DirectoryEntry]:
        """List every city."""


def strip_bearer(authorization: str | None) -> str | None:
    """Drop a leading ``Bearer`` scheme from an Authorization header value.

    Blank values become None; values without the scheme are returned as is.
    """
    if authorization is None or not authorization.strip():
        return None
    if authorization.startswith(BEARER_SCHEME):
        return authorization[len(BEARER_SCHEME) :].lstrip()
    return authorization

