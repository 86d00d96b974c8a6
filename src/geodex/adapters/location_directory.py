"""HTTP location directory backed by httpx.

Fetches country and city listings from the locations service. Each listing
is a JSON array of objects with an ``id`` and a name under ``countryName`` /
``cityName`` (``name`` is accepted as well).

Calls are made one at a time with no timeout, retry or circuit breaker;
transport and HTTP status errors propagate to the caller.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from geodex.adapters.redactor import Redactor
from geodex.interfaces.cancellation import ensure_signal
from geodex.interfaces.location_directory import (
    DirectoryEntry,
    LocationDirectory,
    LocationDirectoryError,
)

if TYPE_CHECKING:
    from geodex.interfaces.redactor import Redactor as AbstractRedactor
    from geodex.interfaces.cancellation import CancellationSignal

logger = logging.getLogger(__name__)


class HttpLocationDirectory(LocationDirectory):
    """Location directory over HTTP.

    Args:
        countries_url: Country listing endpoint.
        cities_url: City listing endpoint.
        client: httpx client to send requests with. One without a timeout is
            created when omitted.
        redactor: Masks credentials in debug logs.
    """

    def __init__(
        self,
        countries_url: str,
        cities_url: str,
        *,
        client: httpx.Client | None = None,
        redactor: AbstractRedactor | None = None,
    ) -> None:
        self._countries_url = countries_url
        self._cities_url = cities_url
        self._client = client or httpx.Client(timeout=None)
        self._redactor = redactor or Redactor()

    def countries(
        self,
        credential: str | None = None,
        cancellation: CancellationSignal | None = None,
    ) -> list[DirectoryEntry]:
        return self._fetch(self._countries_url, "countryName", credential, cancellation)

    def cities(
        self,
        credential: str | None = None,
        cancellation: CancellationSignal | None = None,
    ) -> list[DirectoryEntry]:
        return self._fetch(self._cities_url, "cityName", credential, cancellation)

    def close(self) -> None:
        self._client.close()

    def _fetch(
        self,
        url: str,
        name_key: str,
        credential: str | None,
        cancellation: CancellationSignal | None,
    ) -> list[DirectoryEntry]:
        ensure_signal(cancellation).raise_if_cancelled()
        headers = {"Authorization": credential} if credential else {}
        logger.debug(
            "GET %s headers=%s", url, self._redactor.sanitize_headers(headers)
        )
        response = self._client.get(url, headers=headers)
        response.raise_for_status()
        return _parse_listing(response.json(), name_key)


def _parse_listing(payload: Any, name_key: str) -> list[DirectoryEntry]:
    if not isinstance(payload, list):
        raise LocationDirectoryError(
            f"Expected a JSON array, got {type(payload).__name__}"
        )
    entries = []
    for item in payload:
        try:
            entries.append(
                DirectoryEntry(id=int(item["id"]), name=item.get(name_key) or item["name"])
            )
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise LocationDirectoryError(f"Malformed location entry: {item!r}") from e
    return entries
