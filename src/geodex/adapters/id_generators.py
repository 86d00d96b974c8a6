"""Guid generators for GEODEX records."""

import threading
import uuid

from ulid import monotonic

from geodex.interfaces.id_generator import IdGenerator

# pylint: disable=too-few-public-methods


class UUIDv4Generator(IdGenerator):
    """Random UUIDv4 guids (36 characters). The default."""

    def new_id(self) -> str:
        return str(uuid.uuid4())


class ULIDGenerator(IdGenerator):
    """Thread-safe monotonic ULID guids (26 characters, time sortable)."""

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def new_id(self) -> str:
        with self._lock:
            return str(monotonic.new())


class SequentialIdGenerator(IdGenerator):
    """Zero-padded sequential guids.

    Note:
        Predictable; for tests and demo data only.
    """

    def __init__(self, length: int = 36) -> None:
        self._counter = 0
        self._length = length
        self._lock = threading.Lock()

    def new_id(self) -> str:
        with self._lock:
            self._counter += 1
            return f"{self._counter:0{self._length}d}"


GENERATORS: dict[str, type[IdGenerator]] = {
    "uuid4": UUIDv4Generator,
    "ulid": ULIDGenerator,
    "sequential": SequentialIdGenerator,
}


def make_id_generator(kind: str) -> IdGenerator:
    """Return a new generator by name (``uuid4``, ``ulid`` or ``sequential``).

    Raises:
        ValueError: if ``kind`` is not a known generator name.
    """
    try:
        return GENERATORS[kind.strip().lower()]()
    except KeyError as e:
        raise ValueError(
            f"Unknown guid generator {kind!r}; expected one of {sorted(GENERATORS)}"
        ) from e
