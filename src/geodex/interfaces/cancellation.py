"""Cooperative cancellation for query composition and persistence.

A :class:`CancellationSignal` is passed down from the caller of
``MessageBus.handle`` to every terminal query operation and to ``persist``.
Work checks the signal at well-defined points (before touching the store and
before committing), so a cancelled request never commits a partial batch.
"""

from __future__ import annotations

import threading


class OperationCancelledError(Exception):
    """Raised when work is aborted because its cancellation signal was set."""

    def __init__(self, reason: str | None = None) -> None:
        message = "Operation was cancelled"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.reason = reason


class CancellationSignal:
    """Thread-safe, one-way cancellation flag."""

    def __init__(self) -> None:
        self._event = threading.Event()
        self._reason: str | None = None

    def cancel(self, reason: str | None = None) -> None:
        """Request cancellation. Later calls keep the first reason."""
        if not self._event.is_set():
            self._reason = reason
            self._event.set()

    @property
    def is_cancelled(self) -> bool:
        """Whether cancellation has been requested."""
        return self._event.is_set()

    def raise_if_cancelled(self) -> None:
        """Raise :class:`OperationCancelledError` if cancellation was requested."""
        if self._event.is_set():
            raise OperationCancelledError(self._reason)


class _NeverCancelled(CancellationSignal):
    """Shared signal that refuses to be cancelled."""

    def cancel(self, reason: str | None = None) -> None:
        raise RuntimeError("The shared never-cancelled signal cannot be cancelled")


#: Signal that is never cancelled; used when a caller supplies none.
NEVER_CANCELLED: CancellationSignal = _NeverCancelled()


def ensure_signal(signal: CancellationSignal | None) -> CancellationSignal:
    """Return ``signal`` or the shared never-cancelled signal."""
    return signal if signal is not None else NEVER_CANCELLED
