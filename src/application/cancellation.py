"""Cooperative cancellation for long-running reads."""

import threading


class OperationCancelledError(Exception):
    """Raised when a caller cancels an operation before it completes."""


class CancellationToken:
    """Thread-safe flag a caller sets to abort an in-flight operation.

    Repositories poll ``cancelled`` (or call ``raise_if_cancelled``) before
    and during their queries; no partial result is returned once set.
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        """Request cancellation."""
        self._event.set()

    @property
    def cancelled(self) -> bool:
        """Return True once cancellation was requested."""
        return self._event.is_set()

    def raise_if_cancelled(self) -> None:
        """Raise OperationCancelledError when cancellation was requested."""
        if self._event.is_set():
            raise OperationCancelledError("Operation was cancelled.")


__all__ = ["CancellationToken", "OperationCancelledError"]
