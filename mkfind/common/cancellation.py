"""Cooperative cancellation."""

from concurrent.futures import CancelledError
from threading import Event


def check_cancelled(cancel_event: Event | None) -> None:
    """Raise CancelledError if cancellation has been requested."""
    if cancel_event is not None and cancel_event.is_set():
        raise CancelledError("Operation cancelled")
