"""
Broadcaster Events — Errors
=============================
Error types for the subscription registry and dispatch loop.

Unknown event names, double-cancel and empty subscriber lists are
no-ops, not errors. Only bad arguments and subscriber failures exist.
"""

from typing import Any, Optional


class EventBusError(Exception):
    """Base error for Event Registry operations."""
    pass


class InvalidArgument(EventBusError, ValueError):
    """Bad input rejected at call time instead of at dispatch time."""
    pass


class InvalidEventName(InvalidArgument):
    """Event name is not a string."""

    def __init__(self, event_name: Any):
        self.event_name = event_name
        super().__init__(
            f"Event name must be a string, got {event_name!r}."
        )


class InvalidCallback(InvalidArgument):
    """Subscriber callback is not callable."""

    def __init__(self, event_name: str, callback: Any):
        self.event_name = event_name
        self.callback = callback
        super().__init__(
            f"Callback for event '{event_name}' must be callable, "
            f"got {type(callback).__name__}."
        )


class SubscriberFailure(EventBusError):
    """A subscriber callback raised while an event was being delivered."""

    def __init__(
        self,
        event_name: str,
        entry_id: int,
        handler: str,
        error: Optional[BaseException] = None,
    ):
        self.event_name = event_name
        self.entry_id = entry_id
        self.handler = handler
        self.error = error
        super().__init__(
            f"Subscriber '{handler}' (entry {entry_id}) failed for "
            f"event '{event_name}': {error}"
        )
