"""
Broadcaster Events — Event Registry
=====================================
Maps event names to the ordered callbacks subscribed to them.

Rules:
- Any string is a valid event name, including one never used before
- Insertion order is dispatch order, and survives removals
- The same callback may be subscribed many times; each is its own entry
- Every entry has a stable id; cancel() removes by id, never by index
- Cancel is idempotent and never raises
- In-memory only; one registry per owner, no hidden globals
- Thread-safe; callbacks are never invoked while the lock is held
- Cancel from another thread is exact only if it returns before the
  entry's turn in an in-flight dispatch
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from enum import Enum
from threading import Lock
from typing import Any, Callable, Dict, List, Optional

from broadcaster.config import DEFAULT_LOGGER_NAME, BusConfig
from broadcaster.events.dispatcher import DispatchReport, dispatch, handler_name
from broadcaster.events.errors import InvalidCallback, InvalidEventName

logger = logging.getLogger(DEFAULT_LOGGER_NAME)

Callback = Callable[..., Any]


# ══════════════════════════════════════════════════════════════
# CALLBACK ENTRY
# ══════════════════════════════════════════════════════════════

@dataclass(eq=False)
class CallbackEntry:
    """A subscribed callback plus the identity it keeps for life."""

    entry_id: int
    callback: Callback
    active: bool = True


# ══════════════════════════════════════════════════════════════
# SUBSCRIPTION HANDLE
# ══════════════════════════════════════════════════════════════

class SubscriptionState(Enum):
    """Subscription lifecycle. CANCELLED is terminal."""
    ACTIVE = "ACTIVE"
    CANCELLED = "CANCELLED"


class Subscription:
    """
    Caller-owned handle for one registration.

    Bound to exactly one (event_name, entry_id) pair. Holding it is
    the only way to cancel that registration.
    """

    def __init__(
        self,
        registry: "EventRegistry",
        event_name: str,
        entry: CallbackEntry,
    ) -> None:
        self._registry = registry
        self._event_name = event_name
        self._entry = entry

    @property
    def event_name(self) -> str:
        return self._event_name

    @property
    def entry_id(self) -> int:
        return self._entry.entry_id

    @property
    def state(self) -> SubscriptionState:
        if self._entry.active:
            return SubscriptionState.ACTIVE
        return SubscriptionState.CANCELLED

    @property
    def active(self) -> bool:
        return self.state == SubscriptionState.ACTIVE

    def cancel(self) -> None:
        """Remove this registration. Calling again is a no-op."""
        self._registry._remove(self._event_name, self._entry.entry_id)

    remove = cancel

    def __repr__(self) -> str:
        return (
            f"Subscription(event_name={self._event_name!r}, "
            f"entry_id={self.entry_id}, state={self.state.value})"
        )


# ══════════════════════════════════════════════════════════════
# EVENT REGISTRY
# ══════════════════════════════════════════════════════════════

class EventRegistry:
    """
    In-memory registry of event subscribers.

    Each event name maps to a list of CallbackEntry in subscription
    order. Names with no live entries are dropped from the mapping.
    """

    def __init__(self, config: Optional[BusConfig] = None) -> None:
        self._config = config or BusConfig()
        self._subscribers: Dict[str, List[CallbackEntry]] = {}
        self._ids = itertools.count(1)
        self._lock = Lock()

    @property
    def config(self) -> BusConfig:
        return self._config

    # ── subscribe ────────────────────────────────────────────

    def subscribe(self, event_name: str, callback: Callback) -> Subscription:
        """
        Register a callback for an event name.

        The callback is invoked as callback(descriptor, *payload) on
        every later publish of event_name, until cancelled.

        Raises:
            InvalidEventName: event_name is not a string
            InvalidCallback:  callback is not callable
        """
        if not isinstance(event_name, str):
            raise InvalidEventName(event_name)
        if not callable(callback):
            raise InvalidCallback(event_name, callback)

        with self._lock:
            entry = CallbackEntry(entry_id=next(self._ids), callback=callback)
            self._subscribers.setdefault(event_name, []).append(entry)

        logger.info(
            f"Subscriber registered: {handler_name(callback)} → {event_name} "
            f"(entry: {entry.entry_id})"
        )
        return Subscription(self, event_name, entry)

    on = subscribe

    # ── publish ──────────────────────────────────────────────

    def publish(self, event_name: str, *payload: Any) -> None:
        """Deliver payload to every current subscriber of event_name."""
        self.dispatch(event_name, *payload)

    broadcast = publish

    def dispatch(self, event_name: str, *payload: Any) -> DispatchReport:
        """Same as publish(), but returns the DispatchReport."""
        return dispatch(self, event_name, payload)

    # ── removal ──────────────────────────────────────────────

    def _remove(self, event_name: str, entry_id: int) -> bool:
        with self._lock:
            entries = self._subscribers.get(event_name)
            if not entries:
                return False

            for index, entry in enumerate(entries):
                if entry.entry_id == entry_id:
                    entry.active = False
                    del entries[index]
                    break
            else:
                return False

            if not entries:
                del self._subscribers[event_name]

        logger.info(
            f"Subscriber cancelled: {handler_name(entry.callback)} → "
            f"{event_name} (entry: {entry_id})"
        )
        return True

    def clear(self, event_name: Optional[str] = None) -> int:
        """
        Cancel every subscription, or every subscription for one name.

        Handles for cleared entries report CANCELLED. Returns the
        number of entries removed.
        """
        with self._lock:
            if event_name is None:
                groups = list(self._subscribers.values())
                self._subscribers.clear()
            else:
                groups = [self._subscribers.pop(event_name, [])]

            removed = 0
            for entries in groups:
                for entry in entries:
                    entry.active = False
                    removed += 1

        if removed:
            logger.info(
                f"Registry cleared: {removed} subscriber(s) removed"
                + (f" from {event_name}" if event_name is not None else "")
            )
        return removed

    # ── queries ──────────────────────────────────────────────

    def get_subscribers(self, event_name: str) -> List[CallbackEntry]:
        """
        Snapshot of the live entries for an event name, in order.
        Returns empty list if no subscribers (not an error).
        """
        with self._lock:
            return list(self._subscribers.get(event_name, []))

    def has_subscribers(self, event_name: str) -> bool:
        with self._lock:
            return bool(self._subscribers.get(event_name))

    def subscriber_count(self, event_name: str) -> int:
        with self._lock:
            return len(self._subscribers.get(event_name, []))

    def event_names(self) -> frozenset[str]:
        """Return all event names with at least one live subscriber."""
        with self._lock:
            return frozenset(self._subscribers.keys())
