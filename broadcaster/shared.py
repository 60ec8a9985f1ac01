"""
Broadcaster — Shared Default Registry
=======================================
Module-level on() / broadcast() backed by one lazily built registry,
for code that does not want to pass a registry around.

Code that can own its registry should construct an EventRegistry
instead. reset_default_registry() exists for test teardown.
"""

from __future__ import annotations

from threading import Lock
from typing import Any, Optional

from broadcaster.config import BusConfig
from broadcaster.events.registry import Callback, EventRegistry, Subscription

_default_registry: Optional[EventRegistry] = None
_default_lock = Lock()


def get_default_registry() -> EventRegistry:
    global _default_registry
    with _default_lock:
        if _default_registry is None:
            _default_registry = EventRegistry()
        return _default_registry


def reset_default_registry(config: Optional[BusConfig] = None) -> EventRegistry:
    """
    Cancel everything on the current default registry and replace it.

    Handles issued by the old registry report CANCELLED afterwards.
    """
    global _default_registry
    with _default_lock:
        old, _default_registry = _default_registry, EventRegistry(config)
    if old is not None:
        old.clear()
    return _default_registry


def on(event_name: str, callback: Callback) -> Subscription:
    return get_default_registry().subscribe(event_name, callback)


def broadcast(event_name: str, *payload: Any) -> None:
    get_default_registry().publish(event_name, *payload)
