"""
Broadcaster
=============
In-process, synchronous publish/subscribe.

    registry = EventRegistry()
    subscription = registry.on("change", lambda event, rating: ...)
    registry.broadcast("change", rating)
    subscription.remove()
"""

from broadcaster.config import BusConfig, FailurePolicy
from broadcaster.events import (
    DispatchReport,
    EventBusError,
    EventDescriptor,
    EventRegistry,
    InvalidArgument,
    InvalidCallback,
    InvalidEventName,
    SubscriberFailure,
    Subscription,
    SubscriptionState,
)
from broadcaster.shared import (
    broadcast,
    get_default_registry,
    on,
    reset_default_registry,
)

__all__ = [
    "EventRegistry",
    "Subscription",
    "SubscriptionState",
    "EventDescriptor",
    "DispatchReport",
    "BusConfig",
    "FailurePolicy",
    "EventBusError",
    "InvalidArgument",
    "InvalidEventName",
    "InvalidCallback",
    "SubscriberFailure",
    "on",
    "broadcast",
    "get_default_registry",
    "reset_default_registry",
]
