"""
Broadcaster Events — Public API
=================================
Subscription registry and synchronous dispatch.
"""

from broadcaster.events.descriptor import EventDescriptor
from broadcaster.events.dispatcher import DispatchReport, dispatch
from broadcaster.events.errors import (
    EventBusError,
    InvalidArgument,
    InvalidCallback,
    InvalidEventName,
    SubscriberFailure,
)
from broadcaster.events.registry import (
    CallbackEntry,
    EventRegistry,
    Subscription,
    SubscriptionState,
)

__all__ = [
    "dispatch",
    "DispatchReport",
    "EventDescriptor",
    "EventRegistry",
    "CallbackEntry",
    "Subscription",
    "SubscriptionState",
    "EventBusError",
    "InvalidArgument",
    "InvalidEventName",
    "InvalidCallback",
    "SubscriberFailure",
]
