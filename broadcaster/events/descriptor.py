"""
Broadcaster Events — Event Descriptor
=======================================
First argument handed to every subscriber, so a callback shared
between several events can tell which one fired.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EventDescriptor:
    """Immutable {name} value, built once per publish call."""

    name: str
