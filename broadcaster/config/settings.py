"""
Broadcaster Config — Bus Settings
===================================
Per-registry settings. There are no environment variables and no
config files: a registry is configured by the code that builds it.

Failure policies:
  ISOLATE → catch, report, keep delivering (default)
  ABORT   → first failure stops the publish and is raised
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, Optional

if TYPE_CHECKING:
    from broadcaster.events.errors import SubscriberFailure


DEFAULT_LOGGER_NAME = "broadcaster.events"


# ══════════════════════════════════════════════════════════════
# FAILURE POLICY ENUM
# ══════════════════════════════════════════════════════════════

class FailurePolicy(Enum):
    """What a publish does when a subscriber raises."""
    ISOLATE = "ISOLATE"  # Every other subscriber still gets delivery
    ABORT = "ABORT"      # Remaining subscribers are skipped, error raised


ErrorSink = Callable[["SubscriberFailure"], None]


# ══════════════════════════════════════════════════════════════
# BUS CONFIG
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class BusConfig:
    """
    Settings for one EventRegistry.

    error_sink receives every SubscriberFailure caught under ISOLATE.
    Failures are always logged to DEFAULT_LOGGER_NAME,
    whether or not a sink is set.
    """

    failure_policy: FailurePolicy = FailurePolicy.ISOLATE
    error_sink: Optional[ErrorSink] = None

    def __post_init__(self) -> None:
        if not isinstance(self.failure_policy, FailurePolicy):
            raise ValueError(
                f"failure_policy must be a FailurePolicy, "
                f"got {self.failure_policy!r}."
            )
        if self.error_sink is not None and not callable(self.error_sink):
            raise ValueError("error_sink must be callable or None.")

    @property
    def isolates_failures(self) -> bool:
        return self.failure_policy == FailurePolicy.ISOLATE
