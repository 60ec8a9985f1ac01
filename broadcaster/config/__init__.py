"""
Broadcaster Config — Public API
=================================
Per-registry settings: failure policy and error sink.
"""

from broadcaster.config.settings import (
    DEFAULT_LOGGER_NAME,
    BusConfig,
    ErrorSink,
    FailurePolicy,
)

__all__ = [
    "BusConfig",
    "FailurePolicy",
    "ErrorSink",
    "DEFAULT_LOGGER_NAME",
]
