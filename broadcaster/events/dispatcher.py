"""
Broadcaster Events — Dispatcher
=================================
Delivers one published event to the subscribers registered for it.

Dispatch behavior:
1. Take a snapshot of the live entries for the event name
2. Build one EventDescriptor for the whole publish
3. Invoke each entry in subscription order as callback(descriptor, *payload)
4. Skip entries cancelled after the snapshot was taken
5. On subscriber failure, apply the registry's FailurePolicy

Entries subscribed during dispatch are not in the snapshot and first
receive the next publish. Nested publishes run to completion inside
the callback that triggered them.

A cancel() is honoured if it returns before the entry's turn comes.
A cancel() on another thread that races with that turn may still see
one last invocation.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, List, Tuple

from broadcaster.config import DEFAULT_LOGGER_NAME
from broadcaster.events.descriptor import EventDescriptor
from broadcaster.events.errors import InvalidEventName, SubscriberFailure

if TYPE_CHECKING:
    from broadcaster.events.registry import EventRegistry

logger = logging.getLogger(DEFAULT_LOGGER_NAME)


@dataclass
class DispatchReport:
    """Outcome of one publish call."""

    event_name: str
    notified: int = 0
    failed: int = 0
    skipped: int = 0
    failures: List[SubscriberFailure] = field(default_factory=list)

    @property
    def delivered(self) -> bool:
        return self.notified > 0 and self.failed == 0


def handler_name(callback: Any) -> str:
    return getattr(callback, "__qualname__", None) or repr(callback)


def dispatch(
    registry: "EventRegistry",
    event_name: str,
    payload: Tuple[Any, ...] = (),
) -> DispatchReport:
    """
    Deliver an event to every subscriber registered at dispatch time.

    Args:
        registry:   EventRegistry holding the subscriptions.
        event_name: Name the event was published under.
        payload:    Positional values forwarded after the descriptor.

    Returns:
        DispatchReport with notified / failed / skipped counts.

    Raises:
        InvalidEventName:  event_name is not a string.
        SubscriberFailure: only under FailurePolicy.ABORT, for the first
                           callback that raised.
    """
    if not isinstance(event_name, str):
        raise InvalidEventName(event_name)

    report = DispatchReport(event_name=event_name)
    entries = registry.get_subscribers(event_name)

    if not entries:
        logger.debug(f"No subscribers for event '{event_name}'")
        return report

    config = registry.config
    descriptor = EventDescriptor(name=event_name)

    for entry in entries:
        if not entry.active:
            # Cancelled by an earlier callback of this same publish
            report.skipped += 1
            continue

        name = handler_name(entry.callback)

        try:
            entry.callback(descriptor, *payload)
            report.notified += 1
            logger.debug(
                f"Dispatched {event_name} → {name} (entry: {entry.entry_id})"
            )

        except Exception as exc:
            failure = SubscriberFailure(
                event_name=event_name,
                entry_id=entry.entry_id,
                handler=name,
                error=exc,
            )

            logger.error(
                f"Subscriber failed: {name} for {event_name} "
                f"(entry: {entry.entry_id}): {exc}",
                exc_info=True,
            )

            if not config.isolates_failures:
                raise failure from exc

            report.failed += 1
            report.failures.append(failure)
            _report_to_sink(config.error_sink, failure)
            # Continue to next subscriber

    if report.failed:
        logger.info(
            f"Dispatch complete: {event_name} — "
            f"{report.notified} notified, {report.failed} failed, "
            f"{report.skipped} skipped"
        )

    return report


def _report_to_sink(sink, failure: SubscriberFailure) -> None:
    if sink is None:
        return
    try:
        sink(failure)
    except Exception:
        logger.exception(
            f"Error sink raised while reporting failure of "
            f"{failure.handler} for {failure.event_name}"
        )
