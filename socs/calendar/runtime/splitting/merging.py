"""Merging of partial fetch results."""

from __future__ import annotations

from collections.abc import Iterable

from ...models import CalendarEvent
from .definitions import DedupStrategy


def deduplicate(
    events: Iterable[CalendarEvent],
    strategy: DedupStrategy = DedupStrategy.FIRST_SEEN,
) -> list[CalendarEvent]:
    """Keep one event per ``event_id``.

    Surviving events stay at the position of the first occurrence of their id;
    ``strategy`` only decides which snapshot of the event is kept there.
    """
    kept: dict[str, CalendarEvent] = {}
    for event in events:
        if event.event_id not in kept or strategy is DedupStrategy.LAST_SEEN:
            kept[event.event_id] = event
    return list(kept.values())


def sort_events(events: Iterable[CalendarEvent]) -> list[CalendarEvent]:
    """Stable sort ascending by start time."""
    return sorted(events, key=lambda e: e.start.sort_key())


def merge_events(
    partials: Iterable[Iterable[CalendarEvent]],
    strategy: DedupStrategy = DedupStrategy.FIRST_SEEN,
) -> list[CalendarEvent]:
    """Concatenate partial results, deduplicate, then sort."""
    merged: list[CalendarEvent] = []
    for part in partials:
        merged.extend(part)
    return sort_events(deduplicate(merged, strategy))
