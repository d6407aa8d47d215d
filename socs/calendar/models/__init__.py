"""Data models for calendar feed types.

Architecture:
    Events are Pydantic v2 models and ranges are frozen dataclasses. All
    models are immutable so results can be shared between branches of a
    split fetch without copying.

Design Decisions:
    - Pydantic v2: Validation and JSON serialization of decoded events
    - Discriminated union: ``EventTime`` is either ``AllDay`` or ``Specific``
    - No timezone: times are institution-local and kept naive

Model Categories:
    - Ranges: DateRange
    - Events: CalendarEvent, EventTime (AllDay, Specific)
"""

from .date_range import DateRange
from .event import CalendarEvent
from .event_time import AllDay, EventTime, Specific

__all__ = [
    "AllDay",
    "CalendarEvent",
    "DateRange",
    "EventTime",
    "Specific",
]
