"""SOCS REST endpoint definitions."""

from __future__ import annotations

from .calendar import SPEC as CalendarSpec  # noqa: N811
from .calendar import Adapter as CalendarAdapter
from .calendar import decode_calendar, format_api_date

__all__ = [
    "CalendarAdapter",
    "CalendarSpec",
    "decode_calendar",
    "format_api_date",
]
