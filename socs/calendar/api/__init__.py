"""Public fetch and decode functions."""

from .calendar_api import decode, fetch_events, fetch_raw

__all__ = ["decode", "fetch_events", "fetch_raw"]
