"""Core types shared across the library."""

from .exceptions import CalendarError, ParseError, TransportError

__all__ = [
    "CalendarError",
    "ParseError",
    "TransportError",
]
