"""SOCS Calendar - complete event retrieval from SOCS institutional calendar feeds."""

from .api import decode, fetch_events, fetch_raw
from .connectors import SOCSCalendarConnector
from .connectors.socs.config import STANDARD_INCLUSION, InclusionFlags
from .core import CalendarError, ParseError, TransportError
from .models import AllDay, CalendarEvent, DateRange, EventTime, Specific
from .runtime.splitting import (
    DEFAULT_EVENT_CAP,
    DedupStrategy,
    SplitPolicy,
    SplitResult,
)

__version__ = "0.1.0"

__all__ = [
    # Operations
    "decode",
    "fetch_events",
    "fetch_raw",
    "SOCSCalendarConnector",
    # Models
    "AllDay",
    "CalendarEvent",
    "DateRange",
    "EventTime",
    "Specific",
    # Configuration
    "DEFAULT_EVENT_CAP",
    "DedupStrategy",
    "InclusionFlags",
    "STANDARD_INCLUSION",
    "SplitPolicy",
    "SplitResult",
    # Exceptions
    "CalendarError",
    "ParseError",
    "TransportError",
]
