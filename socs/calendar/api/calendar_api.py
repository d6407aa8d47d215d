"""Module-level entry points for one-off calendar fetches.

Each call opens a SOCSCalendarConnector for its own duration and closes it
on the way out. Callers making several requests against the same feed
should hold a connector themselves to reuse its HTTP session.

Example:
    >>> events = await fetch_events(url, date(2025, 1, 1), date(2025, 12, 31))
    >>> print(f"Found {len(events)} events")
"""

from __future__ import annotations

from datetime import date

from ..connectors.socs import SOCSCalendarConnector
from ..connectors.socs.config import DEFAULT_TIMEOUT
from ..connectors.socs.rest.endpoints import decode_calendar
from ..models import CalendarEvent
from ..runtime.splitting import SplitPolicy


async def fetch_events(
    endpoint: str,
    start_date: date,
    end_date: date,
    *,
    policy: SplitPolicy | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> list[CalendarEvent]:
    """Fetch every event between two dates (inclusive).

    Ranges whose responses reach the feed's event cap are split and fetched
    again in halves. Events are deduplicated by ``event_id`` and sorted by
    start time.

    Args:
        endpoint: Feed URL issued by SOCS, including ``ID`` and ``key``
        start_date: First day of the range
        end_date: Last day of the range
        policy: Splitting policy (defaults to ``SplitPolicy()``)
        timeout: Per-request timeout in seconds

    Returns:
        Deduplicated events sorted by start time

    Raises:
        TransportError: If any request fails
        ParseError: If any response is malformed
    """
    async with SOCSCalendarConnector(endpoint, policy=policy, timeout=timeout) as connector:
        return await connector.fetch_events(start_date, end_date)


async def fetch_raw(
    endpoint: str,
    start_date: date,
    end_date: date,
    *,
    timeout: float = DEFAULT_TIMEOUT,
) -> bytes:
    """Fetch the raw XML document for one range, with no splitting."""
    async with SOCSCalendarConnector(endpoint, timeout=timeout) as connector:
        return await connector.fetch_raw(start_date, end_date)


def decode(document: str | bytes) -> list[CalendarEvent]:
    """Decode one raw XML document into events, in document order."""
    return decode_calendar(document)
