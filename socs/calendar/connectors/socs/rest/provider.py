"""SOCS calendar REST connector.

Architecture:
    The connector pairs the calendar endpoint spec and adapter with a
    RestRunner for single-range requests, and hands whole-range requests to
    the RangeSplitExecutor, which bisects ranges whose responses hit the
    feed's silent event cap.
"""

from __future__ import annotations

from datetime import date
from typing import Any

from socs.calendar.models import CalendarEvent, DateRange
from socs.calendar.runtime.rest import HTTPClient, RestRunner
from socs.calendar.runtime.splitting import RangeSplitExecutor, SplitPolicy, SplitResult

from ..config import DEFAULT_TIMEOUT
from .endpoints import CalendarAdapter, CalendarSpec


class SOCSCalendarConnector:
    """Connector for one SOCS calendar feed.

    Args:
        endpoint: Feed URL including the calendar ``ID`` and ``key`` query
            parameters, as issued by SOCS
        policy: Splitting policy (defaults to ``SplitPolicy()``)
        timeout: Per-request timeout in seconds
    """

    def __init__(
        self,
        endpoint: str,
        *,
        policy: SplitPolicy | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        if not endpoint:
            raise ValueError("endpoint is required")
        self.endpoint = endpoint
        self._client = HTTPClient(timeout=timeout)
        self._runner = RestRunner(self._client)
        self._adapter = CalendarAdapter()
        self._executor = RangeSplitExecutor(policy)

    @property
    def policy(self) -> SplitPolicy:
        return self._executor.policy

    def _params(self, date_range: DateRange) -> dict[str, Any]:
        return {"date_range": date_range}

    async def fetch_raw(self, start_date: date, end_date: date) -> bytes:
        """Fetch the raw XML document for one inclusive range, without splitting."""
        date_range = DateRange(start_date, end_date)
        return await self._runner.fetch(
            spec=CalendarSpec, url=self.endpoint, params=self._params(date_range)
        )

    def decode(self, document: str | bytes) -> list[CalendarEvent]:
        """Decode one raw XML document into events, in document order."""
        return self._adapter.parse(document, {})

    async def fetch_range(self, date_range: DateRange) -> list[CalendarEvent]:
        """Fetch and decode a single range, with no truncation handling."""
        return await self._runner.run(
            spec=CalendarSpec,
            adapter=self._adapter,
            url=self.endpoint,
            params=self._params(date_range),
        )

    async def fetch_events_detailed(self, start_date: date, end_date: date) -> SplitResult:
        """Fetch every event in the range along with request statistics."""
        return await self._executor.execute(
            date_range=DateRange(start_date, end_date),
            fetch_range=self.fetch_range,
        )

    async def fetch_events(self, start_date: date, end_date: date) -> list[CalendarEvent]:
        """Fetch every event in the inclusive range.

        The range is bisected whenever a response reaches the policy's
        ``max_events``; leaf responses are merged, deduplicated by
        ``event_id`` and sorted by start time.

        Raises:
            TransportError: If any sub-range request fails
            ParseError: If any sub-range response is malformed
        """
        result = await self.fetch_events_detailed(start_date, end_date)
        return result.events

    async def close(self) -> None:
        await self._client.close()

    async def __aenter__(self) -> SOCSCalendarConnector:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
