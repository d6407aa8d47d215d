"""HTTP client helper."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import aiohttp
from yarl import URL

from ..core.exceptions import TransportError

logger = logging.getLogger(__name__)


class HTTPClient:
    """Async HTTP client wrapper."""

    def __init__(self, timeout: float = 30.0) -> None:
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    async def get_bytes(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> bytes:
        """GET request returning the raw response body.

        ``params`` are merged into any query string already on ``url``, since
        calendar endpoints carry their ID and key in the query. The body is
        left undecoded; XML documents name their own encoding in the prolog.

        Raises:
            TransportError: On connection failure, timeout or HTTP error status
        """
        target = URL(url)
        if params:
            target = target.update_query({k: str(v) for k, v in params.items()})

        # Query carries the feed key; log host and path only
        logger.debug("calendar_request", extra={"url": str(target.with_query(None))})
        try:
            async with self.session.get(target, headers=headers) as response:
                if response.status >= 400:
                    raise TransportError(
                        f"HTTP request failed with status: {response.status}",
                        status_code=response.status,
                    )
                return await response.read()
        except asyncio.TimeoutError as e:
            raise TransportError(f"Timed out fetching calendar data: {e}") from e
        except aiohttp.ClientError as e:
            raise TransportError(f"Failed to fetch calendar data: {e}") from e

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
