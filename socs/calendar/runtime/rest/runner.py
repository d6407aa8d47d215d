"""REST request runner using endpoint specs and response adapters."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ...utils.http import HTTPClient


@dataclass(frozen=True)
class RestEndpointSpec:
    id: str
    build_query: Callable[[dict[str, Any]], dict[str, Any]] | None = None
    build_headers: Callable[[dict[str, Any]], dict[str, str]] | None = None


class ResponseAdapter:
    def parse(self, response: Any, params: dict[str, Any]) -> Any:
        return response


class RestRunner:
    def __init__(self, client: HTTPClient) -> None:
        self._client = client

    async def fetch(
        self, *, spec: RestEndpointSpec, url: str, params: dict[str, Any]
    ) -> bytes:
        """Issue the request described by ``spec`` and return the raw body."""
        query = spec.build_query(params) if spec.build_query else None
        headers = spec.build_headers(params) if spec.build_headers else None
        return await self._client.get_bytes(url, params=query, headers=headers)

    async def run(
        self,
        *,
        spec: RestEndpointSpec,
        adapter: ResponseAdapter,
        url: str,
        params: dict[str, Any],
    ) -> Any:
        data = await self.fetch(spec=spec, url=url, params=params)
        return adapter.parse(data, params)
