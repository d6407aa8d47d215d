"""REST runtime: endpoint specs, adapters and the request runner."""

from ...utils.http import HTTPClient
from .runner import ResponseAdapter, RestEndpointSpec, RestRunner

__all__ = [
    "HTTPClient",
    "ResponseAdapter",
    "RestEndpointSpec",
    "RestRunner",
]
