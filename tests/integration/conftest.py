"""Shared fixtures for integration tests."""

import os

import pytest

# Skip all integration tests unless RUN_SOCS_NETWORK_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_SOCS_NETWORK_TESTS") != "1",
    reason="Requires network access. Set RUN_SOCS_NETWORK_TESTS=1 to run",
)


@pytest.fixture
def feed_url() -> str:
    url = os.environ.get("SOCS_CALENDAR_URL")
    if not url:
        pytest.skip("SOCS_CALENDAR_URL is not set")
    return url
