"""Shared fixtures for integration tests."""

import os

import pytest

# Skip all integration tests unless RUN_REPORTKIT_NETWORK_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_REPORTKIT_NETWORK_TESTS") != "1",
    reason="Requires network access. Set RUN_REPORTKIT_NETWORK_TESTS=1 to run",
)


@pytest.fixture
def backend_url() -> str:
    url = os.environ.get("REPORTKIT_BASE_URL")
    if not url:
        pytest.skip("REPORTKIT_BASE_URL is not set")
    return url


@pytest.fixture
def auth_headers() -> dict[str, str]:
    token = os.environ.get("REPORTKIT_TOKEN")
    return {"Authorization": f"Bearer {token}"} if token else {}
