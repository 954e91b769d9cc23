"""Simple conftest for integration tests."""

import os

import pytest
from twofactor import ClientSettings, TwoFactorClient


@pytest.fixture
async def integration_client():
    """Create a client for the application named by TWO_FACTOR_BASE_URL."""
    if not os.environ.get("TWO_FACTOR_BASE_URL"):
        pytest.skip("TWO_FACTOR_BASE_URL is not set")

    async with TwoFactorClient.from_settings(ClientSettings.from_env()) as client:
        yield client
