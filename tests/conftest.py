"""Test configuration and common utilities.

Copyright (c) 2025 twofactor contributors. All rights reserved.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest
import respx
from twofactor import TwoFactorClient

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Generator


@pytest.fixture
def base_url() -> str:
    """Return base URL for test server.

    Returns:
        str: The base URL for testing.

    """
    return "https://app.twofactor.test"


@pytest.fixture
async def client(base_url: str) -> AsyncGenerator[TwoFactorClient, None]:
    """Create test client.

    Yields:
        TwoFactorClient: Configured test client.

    """
    async with TwoFactorClient(base_url=base_url, timeout=5.0) as client:
        yield client


@pytest.fixture
def mock_responses(base_url: str) -> Generator[respx.MockRouter, None, None]:
    """Mock HTTP responses.

    Yields:
        The mock router for HTTP requests, rooted at the test base URL.

    """
    with respx.mock(base_url=base_url, assert_all_called=False) as router:
        yield router


@pytest.fixture
def sample_qr_code() -> dict[str, Any]:
    """Sample QR code response.

    Returns:
        dict[str, Any]: QR code payload.

    """
    return {"svg": '<svg xmlns="http://www.w3.org/2000/svg"><rect/></svg>'}


@pytest.fixture
def sample_secret_key() -> dict[str, Any]:
    """Sample setup key response.

    Returns:
        dict[str, Any]: Setup key payload.

    """
    return {"secretKey": "JBSWY3DPEHPK3PXP"}


@pytest.fixture
def sample_recovery_codes() -> list[str]:
    """Sample recovery codes response.

    Returns:
        list[str]: Recovery codes in server order.

    """
    return [
        "a1b2c3d4e5-f6g7h8i9j0",
        "k1l2m3n4o5-p6q7r8s9t0",
        "u1v2w3x4y5-z6a7b8c9d0",
    ]


@pytest.fixture
def sample_password_error() -> dict[str, Any]:
    """Sample password validation error response.

    Returns:
        dict[str, Any]: 422 response body.

    """
    return {
        "message": "The provided password was incorrect.",
        "errors": {"password": ["These credentials do not match our records."]},
    }
