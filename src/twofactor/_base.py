"""Base HTTP client for two-factor endpoint operations.

Copyright (c) 2025 twofactor contributors. All rights reserved.
"""

from __future__ import annotations

import logging
from typing import Any, NamedTuple
from urllib.parse import urljoin

import httpx  # type: ignore[import-untyped]

from .exceptions import (
    NetworkError,
    TimeoutError as TwoFactorTimeoutError,
    TwoFactorError,
    create_error_from_response,
)

logger = logging.getLogger(__name__)

# HTTP Error Status Constants
HTTP_SUCCESS_THRESHOLD = 400
HTTP_NO_CONTENT = 204

USER_AGENT = "twofactor-python/1.0.0"


class RequestConfig(NamedTuple):
    """Configuration for HTTP requests."""

    json_data: dict[str, Any] | None = None
    params: dict[str, Any] | None = None
    timeout: float | None = None


class BaseClient:
    """Base HTTP client for making requests against the framework endpoints.

    Every request is sent once. Session cookies set by the server are kept in
    the underlying ``httpx.AsyncClient`` cookie jar and replayed on later
    requests.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        access_token: str | None = None,
    ) -> None:
        """Initialize base HTTP client.

        Args:
            base_url: The base URL of the application
            timeout: Request timeout in seconds
            access_token: Optional bearer token for token-based sessions

        """
        self.base_url = base_url.rstrip("/") + "/"
        self.timeout = timeout
        self._access_token: str | None = access_token

        headers = {
            "User-Agent": USER_AGENT,
            "Accept": "application/json",
            "X-Requested-With": "XMLHttpRequest",
        }

        self._client = httpx.AsyncClient(
            timeout=timeout,
            headers=headers,
            follow_redirects=False,
        )

    async def __aenter__(self) -> BaseClient:
        """Async context manager entry.

        Returns:
            The client instance.

        """
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Async context manager exit."""
        await self._client.aclose()

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    def set_access_token(self, token: str) -> None:
        """Set the access token for authenticated requests."""
        self._access_token = token

    def clear_access_token(self) -> None:
        """Clear the access token."""
        self._access_token = None

    def get_access_token(self) -> str | None:
        """Get the current access token.

        Returns:
            Current access token or None if not set.

        """
        return self._access_token

    async def make_request(
        self,
        method: str,
        endpoint: str,
        *,
        config: RequestConfig | None = None,
    ) -> Any:
        """Make a single HTTP request.

        Args:
            method: HTTP method (GET, POST, DELETE, ...)
            endpoint: Endpoint path, relative to the base URL
            config: Request configuration

        Returns:
            The decoded JSON body (a dict or a list), or an empty dict when the
            response carries no JSON (204, redirects, HTML).

        Raises:
            TwoFactorError: For any response with status >= 400
            NetworkError: For network-related errors
            TimeoutError: For timeout errors

        """
        if config is None:
            config = RequestConfig()

        url = urljoin(self.base_url, endpoint.lstrip("/"))
        request_timeout = config.timeout or self.timeout

        headers: dict[str, str] = {}
        if self._access_token:
            headers["Authorization"] = f"Bearer {self._access_token}"

        try:
            response = await self._client.request(
                method,
                url,
                json=config.json_data,
                params=config.params,
                headers=headers,
                timeout=request_timeout,
            )
        except httpx.TimeoutException as e:
            logger.warning("%s %s timed out", method, endpoint)
            raise TwoFactorTimeoutError("Request timeout") from e
        except httpx.NetworkError as e:
            logger.warning("%s %s failed: %s", method, endpoint, e)
            raise NetworkError("Network error") from e

        logger.debug("%s %s -> %s", method, endpoint, response.status_code)

        if response.status_code < HTTP_SUCCESS_THRESHOLD:
            return self._parse_body(response)

        raise self._build_api_error(response)

    @staticmethod
    def _parse_body(response: httpx.Response) -> Any:
        """Decode a successful response body.

        Returns:
            Parsed JSON data, or an empty dict when there is none.

        """
        if response.status_code == HTTP_NO_CONTENT or not response.content:
            return {}
        if "json" not in response.headers.get("content-type", ""):
            return {}
        try:
            return response.json()
        except ValueError:
            return {}

    @staticmethod
    def _build_api_error(response: httpx.Response) -> TwoFactorError:
        """Build the appropriate error for a failed API response."""
        try:
            error_data = response.json()
        except ValueError:
            error_data = {"message": response.text}
        if not isinstance(error_data, dict):
            error_data = {}

        retry_after: int | None = None
        header = response.headers.get("retry-after")
        if header and header.isdigit():
            retry_after = int(header)

        return create_error_from_response(
            response.status_code,
            error_data,
            default_message=response.reason_phrase or None,
            retry_after=retry_after,
        )
