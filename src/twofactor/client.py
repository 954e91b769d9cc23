"""twofactor client using service composition.

Copyright (c) 2025 twofactor contributors. All rights reserved.
"""

from __future__ import annotations

from typing import Self

from ._base import BaseClient
from ._login import TwoFactorLoginService
from ._password import PasswordConfirmationService
from ._two_factor import TwoFactorService
from .config import ClientSettings, Routes


class TwoFactorClient:
    """Client for the framework's password confirmation and two-factor endpoints."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 30.0,
        access_token: str | None = None,
        routes: Routes | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Base URL of the application
            timeout: Request timeout in seconds
            access_token: Optional bearer token for token-based sessions
            routes: Endpoint paths, defaults to the framework's conventional routes

        """
        self.routes = routes or Routes()
        self._client = BaseClient(
            base_url=base_url,
            timeout=timeout,
            access_token=access_token,
        )

        # Initialize service clients
        self.password = PasswordConfirmationService(self._client, self.routes)
        self.two_factor = TwoFactorService(self._client, self.routes)
        self.login = TwoFactorLoginService(self._client, self.routes)

    @classmethod
    def from_settings(cls, settings: ClientSettings) -> TwoFactorClient:
        """Create a client from a :class:`ClientSettings` instance."""
        return cls(
            settings.base_url,
            timeout=settings.timeout,
            access_token=settings.access_token,
            routes=settings.routes,
        )

    async def __aenter__(self) -> Self:
        """Async context manager entry.

        Returns:
            The client instance.

        """
        await self._client.__aenter__()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Async context manager exit."""
        await self._client.__aexit__(exc_type, exc_val, exc_tb)

    async def close(self) -> None:
        """Close the client and clean up resources."""
        await self._client.close()

    def set_access_token(self, token: str) -> None:
        """Set access token for authenticated requests.

        Args:
            token: Access token to set

        """
        self._client.set_access_token(token)

    def clear_access_token(self) -> None:
        """Clear the stored access token."""
        self._client.clear_access_token()

    def get_access_token(self) -> str | None:
        """Get the current access token.

        Returns:
            Current access token or None if not set.

        """
        return self._client.get_access_token()
