"""Two-factor login challenge service for twofactor.

Copyright (c) 2025 twofactor contributors. All rights reserved.
"""

from __future__ import annotations

from typing import Any

from ._base import BaseClient, RequestConfig
from .config import Routes
from .models import TwoFactorLoginRequest


class TwoFactorLoginService:
    """Service for the second step of a login."""

    def __init__(self, client: BaseClient, routes: Routes) -> None:
        """Initialize two-factor login service.

        Args:
            client: The base HTTP client
            routes: Endpoint paths

        """
        self._client = client
        self._routes = routes

    async def verify(
        self,
        code: str | None = None,
        recovery_code: str | None = None,
    ) -> dict[str, Any]:
        """Complete a pending login with an authenticator or recovery code.

        Args:
            code: Authenticator code
            recovery_code: Recovery code

        Returns:
            The response body, empty when the server answers with a redirect.

        Raises:
            ValueError: Unless exactly one of the two codes is given
            ValidationError: If the code is rejected

        """
        payload = TwoFactorLoginRequest(
            code=code or None, recovery_code=recovery_code or None
        )
        config = RequestConfig(json_data=payload.model_dump(exclude_none=True))
        data = await self._client.make_request(
            "POST", self._routes.two_factor_login, config=config
        )
        return data if isinstance(data, dict) else {}
