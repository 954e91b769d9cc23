"""Two-factor enrollment service for twofactor.

Copyright (c) 2025 twofactor contributors. All rights reserved.
"""

from __future__ import annotations

from ._base import BaseClient, RequestConfig
from .config import Routes
from .models import ConfirmTwoFactorRequest, QrCode, SecretKey


class TwoFactorService:
    """Service for enabling, confirming and disabling two-factor authentication."""

    def __init__(self, client: BaseClient, routes: Routes) -> None:
        """Initialize two-factor service.

        Args:
            client: The base HTTP client
            routes: Endpoint paths

        """
        self._client = client
        self._routes = routes

    async def enable(self) -> None:
        """Enable two-factor authentication for the current user."""
        await self._client.make_request("POST", self._routes.two_factor_enable)

    async def disable(self) -> None:
        """Disable two-factor authentication for the current user."""
        await self._client.make_request("DELETE", self._routes.two_factor_disable)

    async def qr_code(self) -> QrCode:
        """Fetch the enrollment QR code.

        Returns:
            The QR code as SVG markup.

        """
        data = await self._client.make_request("GET", self._routes.two_factor_qr_code)
        return QrCode.model_validate(data)

    async def secret_key(self) -> SecretKey:
        """Fetch the setup key.

        Returns:
            The human-enterable form of the secret.

        """
        data = await self._client.make_request(
            "GET", self._routes.two_factor_secret_key
        )
        return SecretKey.model_validate(data)

    async def recovery_codes(self) -> list[str]:
        """Fetch the current recovery codes.

        Returns:
            Recovery codes, in server order.

        """
        data = await self._client.make_request(
            "GET", self._routes.two_factor_recovery_codes
        )
        if not isinstance(data, list):
            return []
        return [str(code) for code in data]

    async def regenerate_recovery_codes(self) -> None:
        """Replace the recovery codes with a fresh set."""
        await self._client.make_request(
            "POST", self._routes.two_factor_recovery_codes
        )

    async def confirm(self, code: str) -> None:
        """Finish enrollment with a code from the authenticator application.

        Args:
            code: Six-digit authenticator code

        Raises:
            ValidationError: If the code is rejected

        """
        payload = ConfirmTwoFactorRequest(code=code)
        config = RequestConfig(json_data=payload.model_dump())
        await self._client.make_request(
            "POST", self._routes.two_factor_confirm, config=config
        )
