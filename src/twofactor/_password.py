"""Password confirmation service for twofactor.

Copyright (c) 2025 twofactor contributors. All rights reserved.
"""

from __future__ import annotations

from ._base import BaseClient, RequestConfig
from .config import Routes
from .models import ConfirmPasswordRequest, PasswordConfirmationStatus


class PasswordConfirmationService:
    """Service for password re-confirmation operations."""

    def __init__(self, client: BaseClient, routes: Routes) -> None:
        """Initialize password confirmation service.

        Args:
            client: The base HTTP client
            routes: Endpoint paths

        """
        self._client = client
        self._routes = routes

    async def status(self) -> PasswordConfirmationStatus:
        """Check whether the password was confirmed recently enough.

        Returns:
            The confirmation status.

        """
        data = await self._client.make_request(
            "GET", self._routes.password_confirmation_status
        )
        return PasswordConfirmationStatus.model_validate(data)

    async def confirm(self, password: str) -> None:
        """Confirm the current user's password.

        Args:
            password: The user's password

        Raises:
            ValidationError: If the password does not match

        """
        payload = ConfirmPasswordRequest(password=password)
        config = RequestConfig(json_data=payload.model_dump())
        await self._client.make_request(
            "POST", self._routes.password_confirm, config=config
        )
