"""Client configuration: endpoint routes and connection settings.

Copyright (c) 2025 twofactor contributors. All rights reserved.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel

ENV_PREFIX = "TWO_FACTOR_"


class Routes(BaseModel):
    """Endpoint paths used by the client, keyed by role."""

    password_confirmation_status: str = "/user/confirmed-password-status"
    password_confirm: str = "/user/confirm-password"
    two_factor_enable: str = "/user/two-factor-authentication"
    two_factor_disable: str = "/user/two-factor-authentication"
    two_factor_qr_code: str = "/user/two-factor-qr-code"
    two_factor_secret_key: str = "/user/two-factor-secret-key"
    two_factor_recovery_codes: str = "/user/two-factor-recovery-codes"
    two_factor_confirm: str = "/user/confirmed-two-factor-authentication"
    two_factor_login: str = "/two-factor-challenge"


class ClientSettings(BaseModel):
    """Connection settings for :class:`twofactor.TwoFactorClient`."""

    base_url: str
    timeout: float = 30.0
    access_token: str | None = None
    routes: Routes = Routes()

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        prefix: str = ENV_PREFIX,
    ) -> ClientSettings:
        """Build settings from environment variables.

        Reads ``<prefix>BASE_URL`` (required), ``<prefix>TIMEOUT``,
        ``<prefix>ACCESS_TOKEN`` and one ``<prefix>ROUTE_<ROLE>`` override per
        entry of :class:`Routes` (e.g. ``TWO_FACTOR_ROUTE_TWO_FACTOR_LOGIN``).

        Raises:
            ValueError: If the base URL is not set.

        """
        env = os.environ if environ is None else environ

        base_url = env.get(f"{prefix}BASE_URL", "")
        if not base_url:
            msg = f"{prefix}BASE_URL must be set"
            raise ValueError(msg)

        overrides = {}
        for role in Routes.model_fields:
            value = env.get(f"{prefix}ROUTE_{role.upper()}")
            if value:
                overrides[role] = value

        return cls(
            base_url=base_url,
            timeout=float(env.get(f"{prefix}TIMEOUT", "30")),
            access_token=env.get(f"{prefix}ACCESS_TOKEN") or None,
            routes=Routes(**overrides),
        )
