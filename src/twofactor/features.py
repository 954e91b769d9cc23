"""Server-side feature flags for the authentication pages.

Copyright (c) 2025 twofactor contributors. All rights reserved.
"""

from __future__ import annotations

from typing import Any

TWO_FACTOR_AUTHENTICATION = "two-factor-authentication"


class Features:
    """Enabled authentication features and their options.

    Example:
        features = Features.of(Features.two_factor_authentication(confirm=True))

    """

    def __init__(self, enabled: dict[str, dict[str, Any]] | None = None) -> None:
        self._enabled: dict[str, dict[str, Any]] = dict(enabled or {})

    @staticmethod
    def two_factor_authentication(
        *, confirm: bool = True, confirm_password: bool = True
    ) -> tuple[str, dict[str, Any]]:
        """Return the two-factor feature entry with its options."""
        return TWO_FACTOR_AUTHENTICATION, {
            "confirm": confirm,
            "confirmPassword": confirm_password,
        }

    @classmethod
    def of(cls, *features: tuple[str, dict[str, Any]]) -> Features:
        """Build a feature set from ``(name, options)`` entries."""
        return cls(dict(features))

    def enabled(self, feature: str) -> bool:
        return feature in self._enabled

    def option_enabled(self, feature: str, option: str) -> bool:
        """Whether ``feature`` is enabled and its ``option`` is switched on."""
        if not self.enabled(feature):
            return False
        return bool(self._enabled[feature].get(option, False))
