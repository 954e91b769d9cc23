"""Render steps for the two-factor pages.

Copyright (c) 2025 twofactor contributors. All rights reserved.
"""

from __future__ import annotations

from .features import TWO_FACTOR_AUTHENTICATION, Features
from .models import ChallengePageProps, PageResponse, SettingsPageProps

SETTINGS_COMPONENT = "settings/two-factor"
CHALLENGE_COMPONENT = "auth/two-factor-challenge"


def two_factor_settings(features: Features) -> PageResponse:
    """Render the two-factor settings page.

    The page only needs to know whether a fresh enrollment must be confirmed
    with a code before it takes effect.
    """
    props = SettingsPageProps(
        requires_confirmation=features.option_enabled(
            TWO_FACTOR_AUTHENTICATION, "confirm"
        )
    )
    return PageResponse(
        component=SETTINGS_COMPONENT,
        props=props.model_dump(by_alias=True),
    )


def two_factor_challenge(
    status: str | None = None, recovery: bool = False
) -> PageResponse:
    """Render the login-time two-factor challenge page."""
    props = ChallengePageProps(status=status, recovery=recovery)
    return PageResponse(
        component=CHALLENGE_COMPONENT,
        props=props.model_dump(exclude_none=True),
    )
