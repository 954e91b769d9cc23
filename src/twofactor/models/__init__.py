"""twofactor models package.

Copyright (c) 2025 twofactor contributors. All rights reserved.
"""

from .confirmation_models import ConfirmPasswordRequest, PasswordConfirmationStatus
from .page_models import ChallengePageProps, PageResponse, SettingsPageProps
from .state_models import (
    ChallengeFormState,
    ConfirmDialogState,
    EnrollmentPhase,
    EnrollmentUIState,
)
from .two_factor_models import (
    ConfirmTwoFactorRequest,
    QrCode,
    SecretKey,
    TwoFactorLoginRequest,
)

__all__ = [
    # Password confirmation models
    "PasswordConfirmationStatus",
    "ConfirmPasswordRequest",
    # Two-factor models
    "QrCode",
    "SecretKey",
    "ConfirmTwoFactorRequest",
    "TwoFactorLoginRequest",
    # Page models
    "SettingsPageProps",
    "ChallengePageProps",
    "PageResponse",
    # State models
    "EnrollmentPhase",
    "EnrollmentUIState",
    "ChallengeFormState",
    "ConfirmDialogState",
]
