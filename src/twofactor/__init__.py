"""
twofactor

Python client for a web framework's two-factor authentication endpoints.
Provides the password confirmation gate, the two-factor enrollment state
machine behind the settings page, the login-time challenge form and the
server-side render step for both pages.
"""

from .challenge import ChallengeForm
from .client import TwoFactorClient
from .config import ClientSettings, Routes
from .controllers import two_factor_challenge, two_factor_settings
from .enrollment import PageAction, SettingsAction, TwoFactorSettings
from .exceptions import *
from .features import Features
from .gate import (
    ConfirmationResult,
    GateDecision,
    GuardResult,
    PasswordConfirmationGate,
)
from .models import *

__version__ = "1.0.0"

__all__ = [
    "TwoFactorClient",
    "ClientSettings",
    "Routes",
    "Features",
    # Pages
    "two_factor_settings",
    "two_factor_challenge",
    "PasswordConfirmationGate",
    "GateDecision",
    "ConfirmationResult",
    "GuardResult",
    "TwoFactorSettings",
    "SettingsAction",
    "PageAction",
    "ChallengeForm",
    # Exceptions
    "TwoFactorError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "PasswordConfirmationRequiredError",
    "RateLimitError",
    "ServerError",
    "NetworkError",
    "TimeoutError",
    "SubmissionInProgressError",
    "InvalidTransitionError",
    # Models
    "PasswordConfirmationStatus",
    "QrCode",
    "SecretKey",
    "SettingsPageProps",
    "ChallengePageProps",
    "PageResponse",
    "EnrollmentPhase",
    "EnrollmentUIState",
    "ChallengeFormState",
    "ConfirmDialogState",
]
