"""Client-side view state models for twofactor.

Copyright (c) 2025 twofactor contributors. All rights reserved.
"""

from enum import Enum

from pydantic import BaseModel, Field


class EnrollmentPhase(str, Enum):
    """Where the account is in the two-factor enrollment lifecycle."""

    DISABLED = "disabled"
    ENABLING = "enabling"
    ENABLED_UNCONFIRMED = "enabled-unconfirmed"
    ENABLED_CONFIRMED = "enabled-confirmed"
    DISABLING = "disabling"


class EnrollmentUIState(BaseModel):
    """Two-factor settings page state."""

    phase: EnrollmentPhase = EnrollmentPhase.DISABLED
    # Phase a pending disable started from; set only while disabling
    disabling_from: EnrollmentPhase | None = None
    qr_code: str | None = None
    setup_key: str | None = None
    recovery_codes: list[str] = Field(default_factory=list)
    code: str = ""
    code_error: str | None = None
    notice: str | None = None

    @property
    def enabling(self) -> bool:
        return self.phase is EnrollmentPhase.ENABLING

    @property
    def disabling(self) -> bool:
        return self.phase is EnrollmentPhase.DISABLING

    @property
    def confirming(self) -> bool:
        """Whether the page shows the unconfirmed enrollment view.

        Stays true while an unconfirmed enrollment is being cancelled.
        """
        if self.disabling:
            return self.disabling_from is EnrollmentPhase.ENABLED_UNCONFIRMED
        return self.phase is EnrollmentPhase.ENABLED_UNCONFIRMED

    @property
    def two_factor_enabled(self) -> bool:
        """Whether the page treats two-factor authentication as switched on."""
        return self.phase in (
            EnrollmentPhase.ENABLED_UNCONFIRMED,
            EnrollmentPhase.ENABLED_CONFIRMED,
            EnrollmentPhase.DISABLING,
        )

    def clear_enrollment(self) -> None:
        """Forget everything fetched during enrollment."""
        self.qr_code = None
        self.setup_key = None
        self.recovery_codes = []
        self.code = ""
        self.code_error = None


class ChallengeFormState(BaseModel):
    """Two-factor login challenge form state."""

    code: str = ""
    recovery_code: str = ""
    recovery: bool = False
    processing: bool = False
    errors: dict[str, str] = Field(default_factory=dict)
    status: str | None = None
    notice: str | None = None


class ConfirmDialogState(BaseModel):
    """Password confirmation dialog state."""

    title: str = "Confirm Password"
    content: str = "For your security, please confirm your password to continue."
    button: str = "Confirm"
    open: bool = False
    password: str = ""
    error: str | None = None
    submitting: bool = False
    focus_password: bool = False
    notice: str | None = None

    def reset(self) -> None:
        """Close the dialog and clear the form."""
        self.open = False
        self.password = ""
        self.error = None
        self.submitting = False
        self.focus_password = False
