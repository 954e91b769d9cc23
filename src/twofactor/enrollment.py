"""Two-factor settings page: enrollment state machine.

Copyright (c) 2025 twofactor contributors. All rights reserved.
"""

from __future__ import annotations

import asyncio
import logging
from enum import Enum
from typing import TYPE_CHECKING, Any, NamedTuple

from .exceptions import (
    InvalidTransitionError,
    TwoFactorError,
    ValidationError,
    is_transport_error,
)
from .gate import (
    GENERIC_FAILURE_NOTICE,
    GuardResult,
    PasswordConfirmationGate,
    PasswordPrompt,
)
from .models import EnrollmentPhase, EnrollmentUIState, SettingsPageProps

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .client import TwoFactorClient

logger = logging.getLogger(__name__)

ENABLED_PHASES = (
    EnrollmentPhase.ENABLED_UNCONFIRMED,
    EnrollmentPhase.ENABLED_CONFIRMED,
)

DESCRIPTION = (
    "When two factor authentication is enabled, you will be prompted for a "
    "secure, random token during authentication. You may retrieve this token "
    "from your phone's Authenticator application."
)
RECOVERY_CODES_NOTE = (
    "Store these recovery codes in a secure password manager. They can be used "
    "to recover access to your account if your two factor authentication "
    "device is lost."
)


class SettingsAction(str, Enum):
    """Buttons offered by the settings page."""

    ENABLE = "Enable"
    CONFIRM = "Confirm"
    REGENERATE_RECOVERY_CODES = "Regenerate Recovery Codes"
    SHOW_RECOVERY_CODES = "Show Recovery Codes"
    CANCEL = "Cancel"
    DISABLE = "Disable"


class PageAction(NamedTuple):
    action: SettingsAction
    disabled: bool = False


def initial_phase(
    requires_confirmation: bool,
    two_factor_enabled: bool,
    two_factor_confirmed: bool | None = None,
) -> EnrollmentPhase:
    """Work out the starting phase from the account's two-factor flags.

    An enabled account counts as confirmed unless confirmation is required and
    the account is known not to be confirmed yet.
    """
    if not two_factor_enabled:
        return EnrollmentPhase.DISABLED
    if requires_confirmation and two_factor_confirmed is False:
        return EnrollmentPhase.ENABLED_UNCONFIRMED
    return EnrollmentPhase.ENABLED_CONFIRMED


class TwoFactorSettings:
    """Drives two-factor enrollment for the signed-in user.

    Every operation runs behind the password confirmation gate and returns the
    gate's :class:`~twofactor.gate.GuardResult`. When the gate needs a password
    and no ``prompt`` is given, the operation stays parked on the gate until
    ``settings.gate.submit(password)`` succeeds.
    """

    def __init__(
        self,
        client: TwoFactorClient,
        *,
        requires_confirmation: bool,
        two_factor_enabled: bool = False,
        two_factor_confirmed: bool | None = None,
        gate: PasswordConfirmationGate | None = None,
    ) -> None:
        self._client = client
        self.requires_confirmation = requires_confirmation
        self.gate = gate or PasswordConfirmationGate(client)
        self.state = EnrollmentUIState(
            phase=initial_phase(
                requires_confirmation, two_factor_enabled, two_factor_confirmed
            )
        )

    @classmethod
    def from_page(
        cls,
        client: TwoFactorClient,
        props: SettingsPageProps | Mapping[str, Any],
        **kwargs: Any,
    ) -> TwoFactorSettings:
        """Build the page from the settings controller's props."""
        if not isinstance(props, SettingsPageProps):
            props = SettingsPageProps.model_validate(props)
        return cls(
            client, requires_confirmation=props.requires_confirmation, **kwargs
        )

    @property
    def phase(self) -> EnrollmentPhase:
        return self.state.phase

    # Operations

    async def enable(self, prompt: PasswordPrompt | None = None) -> GuardResult:
        """Switch two-factor authentication on and fetch the enrollment details."""
        self._require("enable", EnrollmentPhase.DISABLED)
        return await self.gate.guard(self._enable, prompt)

    async def confirm(
        self, code: str, prompt: PasswordPrompt | None = None
    ) -> GuardResult:
        """Finish enrollment with a code from the authenticator application.

        The guard result's value is ``True`` when the code was accepted and
        ``False`` when it was rejected (see ``state.code_error``).
        """
        self._require("confirm", EnrollmentPhase.ENABLED_UNCONFIRMED)
        self.state.code = code
        return await self.gate.guard(self._confirm, prompt)

    async def disable(self, prompt: PasswordPrompt | None = None) -> GuardResult:
        """Switch two-factor authentication off."""
        self._require("disable", *ENABLED_PHASES)
        return await self.gate.guard(self._disable, prompt)

    async def cancel(self, prompt: PasswordPrompt | None = None) -> GuardResult:
        """Abandon an unconfirmed enrollment."""
        self._require("cancel", EnrollmentPhase.ENABLED_UNCONFIRMED)
        return await self.gate.guard(self._disable, prompt)

    async def regenerate_recovery_codes(
        self, prompt: PasswordPrompt | None = None
    ) -> GuardResult:
        """Replace the recovery codes and show the new set."""
        self._require("regenerate recovery codes", *ENABLED_PHASES)
        return await self.gate.guard(self._regenerate_recovery_codes, prompt)

    async def show_recovery_codes(
        self, prompt: PasswordPrompt | None = None
    ) -> GuardResult:
        """Fetch and show the current recovery codes."""
        self._require("show recovery codes", *ENABLED_PHASES)
        return await self.gate.guard(self._show_recovery_codes_action, prompt)

    async def perform(
        self,
        action: SettingsAction,
        *,
        code: str | None = None,
        prompt: PasswordPrompt | None = None,
    ) -> GuardResult:
        """Run the operation behind one of the page's buttons."""
        if action is SettingsAction.CONFIRM:
            if code is None:
                msg = "A code is required to confirm two factor authentication"
                raise ValueError(msg)
            return await self.confirm(code, prompt)

        handlers = {
            SettingsAction.ENABLE: self.enable,
            SettingsAction.REGENERATE_RECOVERY_CODES: self.regenerate_recovery_codes,
            SettingsAction.SHOW_RECOVERY_CODES: self.show_recovery_codes,
            SettingsAction.CANCEL: self.cancel,
            SettingsAction.DISABLE: self.disable,
        }
        return await handlers[action](prompt)

    # View

    @property
    def heading(self) -> str:
        if self.state.two_factor_enabled and not self.state.confirming:
            return "You have enabled two factor authentication."
        if self.state.two_factor_enabled:
            return "Finish enabling two factor authentication."
        return "You have not enabled two factor authentication."

    @property
    def description(self) -> str:
        return DESCRIPTION

    @property
    def instructions(self) -> str | None:
        """Text shown above the QR code, if there is one to show."""
        if not (self.state.two_factor_enabled and self.state.qr_code):
            return None
        if self.state.confirming:
            return (
                "To finish enabling two factor authentication, scan the following "
                "QR code using your phone's authenticator application or enter the "
                "setup key and provide the generated OTP code."
            )
        return (
            "Two factor authentication is now enabled. Scan the following QR code "
            "using your phone's authenticator application or enter the setup key."
        )

    @property
    def show_recovery_codes_panel(self) -> bool:
        return (
            self.state.two_factor_enabled
            and bool(self.state.recovery_codes)
            and not self.state.confirming
        )

    @property
    def recovery_codes_note(self) -> str | None:
        return RECOVERY_CODES_NOTE if self.show_recovery_codes_panel else None

    def actions(self) -> list[PageAction]:
        """List the buttons the page offers right now."""
        state = self.state
        if not state.two_factor_enabled:
            return [PageAction(SettingsAction.ENABLE, disabled=state.enabling)]

        if state.confirming:
            return [
                PageAction(
                    SettingsAction.CONFIRM,
                    disabled=state.enabling or state.disabling,
                ),
                PageAction(SettingsAction.CANCEL, disabled=state.disabling),
            ]

        codes_action = (
            SettingsAction.REGENERATE_RECOVERY_CODES
            if state.recovery_codes
            else SettingsAction.SHOW_RECOVERY_CODES
        )
        return [
            PageAction(codes_action, disabled=state.disabling),
            PageAction(SettingsAction.DISABLE, disabled=state.disabling),
        ]

    # Guarded steps

    async def _enable(self) -> None:
        self._require("enable", EnrollmentPhase.DISABLED)
        previous = self.state.phase
        settled = previous
        self.state.notice = None
        self._set_phase(EnrollmentPhase.ENABLING)
        try:
            await self._client.two_factor.enable()
            settled = (
                EnrollmentPhase.ENABLED_UNCONFIRMED
                if self.requires_confirmation
                else EnrollmentPhase.ENABLED_CONFIRMED
            )
            await self._show_enrollment_details()
        except TwoFactorError as e:
            self._surface("enable", e)
            raise
        finally:
            self._set_phase(settled)

    async def _show_enrollment_details(self) -> None:
        """Fetch the QR code, setup key and recovery codes side by side.

        All three are awaited before returning; the first failure is re-raised
        after the others have settled.
        """
        results = await asyncio.gather(
            self._show_qr_code(),
            self._show_setup_key(),
            self._show_recovery_codes(),
            return_exceptions=True,
        )
        for result in results:
            if isinstance(result, BaseException):
                raise result

    async def _show_qr_code(self) -> None:
        qr_code = await self._client.two_factor.qr_code()
        self.state.qr_code = qr_code.svg

    async def _show_setup_key(self) -> None:
        secret_key = await self._client.two_factor.secret_key()
        self.state.setup_key = secret_key.secret_key

    async def _show_recovery_codes(self) -> None:
        self._require(
            "show recovery codes", *ENABLED_PHASES, EnrollmentPhase.ENABLING
        )
        self.state.recovery_codes = await self._client.two_factor.recovery_codes()

    async def _show_recovery_codes_action(self) -> None:
        self.state.notice = None
        try:
            await self._show_recovery_codes()
        except TwoFactorError as e:
            self._surface("show recovery codes", e)
            raise

    async def _confirm(self) -> bool:
        self._require("confirm", EnrollmentPhase.ENABLED_UNCONFIRMED)
        self.state.notice = None
        try:
            await self._client.two_factor.confirm(self.state.code)
        except ValidationError as e:
            self.state.code_error = e.first("code") or e.message
            logger.info("Two factor confirmation code rejected")
            return False
        except TwoFactorError as e:
            self._surface("confirm", e)
            raise

        self._set_phase(EnrollmentPhase.ENABLED_CONFIRMED)
        self.state.qr_code = None
        self.state.setup_key = None
        self.state.code = ""
        self.state.code_error = None
        return True

    async def _disable(self) -> None:
        self._require("disable", *ENABLED_PHASES)
        previous = self.state.phase
        settled = previous
        self.state.notice = None
        self.state.disabling_from = previous
        self._set_phase(EnrollmentPhase.DISABLING)
        try:
            await self._client.two_factor.disable()
            settled = EnrollmentPhase.DISABLED
            self.state.clear_enrollment()
        except TwoFactorError as e:
            self._surface("disable", e)
            raise
        finally:
            self.state.disabling_from = None
            self._set_phase(settled)

    async def _regenerate_recovery_codes(self) -> None:
        self._require("regenerate recovery codes", *ENABLED_PHASES)
        self.state.notice = None
        try:
            await self._client.two_factor.regenerate_recovery_codes()
            await self._show_recovery_codes()
        except TwoFactorError as e:
            self._surface("regenerate recovery codes", e)
            raise

    # Helpers

    def _require(self, action: str, *phases: EnrollmentPhase) -> None:
        if self.state.phase not in phases:
            raise InvalidTransitionError(action, self.state.phase)

    def _set_phase(self, phase: EnrollmentPhase) -> None:
        if phase is not self.state.phase:
            logger.info(
                "Two factor phase %s -> %s", self.state.phase.value, phase.value
            )
        self.state.phase = phase

    def _surface(self, action: str, error: TwoFactorError) -> None:
        if is_transport_error(error):
            self.state.notice = GENERIC_FAILURE_NOTICE
        logger.warning(
            "Could not %s two factor authentication: %s", action, error.message
        )
