"""Password confirmation gate.

Sensitive two-factor actions must only run after the user has confirmed their
password recently. The gate asks the server whether the last confirmation is
still fresh; if it is not, the password dialog opens and the action waits
until a password has been accepted.

Two ways to drive it:

* step by step: ``await gate.guard(action)`` runs the action straight away or
  returns with the dialog open; a later ``await gate.submit(password)`` runs
  the parked action once the password is accepted;
* in one call: ``await gate.guard(action, prompt=ask)`` where ``ask(state)``
  returns the password (or ``None`` to give up) and is asked again after each
  rejected attempt.

Copyright (c) 2025 twofactor contributors. All rights reserved.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable
from enum import Enum
from typing import TYPE_CHECKING, Any, NamedTuple

from .exceptions import (
    SubmissionInProgressError,
    TwoFactorError,
    ValidationError,
    is_transport_error,
)
from .models import ConfirmDialogState

if TYPE_CHECKING:
    from .client import TwoFactorClient

logger = logging.getLogger(__name__)

GENERIC_FAILURE_NOTICE = "Something went wrong. Please try again."

Action = Callable[[], Awaitable[Any]]
PasswordPrompt = Callable[[ConfirmDialogState], Awaitable[str | None] | str | None]


class GateDecision(str, Enum):
    """Outcome of the freshness check."""

    CONFIRMED = "confirmed"
    PASSWORD_REQUIRED = "password-required"


class ConfirmationResult(NamedTuple):
    """Outcome of a password submission."""

    confirmed: bool
    error: str | None = None
    value: Any = None


class GuardResult(NamedTuple):
    """Outcome of a guarded action.

    ``invoked`` tells whether the action ran; ``value`` is what it returned.
    """

    invoked: bool
    decision: GateDecision
    value: Any = None


class PasswordConfirmationGate:
    """Runs actions only once the user's password confirmation is fresh."""

    def __init__(
        self,
        client: TwoFactorClient,
        *,
        title: str | None = None,
        content: str | None = None,
        button: str | None = None,
    ) -> None:
        self._client = client
        labels = {"title": title, "content": content, "button": button}
        labels = {key: value for key, value in labels.items() if value is not None}
        self.state = ConfirmDialogState(**labels)
        self._pending: Action | None = None

    @property
    def has_pending_action(self) -> bool:
        return self._pending is not None

    async def check(self) -> GateDecision:
        """Ask the server whether the password confirmation is still fresh.

        Opens the dialog when it is not.
        """
        try:
            status = await self._client.password.status()
        except TwoFactorError as e:
            self._surface(e)
            raise

        if status.confirmed:
            return GateDecision.CONFIRMED

        self.state.open = True
        self.state.focus_password = True
        return GateDecision.PASSWORD_REQUIRED

    async def submit(self, password: str | None = None) -> ConfirmationResult:
        """Send the dialog's password for confirmation.

        On success the dialog closes and the parked action, if any, runs. On a
        validation failure the first password message is kept for display and
        the dialog stays open.

        Raises:
            SubmissionInProgressError: If a submission is already pending.

        """
        if self.state.submitting:
            raise SubmissionInProgressError()

        if password is not None:
            self.state.password = password
        self.state.submitting = True
        self.state.focus_password = False
        self.state.notice = None

        try:
            await self._client.password.confirm(self.state.password)
        except ValidationError as e:
            self.state.error = e.first("password") or e.message
            self.state.focus_password = True
            logger.info("Password confirmation rejected")
            return ConfirmationResult(confirmed=False, error=self.state.error)
        except TwoFactorError as e:
            self._surface(e)
            raise
        finally:
            self.state.submitting = False

        action = self._pending
        self.close()
        value = await action() if action is not None else None
        return ConfirmationResult(confirmed=True, value=value)

    def close(self) -> None:
        """Close the dialog and drop the parked action."""
        self._pending = None
        self.state.reset()

    async def guard(
        self,
        action: Action,
        prompt: PasswordPrompt | None = None,
    ) -> GuardResult:
        """Run ``action`` behind a password confirmation.

        Args:
            action: Coroutine function to run once confirmation is fresh
            prompt: Optional password source; called with the dialog state,
                returns the password or ``None`` to cancel

        Returns:
            Whether the action ran, the freshness decision, and its return value.

        Raises:
            SubmissionInProgressError: If another action is already waiting
                on the open dialog.

        """
        if self.state.open and self._pending is not None:
            msg = "Another action is waiting for password confirmation"
            raise SubmissionInProgressError(msg)

        decision = await self.check()
        if decision is GateDecision.CONFIRMED:
            return GuardResult(True, decision, await action())

        self._pending = action
        if prompt is None:
            return GuardResult(False, decision)

        while self.state.open:
            password = prompt(self.state)
            if inspect.isawaitable(password):
                password = await password
            if password is None:
                self.close()
                break

            result = await self.submit(password)
            if result.confirmed:
                return GuardResult(True, decision, result.value)

        return GuardResult(False, decision)

    def _surface(self, error: TwoFactorError) -> None:
        if is_transport_error(error):
            self.state.notice = GENERIC_FAILURE_NOTICE
        logger.warning("Password confirmation request failed: %s", error.message)
