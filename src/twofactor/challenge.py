"""Two-factor login challenge form.

Copyright (c) 2025 twofactor contributors. All rights reserved.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from .exceptions import (
    SubmissionInProgressError,
    TwoFactorError,
    ValidationError,
    is_transport_error,
)
from .gate import GENERIC_FAILURE_NOTICE
from .models import ChallengeFormState, ChallengePageProps

if TYPE_CHECKING:
    from .client import TwoFactorClient

logger = logging.getLogger(__name__)

CODE_LENGTH = 6
_DIGITS = re.compile(r"^\d*$")


class ChallengeForm:
    """Second step of a login: an authenticator code or a recovery code."""

    def __init__(
        self,
        client: TwoFactorClient,
        *,
        status: str | None = None,
        recovery: bool = False,
    ) -> None:
        self._client = client
        self.state = ChallengeFormState(status=status, recovery=recovery)

    @classmethod
    def from_page(
        cls, client: TwoFactorClient, props: ChallengePageProps
    ) -> ChallengeForm:
        return cls(client, status=props.status, recovery=props.recovery)

    @property
    def title(self) -> str:
        return "Confirm your code before log in"

    @property
    def description(self) -> str:
        if self.state.recovery:
            return (
                "Please confirm access to your account by entering one of your "
                "emergency recovery codes."
            )
        return (
            "Please confirm access to your account by entering the authentication "
            "code provided by your authenticator application."
        )

    @property
    def toggle_label(self) -> str:
        if self.state.recovery:
            return "Use an authentication code"
        return "Use a recovery code"

    def set_recovery(self, recovery: bool) -> None:
        """Switch mode; the field that is no longer active is emptied."""
        self.state.recovery = recovery
        if recovery:
            self.state.code = ""
        else:
            self.state.recovery_code = ""

    def toggle_recovery(self) -> None:
        self.set_recovery(not self.state.recovery)

    def set_code(self, value: str) -> None:
        """Set the authenticator code.

        Raises:
            ValueError: If the value is not made of at most six digits.

        """
        if len(value) > CODE_LENGTH or not _DIGITS.match(value):
            msg = f"The code must be at most {CODE_LENGTH} digits"
            raise ValueError(msg)
        self.state.code = value

    def set_recovery_code(self, value: str) -> None:
        self.state.recovery_code = value

    async def submit(self) -> bool:
        """Post the active field to the login verification endpoint.

        Both fields are cleared once the request settles, whatever the outcome.

        Returns:
            True when the server accepted the code, False on a validation error
            (messages are in ``state.errors``).

        Raises:
            SubmissionInProgressError: If a submission is already pending.

        """
        if self.state.processing:
            raise SubmissionInProgressError()

        field = "recovery_code" if self.state.recovery else "code"
        if not getattr(self.state, field):
            label = field.replace("_", " ")
            self.state.errors = {field: f"The {label} field is required."}
            return False

        self.state.processing = True
        self.state.errors = {}
        self.state.notice = None
        try:
            if self.state.recovery:
                await self._client.login.verify(recovery_code=self.state.recovery_code)
            else:
                await self._client.login.verify(code=self.state.code)
        except ValidationError as e:
            self.state.errors = {
                field: messages[0] for field, messages in e.errors.items() if messages
            }
            if not self.state.errors:
                self.state.errors[field] = e.message
            logger.info("Two factor challenge rejected")
            return False
        except TwoFactorError as e:
            if is_transport_error(e):
                self.state.notice = GENERIC_FAILURE_NOTICE
            logger.warning("Two factor challenge failed: %s", e.message)
            raise
        finally:
            self.state.processing = False
            self.state.code = ""
            self.state.recovery_code = ""

        return True
