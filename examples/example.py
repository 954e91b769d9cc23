"""Example usage of the twofactor package.

Walks through the settings page from a terminal: confirm the password when
asked, enable two-factor authentication, confirm it with a code from the
authenticator app and print the recovery codes.
"""
# Copyright (c) 2025 twofactor contributors. All rights reserved.

import asyncio
import getpass
import logging
import sys

from twofactor import (
    ChallengeForm,
    ClientSettings,
    EnrollmentPhase,
    TwoFactorClient,
    TwoFactorSettings,
)
from twofactor.exceptions import AuthenticationError, TwoFactorError

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def ask_password(state) -> str | None:
    """Password prompt for the confirmation gate; empty input cancels."""
    if state.error:
        logger.warning(state.error)
    password = getpass.getpass(f"{state.content}\nPassword: ")
    return password or None


async def main() -> None:
    """Execute main example function."""
    settings = ClientSettings.from_env()

    async with TwoFactorClient.from_settings(settings) as client:
        page = TwoFactorSettings(
            client,
            requires_confirmation=True,
            two_factor_enabled=False,
        )
        logger.info(page.heading)

        try:
            result = await page.enable(prompt=ask_password)
            if not result.invoked:
                logger.info("Cancelled")
                return

            logger.info(page.instructions)
            logger.info("Setup key: %s", page.state.setup_key)

            while page.phase is EnrollmentPhase.ENABLED_UNCONFIRMED:
                code = input("Code from your authenticator app: ").strip()
                confirmed = await page.confirm(code, prompt=ask_password)
                if confirmed.value is False:
                    logger.warning(page.state.code_error)

            logger.info(page.heading)
            logger.info(page.recovery_codes_note)
            for recovery_code in page.state.recovery_codes:
                logger.info("  %s", recovery_code)

        except AuthenticationError:
            logger.exception("Sign in first; the session is not authenticated")
        except TwoFactorError as e:
            logger.exception("API error: %s (Status: %s)", e.message, e.status_code)


async def challenge_example() -> None:
    """Answer a pending login challenge with an authenticator code."""
    async with TwoFactorClient.from_settings(ClientSettings.from_env()) as client:
        form = ChallengeForm(client)
        logger.info(form.description)
        form.set_code(input("Code: ").strip())

        if await form.submit():
            logger.info("Signed in")
        else:
            for field, message in form.state.errors.items():
                logger.warning("%s: %s", field, message)


if __name__ == "__main__":
    if sys.argv[1:] == ["challenge"]:
        asyncio.run(challenge_example())
    else:
        asyncio.run(main())
