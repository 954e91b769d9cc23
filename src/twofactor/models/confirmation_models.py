"""Password confirmation models for twofactor.

Copyright (c) 2025 twofactor contributors. All rights reserved.
"""

from pydantic import BaseModel


class PasswordConfirmationStatus(BaseModel):
    """Password confirmation status response model."""

    confirmed: bool


class ConfirmPasswordRequest(BaseModel):
    """Password confirmation request model."""

    password: str
