"""Two-factor enrollment and login models for twofactor.

Copyright (c) 2025 twofactor contributors. All rights reserved.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class QrCode(BaseModel):
    """QR code response model. ``svg`` is ready-to-embed SVG markup."""

    svg: str


class SecretKey(BaseModel):
    """Setup key response model."""

    model_config = ConfigDict(populate_by_name=True)

    secret_key: str = Field(alias="secretKey")


class ConfirmTwoFactorRequest(BaseModel):
    """Two-factor confirmation request model."""

    code: str


class TwoFactorLoginRequest(BaseModel):
    """Two-factor login request model.

    Exactly one of ``code`` and ``recovery_code`` is set.
    """

    code: str | None = None
    recovery_code: str | None = None

    @model_validator(mode="after")
    def _one_credential(self) -> "TwoFactorLoginRequest":
        if bool(self.code) == bool(self.recovery_code):
            msg = "Provide exactly one of code or recovery_code"
            raise ValueError(msg)
        return self
