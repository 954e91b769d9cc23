"""Page render payload models for twofactor.

Copyright (c) 2025 twofactor contributors. All rights reserved.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SettingsPageProps(BaseModel):
    """Props handed to the two-factor settings page."""

    model_config = ConfigDict(populate_by_name=True)

    requires_confirmation: bool = Field(alias="requiresConfirmation")


class ChallengePageProps(BaseModel):
    """Props handed to the two-factor challenge page."""

    status: str | None = None
    recovery: bool = False


class PageResponse(BaseModel):
    """A rendering instruction: which page component to show, with which props."""

    component: str
    props: dict[str, Any]

    def to_dict(self, url: str | None = None) -> dict[str, Any]:
        """Return the page object sent to the frontend."""
        page: dict[str, Any] = {"component": self.component, "props": self.props}
        if url is not None:
            page["url"] = url
        return page
