"""FastAPI integration for the two-factor pages."""

from __future__ import annotations

from typing import Any, Callable

from fastapi import APIRouter, Depends, HTTPException, Request, status

from ..controllers import two_factor_challenge, two_factor_settings
from ..features import Features


def session_user(request: Request) -> Any:
    """Return the user the authentication middleware put on ``request.state``."""
    user = getattr(request.state, "user", None)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthenticated.",
        )
    return user


class TwoFactorFastAPI:
    """Serves the two-factor page payloads from a FastAPI application."""

    def __init__(
        self,
        features: Features,
        current_user: Callable[..., Any] | None = None,
    ):
        self.features = features
        self.current_user = current_user or session_user

    def router(self, prefix: str = "") -> APIRouter:
        """Build the router with the settings and challenge pages."""
        router = APIRouter(prefix=prefix, tags=["two-factor"])
        features = self.features

        @router.get("/settings/two-factor")
        async def two_factor_settings_page(
            request: Request,
            user: Any = Depends(self.current_user),
        ) -> dict[str, Any]:
            return two_factor_settings(features).to_dict(url=request.url.path)

        @router.get("/two-factor-challenge")
        async def two_factor_challenge_page(
            request: Request,
            recovery: bool = False,
            status: str | None = None,
        ) -> dict[str, Any]:
            page = two_factor_challenge(status=status, recovery=recovery)
            return page.to_dict(url=request.url.path)

        return router


def create_two_factor_router(
    features: Features,
    current_user: Callable[..., Any] | None = None,
    prefix: str = "",
) -> APIRouter:
    """Convenience function for building the two-factor router."""
    return TwoFactorFastAPI(features, current_user).router(prefix)
