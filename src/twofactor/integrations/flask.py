"""Flask integration for the two-factor pages."""

from __future__ import annotations

import functools
from typing import Any, Callable, Optional

from flask import Blueprint, g, jsonify, request

from ..controllers import two_factor_challenge, two_factor_settings
from ..features import Features


def get_current_user() -> Optional[Any]:
    """Get the current authenticated user from Flask's g object."""
    return getattr(g, "current_user", None)


def login_required(f: Callable) -> Callable:
    """Decorator to require an authenticated user."""

    @functools.wraps(f)
    def decorated_function(*args: Any, **kwargs: Any) -> Any:
        if get_current_user() is None:
            return jsonify({"message": "Unauthenticated."}), 401
        return f(*args, **kwargs)

    return decorated_function


class TwoFactorFlask:
    """Serves the two-factor page payloads from a Flask application."""

    def __init__(self, features: Features):
        self.features = features

    def blueprint(self, name: str = "two_factor", url_prefix: str = "") -> Blueprint:
        """Build the blueprint with the settings and challenge pages."""
        bp = Blueprint(name, __name__, url_prefix=url_prefix or None)
        features = self.features

        @bp.get("/settings/two-factor")
        @login_required
        def two_factor_settings_page():
            return jsonify(two_factor_settings(features).to_dict(url=request.path))

        @bp.get("/two-factor-challenge")
        def two_factor_challenge_page():
            recovery = request.args.get("recovery", "").lower() in ("1", "true", "yes")
            page = two_factor_challenge(
                status=request.args.get("status"), recovery=recovery
            )
            return jsonify(page.to_dict(url=request.path))

        return bp


def create_two_factor_blueprint(
    features: Features, name: str = "two_factor", url_prefix: str = ""
) -> Blueprint:
    """Convenience function for building the two-factor blueprint."""
    return TwoFactorFlask(features).blueprint(name, url_prefix)
