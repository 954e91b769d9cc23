"""
Exception classes for the twofactor client.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "TwoFactorError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "PasswordConfirmationRequiredError",
    "RateLimitError",
    "ServerError",
    "NetworkError",
    "TimeoutError",
    "SubmissionInProgressError",
    "InvalidTransitionError",
    "create_error_from_response",
    "is_transport_error",
]


class TwoFactorError(Exception):
    """Base exception for twofactor client errors."""

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        details: Any | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details
        self.status_code = status_code


class ValidationError(TwoFactorError):
    """Raised when the server rejects submitted fields (HTTP 422)."""

    def __init__(
        self,
        message: str = "The given data was invalid.",
        errors: dict[str, list[str]] | None = None,
    ) -> None:
        super().__init__(message, "VALIDATION_ERROR", errors, 422)
        self.errors: dict[str, list[str]] = errors or {}

    def first(self, field: str) -> str | None:
        """Return the first message reported for ``field``, if any."""
        messages = self.errors.get(field) or []
        return messages[0] if messages else None


class AuthenticationError(TwoFactorError):
    """Raised when the session is not authenticated."""

    def __init__(
        self, message: str = "Unauthenticated.", details: Any | None = None
    ) -> None:
        super().__init__(message, "AUTHENTICATION_ERROR", details, 401)


class AuthorizationError(TwoFactorError):
    """Raised when the action is forbidden."""

    def __init__(
        self, message: str = "This action is unauthorized.", details: Any | None = None
    ) -> None:
        super().__init__(message, "AUTHORIZATION_ERROR", details, 403)


class NotFoundError(TwoFactorError):
    """Raised when an endpoint or resource is not found."""

    def __init__(
        self, message: str = "Not found.", details: Any | None = None
    ) -> None:
        super().__init__(message, "NOT_FOUND_ERROR", details, 404)


class PasswordConfirmationRequiredError(TwoFactorError):
    """Raised when the server wants a fresh password confirmation (HTTP 423)."""

    def __init__(
        self,
        message: str = "Password confirmation required.",
        details: Any | None = None,
    ) -> None:
        super().__init__(message, "PASSWORD_CONFIRMATION_REQUIRED", details, 423)


class RateLimitError(TwoFactorError):
    """Raised when the server throttles the request."""

    def __init__(
        self,
        message: str = "Too Many Attempts.",
        retry_after: int | None = None,
        details: Any | None = None,
    ) -> None:
        super().__init__(message, "RATE_LIMIT_ERROR", details, 429)
        self.retry_after = retry_after


class ServerError(TwoFactorError):
    """Raised when a server error occurs."""

    def __init__(
        self,
        message: str = "Server Error",
        details: Any | None = None,
        status_code: int = 500,
    ) -> None:
        super().__init__(message, "SERVER_ERROR", details, status_code)


class NetworkError(TwoFactorError):
    """Raised when a network error occurs."""

    def __init__(
        self, message: str = "Network error", details: Any | None = None
    ) -> None:
        super().__init__(message, "NETWORK_ERROR", details)


class TimeoutError(TwoFactorError):  # noqa: A001
    """Raised when a request times out."""

    def __init__(
        self, message: str = "Request timeout", details: Any | None = None
    ) -> None:
        super().__init__(message, "TIMEOUT_ERROR", details)


class SubmissionInProgressError(TwoFactorError):
    """Raised when a form is submitted again while a submit is still pending."""

    def __init__(self, message: str = "A submission is already in progress") -> None:
        super().__init__(message, "SUBMISSION_IN_PROGRESS")


class InvalidTransitionError(TwoFactorError):
    """Raised when an enrollment action is not available in the current phase."""

    def __init__(self, action: str, phase: Any) -> None:
        phase_name = getattr(phase, "value", phase)
        super().__init__(
            f"Cannot {action} while two factor authentication is {phase_name}",
            "INVALID_TRANSITION",
            {"action": action, "phase": phase_name},
        )
        self.action = action
        self.phase = phase


def create_error_from_response(
    status_code: int,
    error_response: dict[str, Any] | None = None,
    default_message: str | None = None,
    retry_after: int | None = None,
) -> TwoFactorError:
    """Create an appropriate error instance from an HTTP status and JSON body.

    The body is the framework's error shape: ``{"message": ..., "errors":
    {field: [messages]}}``. Missing keys fall back to defaults.
    """
    body = error_response or {}
    message = body.get("message") or default_message
    message_str = str(message) if message else None
    errors = body.get("errors")
    if not isinstance(errors, dict):
        errors = None

    if status_code == 422:
        return ValidationError(message_str or "The given data was invalid.", errors)
    if status_code == 401:
        return AuthenticationError(message_str or "Unauthenticated.", errors)
    if status_code == 403:
        return AuthorizationError(message_str or "This action is unauthorized.", errors)
    if status_code == 404:
        return NotFoundError(message_str or "Not found.", errors)
    if status_code == 423:
        return PasswordConfirmationRequiredError(
            message_str or "Password confirmation required.", errors
        )
    if status_code == 429:
        return RateLimitError(message_str or "Too Many Attempts.", retry_after, errors)
    if status_code >= 500:
        return ServerError(message_str or "Server Error", errors, status_code)
    return TwoFactorError(
        message_str or "An error occurred", "UNKNOWN_ERROR", errors, status_code
    )


def is_transport_error(error: BaseException) -> bool:
    """Check if an error is a transport failure (network, timeout or 5xx)."""
    if isinstance(error, (NetworkError, TimeoutError)):
        return True

    if isinstance(error, TwoFactorError) and error.status_code:
        return error.status_code >= 500

    return False
