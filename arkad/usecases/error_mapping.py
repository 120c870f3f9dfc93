"""Translate adapter and auth errors into user-facing UseCaseError instances."""

from __future__ import annotations

from typing import Optional

from arkad.adapters.api_errors import ApiClientError, ApiError, ApiServerError, ApiTimeoutError
from arkad.domain.errors import AuthError, UseCaseError


def map_api_error(
    exc: Exception,
    *,
    default_code: str,
    default_message: Optional[str] = None,
) -> UseCaseError:
    """Map adapter exceptions to stable UseCaseError codes.

    Args:
        exc: Exception raised by a port call.
        default_code: Code used when ``exc`` is not a known adapter error.
        default_message: Message used when ``exc`` carries no text.

    Returns:
        UseCaseError: Error with a stable code and a user-presentable message.
    """
    if isinstance(exc, UseCaseError):
        return exc
    if isinstance(exc, AuthError):
        return UseCaseError(exc.code, exc.message)
    if isinstance(exc, ApiTimeoutError):
        return UseCaseError("REQUEST_TIMEOUT", "Request timed out. Check connection.")
    if isinstance(exc, ApiClientError):
        status = exc.status or 0
        hint = exc.hint
        if status == 422:
            return UseCaseError("INVALID_PARAMS", _compose_error_message("Invalid parameters", hint))
        if status in (401, 403):
            return UseCaseError("AUTH_FAILED", "Session expired. Please sign in again.")
        label = f"Request failed (HTTP {status})" if status else "Request failed"
        return UseCaseError("REQUEST_FAILED", _compose_error_message(label, hint))
    if isinstance(exc, ApiServerError):
        return UseCaseError("SERVER_ERROR", "Server error, try again.")
    if isinstance(exc, ApiError):
        return UseCaseError("API_ERROR", str(exc))

    message = default_message or str(exc) or "Unexpected error."
    return UseCaseError(default_code, message)


def _compose_error_message(base: str, hint: Optional[str]) -> str:
    hint_text = (hint or "").strip()
    if hint_text:
        return f"{base}: {hint_text}"
    if base.endswith("."):
        return base
    return f"{base}."


__all__ = ["map_api_error"]
