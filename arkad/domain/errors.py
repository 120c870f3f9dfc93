"""Domain-level error types for use-case and adapter mapping.

These errors cross layer boundaries without leaking transport-specific
exception details.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class AuthError(Exception):
    """Failure reported by the auth/profile service."""

    USER_NOT_FOUND = "USER_NOT_FOUND"
    INVALID_INPUT = "INVALID_INPUT"
    USERNAME_TAKEN = "USERNAME_TAKEN"
    AUTH_FAILED = "AUTH_FAILED"
    NETWORK = "NETWORK"

    _MESSAGES = {
        USER_NOT_FOUND: "User not found",
        INVALID_INPUT: "Invalid input provided",
        USERNAME_TAKEN: "Username is already taken",
        AUTH_FAILED: "Authentication failed",
        NETWORK: "Network error, try again",
    }

    def __init__(self, code: str, message: Optional[str] = None) -> None:
        text = message or self._MESSAGES.get(code, "Authentication error")
        super().__init__(text)
        self.code = code
        self.message = text


class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str, meta: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.meta = meta or {}


__all__ = ["AuthError", "UseCaseError"]
