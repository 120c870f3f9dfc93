"""Typed failures raised by the REST adapters.

``http_client.ensure_ok`` picks the subclass from the HTTP status. Use cases
translate these into ``UseCaseError`` via ``usecases.error_mapping``; the auth
adapter turns them into ``AuthError`` codes itself.
"""

from __future__ import annotations

from typing import Any, Optional


class ApiError(RuntimeError):
    """Request reached no usable answer from the Arkad API."""

    def __init__(
        self,
        message: str,
        *,
        status: Optional[int] = None,
        hint: Optional[str] = None,
        payload: Any = None,
    ) -> None:
        super().__init__(message)
        self.status = status
        self.hint = hint
        self.payload = payload


class ApiClientError(ApiError):
    """4xx: the request was rejected; ``hint`` carries the server's explanation."""


class ApiServerError(ApiError):
    """5xx from the Arkad API."""


class ApiTimeoutError(ApiError):
    """Every attempt timed out or could not connect."""


__all__ = ["ApiClientError", "ApiError", "ApiServerError", "ApiTimeoutError"]
