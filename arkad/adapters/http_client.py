"""Shared HTTP transport utilities for REST adapters.

This module provides a thin wrapper around ``requests.Session`` so adapter
implementations can share timeout policy, retry behavior, bearer-token header
construction and non-2xx error mapping.

Dependencies:
    - ``requests`` for network I/O.
    - ``arkad.adapters.api_errors`` for typed transport failures.

Call context:
    - Constructed by ``arkad/adapters/leaderboard_rest.py`` and
      ``arkad/adapters/auth_rest.py``.
    - Used only inside adapter layer methods; use cases interact through ports.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests
from requests import exceptions as req_exc

from arkad.adapters.api_errors import ApiClientError, ApiError, ApiServerError, ApiTimeoutError

LOGGER = logging.getLogger(__name__)


@dataclass
class HttpConfig:
    """Timeout and retry configuration for adapter HTTP calls.

    Attributes:
        request_timeout_s: Default timeout in seconds for JSON API calls.
        retries: Number of retry attempts after the initial request.
    """
    request_timeout_s: int = 10
    retries: int = 2


class RetryingSession:
    """Shared requests wrapper with bearer-token headers and retry loops.

    This class is transport-only. Callers provide endpoint URLs and use
    :func:`ensure_ok` to turn non-2xx responses into typed adapter errors.
    """

    def __init__(self, token: Optional[str], cfg: HttpConfig) -> None:
        """Create a retry-enabled session.

        Args:
            token: Bearer token for ``Authorization`` headers, or ``None``.
            cfg: Shared timeout and retry settings.
        """
        self.session = requests.Session()
        self.token = token
        self.cfg = cfg

    def _headers(self, json_body: bool = False) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        if json_body:
            headers["Content-Type"] = "application/json"
        return headers

    def request(
        self,
        method: str,
        url: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json_body: Optional[Dict[str, Any]] = None,
        timeout: Optional[int] = None,
    ) -> requests.Response:
        """Send one request with retries on timeout/connectivity failures.

        Args:
            method: HTTP verb (``GET``, ``PUT``, ``POST``).
            url: Absolute endpoint URL.
            params: Optional query parameter mapping.
            json_body: Optional payload object serialized to JSON text.
            timeout: Optional timeout override in seconds.

        Returns:
            ``requests.Response`` from the first attempt that reached the server.

        Raises:
            ApiTimeoutError: If all attempts fail with timeout/connection errors.
        """
        context = f"{method} {url}"
        data = None if json_body is None else json.dumps(json_body)
        attempts = self.cfg.retries + 1
        for attempt in range(1, attempts + 1):
            try:
                return self.session.request(
                    method,
                    url,
                    params=params,
                    data=data,
                    headers=self._headers(json_body=json_body is not None),
                    timeout=timeout or self.cfg.request_timeout_s,
                )
            except (req_exc.Timeout, req_exc.ConnectionError) as exc:
                LOGGER.debug("%s: attempt %d/%d failed: %s", context, attempt, attempts, exc)
        raise ApiTimeoutError(f"{context}: no response after {attempts} attempt(s)")

    def get(self, url: str, *, params: Optional[Dict[str, Any]] = None) -> requests.Response:
        return self.request("GET", url, params=params)

    def put(self, url: str, *, json_body: Optional[Dict[str, Any]] = None) -> requests.Response:
        return self.request("PUT", url, json_body=json_body)

    def post(self, url: str, *, json_body: Optional[Dict[str, Any]] = None) -> requests.Response:
        return self.request("POST", url, json_body=json_body)


def make_url(base_url: str, path: str) -> str:
    """Join a base URL and an absolute endpoint path."""
    base = str(base_url or "").strip()
    if not base:
        raise ValueError("No base URL configured")
    return f"{base.rstrip('/')}{path}"


def ensure_ok(resp: requests.Response, ctx: str) -> None:
    """Raise typed adapter errors for non-2xx responses.

    The API answers errors as ``{"detail": ..., "hint": ...}``; some proxies
    send ``{"message": ...}`` or plain text instead.
    """
    status = resp.status_code
    if 200 <= status < 300:
        return
    payload = _error_payload(resp)
    detail = _error_field(payload, "detail", "message")
    message = f"{ctx}: {detail} (HTTP {status})" if detail else f"{ctx}: HTTP {status}"
    if 400 <= status < 500:
        raise ApiClientError(message, status=status, hint=_error_field(payload, "hint"), payload=payload)
    if 500 <= status < 600:
        raise ApiServerError(message, status=status, payload=payload)
    raise ApiError(message, status=status, payload=payload)


def has_body(resp: requests.Response) -> bool:
    return resp.status_code != 204 and bool((getattr(resp, "text", "") or "").strip())


def json_payload(resp: requests.Response) -> Any:
    """Parse response JSON or raise ``ApiError`` with a body snippet."""
    try:
        return resp.json()
    except ValueError as exc:
        snippet = (getattr(resp, "text", "") or "")[:200]
        raise ApiError(f"Invalid JSON response: {snippet}", status=resp.status_code) from exc


def _error_payload(resp: requests.Response) -> Any:
    try:
        return resp.json()
    except ValueError:
        text = (getattr(resp, "text", "") or "").strip()
        return text[:200] or None


def _error_field(payload: Any, *keys: str) -> Optional[str]:
    if isinstance(payload, str):
        # plain-text bodies only ever carry the detail
        return payload if "detail" in keys else None
    if not isinstance(payload, dict):
        return None
    for key in keys:
        value = payload.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


__all__ = ["HttpConfig", "RetryingSession", "ensure_ok", "has_body", "json_payload", "make_url"]
