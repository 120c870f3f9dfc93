"""REST adapter implementing the auth/profile port.

The adapter keeps the signed-in user cached so ``current_user`` stays a
synchronous read; ``load_session`` refreshes the cache from ``/users/me``.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Optional

from arkad.adapters.api_errors import ApiClientError, ApiError, ApiServerError, ApiTimeoutError
from arkad.adapters.http_client import HttpConfig, RetryingSession, ensure_ok, has_body, json_payload, make_url
from arkad.domain.errors import AuthError
from arkad.domain.models import UserProfile
from arkad.domain.ports import AuthPort

LOGGER = logging.getLogger(__name__)


class AuthRestAdapter(AuthPort):
    """HTTP adapter for ``/users/me`` and ``/auth/logout``."""

    def __init__(
        self,
        base_url: str,
        *,
        token: Optional[str] = None,
        request_timeout_s: int = 10,
        retries: int = 2,
    ) -> None:
        if not str(base_url or "").strip():
            raise ValueError("AuthRestAdapter requires a base URL")
        self.base_url = str(base_url).strip()
        self.cfg = HttpConfig(request_timeout_s=request_timeout_s, retries=retries)
        self.session = RetryingSession(token, self.cfg)
        self._user: Optional[UserProfile] = None

    # ---------- AuthPort ----------

    async def load_session(self) -> Optional[UserProfile]:
        return await asyncio.to_thread(self.load_session_blocking)

    def current_user(self) -> Optional[UserProfile]:
        return self._user

    async def update_profile(self, full_name: str, bio: Optional[str]) -> None:
        await asyncio.to_thread(self._update_profile_blocking, full_name, bio)

    async def logout(self) -> None:
        await asyncio.to_thread(self._logout_blocking)

    # ---------- Session ----------

    def load_session_blocking(self) -> Optional[UserProfile]:
        """Fetch the signed-in user; a 401 or a missing token clears the cached session."""
        if not self.session.token:
            self._user = None
            return None
        try:
            resp = self.session.get(make_url(self.base_url, "/users/me"))
            if resp.status_code == 401:
                self._user = None
                return None
            ensure_ok(resp, "load_session")
            self._user = UserProfile.from_payload(self._json_dict(resp))
        except ApiError as exc:
            raise self._to_auth_error(exc) from exc
        return self._user

    # ------------------------------------------------------------------
    def _update_profile_blocking(self, full_name: str, bio: Optional[str]) -> None:
        if self._user is None:
            raise AuthError(AuthError.USER_NOT_FOUND)
        body: Dict[str, Any] = {"fullName": full_name}
        if bio is not None:
            body["bio"] = bio
        try:
            resp = self.session.put(make_url(self.base_url, "/users/me"), json_body=body)
            ensure_ok(resp, "update_profile")
            if has_body(resp):
                self._user = UserProfile.from_payload(self._json_dict(resp))
                return
        except ApiError as exc:
            raise self._to_auth_error(exc) from exc
        # 204 / empty body: the server accepted the edit without echoing it.
        LOGGER.debug("update_profile returned no body; re-reading /users/me")
        if self.load_session_blocking() is None:
            raise AuthError(AuthError.AUTH_FAILED)

    def _logout_blocking(self) -> None:
        try:
            resp = self.session.post(make_url(self.base_url, "/auth/logout"))
            ensure_ok(resp, "logout")
        except ApiError as exc:
            # The local session is dropped even when the server call fails.
            LOGGER.warning("Logout request failed: %s", exc)
        self._user = None
        self.session.token = None

    @staticmethod
    def _json_dict(resp: Any) -> Dict[str, Any]:
        payload = json_payload(resp)
        if not isinstance(payload, dict):
            raise ApiError("Invalid JSON response shape: expected object")
        return dict(payload)

    @staticmethod
    def _to_auth_error(exc: ApiError) -> AuthError:
        if isinstance(exc, ApiTimeoutError):
            return AuthError(AuthError.NETWORK)
        if isinstance(exc, ApiClientError):
            if exc.status in (401, 403):
                return AuthError(AuthError.AUTH_FAILED)
            if exc.status == 404:
                return AuthError(AuthError.USER_NOT_FOUND)
            if exc.status == 409:
                return AuthError(AuthError.USERNAME_TAKEN)
            if exc.status in (400, 422):
                return AuthError(AuthError.INVALID_INPUT, exc.hint or None)
        if isinstance(exc, ApiServerError):
            return AuthError(AuthError.NETWORK, "Auth service error, try again.")
        return AuthError(AuthError.AUTH_FAILED, str(exc))


__all__ = ["AuthRestAdapter"]
