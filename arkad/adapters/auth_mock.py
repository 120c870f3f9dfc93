from __future__ import annotations

import asyncio
import logging
from typing import Optional

from arkad.domain.errors import AuthError
from arkad.domain.models import UserProfile
from arkad.domain.ports import AuthPort

LOGGER = logging.getLogger(__name__)


class AuthMock(AuthPort):
    """In-memory auth session used for tests and offline development."""

    def __init__(self, user: Optional[UserProfile] = None, *, latency_s: float = 0.0) -> None:
        self._user = user
        self.latency_s = latency_s
        self.fail_with: Optional[AuthError] = None
        self.load_calls = 0
        self.update_calls = 0
        self.logout_calls = 0

    # ---------- AuthPort ----------

    async def load_session(self) -> Optional[UserProfile]:
        # The in-memory session is already authoritative.
        self.load_calls += 1
        await self._delay()
        return self._user

    def current_user(self) -> Optional[UserProfile]:
        return self._user

    async def update_profile(self, full_name: str, bio: Optional[str]) -> None:
        self.update_calls += 1
        await self._delay()
        if self.fail_with is not None:
            raise self.fail_with
        if self._user is None:
            raise AuthError(AuthError.USER_NOT_FOUND)
        self._user = self._user.with_profile_fields(full_name, bio)

    async def logout(self) -> None:
        self.logout_calls += 1
        await self._delay()
        LOGGER.debug("Mock session cleared for %s", self._user.username if self._user else "-")
        self._user = None

    # ---------- Test helpers ----------

    def sign_in(self, user: UserProfile) -> None:
        self._user = user

    async def _delay(self) -> None:
        if self.latency_s > 0:
            await asyncio.sleep(self.latency_s)
