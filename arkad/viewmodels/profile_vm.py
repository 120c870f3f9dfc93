"""Profile screen state mirroring the signed-in user.

Call context:
    ``AppController.build_profile_vm`` injects the load/update/logout use
    cases. ``update_profile`` and ``logout`` never raise into the view:
    failures are logged and published through ``ViewState.error``.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Optional

from arkad.domain.models import UserProfile
from .formatting import as_compact_currency, as_percentage
from .view_state import StateObserver, ViewStateController

LoadProfileFn = Callable[[], Awaitable[Optional[UserProfile]]]
UpdateProfileFn = Callable[[str, Optional[str]], Awaitable[Optional[UserProfile]]]
LogoutFn = Callable[[], Awaitable[None]]

LOGGER = logging.getLogger(__name__)


class ProfileVM(ViewStateController[Optional[UserProfile], None]):
    """Owns the optional user profile and forwards edits to the auth service."""

    def __init__(
        self,
        *,
        load_profile: LoadProfileFn,
        update_profile: UpdateProfileFn,
        logout: LogoutFn,
        on_state_changed: Optional[StateObserver] = None,
    ) -> None:
        super().__init__(initial_data=None, on_state_changed=on_state_changed)
        self._load_profile = load_profile
        self._update_profile = update_profile
        self._logout = logout
        self.show_edit_profile = False

    @property
    def user(self) -> Optional[UserProfile]:
        return self.state.data

    def summary(self) -> Optional[str]:
        """One-line header for the profile card, ``None`` when signed out."""
        user = self.state.data
        if user is None:
            return None
        return (
            f"{user.full_name} (@{user.username}) - P/L {as_compact_currency(user.total_profit_loss)}, "
            f"win rate {as_percentage(user.win_rate)}, {user.followers_count} followers"
        )

    def open_edit_profile(self) -> None:
        self.show_edit_profile = True

    def close_edit_profile(self) -> None:
        self.show_edit_profile = False

    def update_profile(self, full_name: str, bio: Optional[str]) -> "asyncio.Task[bool]":
        """Push an edit; the task resolves to ``True`` when the update succeeded.

        ``loading`` is left untouched for this command.
        """
        self._bind_loop()
        return self._spawn(self._run_update(full_name, bio))

    def logout(self) -> "asyncio.Task[bool]":
        """Sign out through the auth service; local state is re-read on the next ``initialize``."""
        self._bind_loop()
        return self._spawn(self._run_logout())

    # ------------------------------------------------------------------
    async def _fetch(self, selection: None) -> Optional[UserProfile]:
        return await self._load_profile()

    async def _run_update(self, full_name: str, bio: Optional[str]) -> bool:
        try:
            profile = await self._update_profile(full_name, bio)
        except Exception as exc:
            LOGGER.warning("Profile update failed: %s", exc)
            self._apply(error=self.error_message(exc))
            return False
        self._apply(data=profile, error=None)
        self.show_edit_profile = False
        return True

    async def _run_logout(self) -> bool:
        try:
            await self._logout()
        except Exception as exc:
            LOGGER.warning("Logout failed: %s", exc)
            self._apply(error=self.error_message(exc))
            return False
        LOGGER.info("Signed out")
        return True


__all__ = ["ProfileVM"]
