from __future__ import annotations

from typing import List, Optional, Protocol

from .models import LeaderboardEntry, TimeFrame, UserProfile


# ---- Ports (Hexagonal boundaries) ----
class LeaderboardPort(Protocol):
    """Ranked leaderboard source."""

    async def fetch(self, timeframe: TimeFrame) -> List[LeaderboardEntry]: ...


class AuthPort(Protocol):
    """Auth/profile service holding the authoritative session.

    ``load_session`` refreshes the cached session from the backend and
    returns it; ``current_user`` is a synchronous read of that cache. The
    async commands raise :class:`arkad.domain.errors.AuthError` on failure.
    """

    async def load_session(self) -> Optional[UserProfile]: ...
    def current_user(self) -> Optional[UserProfile]: ...
    async def update_profile(self, full_name: str, bio: Optional[str]) -> None: ...
    async def logout(self) -> None: ...
