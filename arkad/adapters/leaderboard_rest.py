"""REST adapter implementing the leaderboard port."""

from __future__ import annotations

import asyncio
from typing import Any, List, Optional

from arkad.adapters.api_errors import ApiError
from arkad.adapters.http_client import HttpConfig, RetryingSession, ensure_ok, json_payload, make_url
from arkad.domain.models import LeaderboardEntry, TimeFrame
from arkad.domain.ports import LeaderboardPort


class LeaderboardRestAdapter(LeaderboardPort):
    """HTTP adapter for the ``/leaderboard`` endpoint."""

    def __init__(
        self,
        base_url: str,
        *,
        token: Optional[str] = None,
        request_timeout_s: int = 10,
        retries: int = 2,
        limit: int = 50,
    ) -> None:
        if not str(base_url or "").strip():
            raise ValueError("LeaderboardRestAdapter requires a base URL")
        self.base_url = str(base_url).strip()
        self.limit = int(limit)
        self.cfg = HttpConfig(request_timeout_s=request_timeout_s, retries=retries)
        self.session = RetryingSession(token, self.cfg)

    async def fetch(self, timeframe: TimeFrame) -> List[LeaderboardEntry]:
        return await asyncio.to_thread(self.fetch_blocking, timeframe)

    def fetch_blocking(self, timeframe: TimeFrame) -> List[LeaderboardEntry]:
        """Fetch and parse one leaderboard page on the calling thread."""
        url = make_url(self.base_url, "/leaderboard")
        resp = self.session.get(url, params={"timeframe": timeframe.value, "limit": self.limit})
        ensure_ok(resp, f"fetch_leaderboard[{timeframe.value}]")
        return self._parse_entries(json_payload(resp))

    @staticmethod
    def _parse_entries(payload: Any) -> List[LeaderboardEntry]:
        if isinstance(payload, dict):
            payload = payload.get("entries")
        if not isinstance(payload, list):
            raise ApiError("Invalid leaderboard payload: expected a list of entries")
        entries = [LeaderboardEntry.from_payload(item) for item in payload if isinstance(item, dict)]
        entries.sort(key=lambda entry: entry.rank)
        return entries


__all__ = ["LeaderboardRestAdapter"]
