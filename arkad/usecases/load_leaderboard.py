"""Use case for fetching a ranked leaderboard."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from arkad.domain.models import LeaderboardEntry, TimeFrame
from arkad.domain.ports import LeaderboardPort
from arkad.usecases.error_mapping import map_api_error


@dataclass
class LoadLeaderboard:
    """Fetch entries for one timeframe, ordered by rank."""

    leaderboard_port: LeaderboardPort

    async def __call__(self, timeframe: TimeFrame) -> List[LeaderboardEntry]:
        try:
            entries = await self.leaderboard_port.fetch(TimeFrame.parse(timeframe))
        except Exception as exc:
            raise map_api_error(
                exc,
                default_code="LEADERBOARD_FAILED",
                default_message="Failed to load leaderboard.",
            ) from exc
        return sorted(entries, key=lambda entry: entry.rank)


__all__ = ["LoadLeaderboard"]
