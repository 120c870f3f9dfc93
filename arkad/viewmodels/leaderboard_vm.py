"""Leaderboard screen state: ranked entries for a selectable timeframe.

Call context:
    ``AppController.build_leaderboard_vm`` wires a ``LoadLeaderboard`` use case
    into this controller. Views call ``initialize`` once, then
    ``change_timeframe`` / ``refresh_leaderboard`` from user input.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, List, Optional

from arkad.domain.models import DEFAULT_TIMEFRAME, LeaderboardEntry, MarketSentiment, TimeFrame
from .formatting import as_currency_with_sign, as_percentage
from .view_state import StateObserver, ViewStateController

LoadLeaderboardFn = Callable[[TimeFrame], Awaitable[List[LeaderboardEntry]]]

LOGGER = logging.getLogger(__name__)


@dataclass
class LeaderboardRow:
    """Display row model consumed by the leaderboard list widget."""
    rank: str
    username: str
    profit_loss: str
    win_rate: str
    verified: bool
    entry_id: str


class LeaderboardVM(ViewStateController[List[LeaderboardEntry], TimeFrame]):
    """Owns the leaderboard list, the selected timeframe and the loading flag."""

    def __init__(
        self,
        load_leaderboard: LoadLeaderboardFn,
        *,
        default_timeframe: TimeFrame = DEFAULT_TIMEFRAME,
        discard_stale: bool = False,
        on_state_changed: Optional[StateObserver] = None,
    ) -> None:
        super().__init__(
            initial_data=[],
            default_selection=default_timeframe,
            discard_stale=discard_stale,
            on_state_changed=on_state_changed,
        )
        self._load_leaderboard = load_leaderboard
        self.market_sentiment: MarketSentiment = MarketSentiment.BULLISH
        self.bullish_percentage: float = 68.0
        self.followed: List[str] = []

    @property
    def leaderboard(self) -> List[LeaderboardEntry]:
        return self.state.data

    @property
    def selected_timeframe(self) -> TimeFrame:
        return self.state.selection or self.default_selection

    def change_timeframe(self, timeframe: TimeFrame) -> asyncio.Task:
        return self.change_selection(TimeFrame.parse(timeframe))

    def refresh_leaderboard(self) -> asyncio.Task:
        return self.refresh()

    def follow_trader(self, entry: LeaderboardEntry) -> None:
        # No follow endpoint exists yet; the intent is only recorded.
        LOGGER.info("Following trader: %s", entry.username)
        if entry.username not in self.followed:
            self.followed.append(entry.username)

    def sentiment_label(self) -> str:
        return f"{self.market_sentiment.display_name} {self.bullish_percentage:.0f}%"

    def rows(self) -> List[LeaderboardRow]:
        """Return display rows in rank order."""
        return [self._to_row(entry) for entry in sorted(self.state.data, key=lambda e: e.rank)]

    # ------------------------------------------------------------------
    async def _fetch(self, selection: Optional[TimeFrame]) -> List[LeaderboardEntry]:
        entries = await self._load_leaderboard(selection or self.default_selection)
        return list(entries)

    @staticmethod
    def _to_row(entry: LeaderboardEntry) -> LeaderboardRow:
        return LeaderboardRow(
            rank=f"#{entry.rank}",
            username=entry.username,
            profit_loss=as_currency_with_sign(entry.profit_loss),
            win_rate=as_percentage(entry.win_rate),
            verified=entry.is_verified,
            entry_id=entry.id,
        )


__all__ = ["LeaderboardRow", "LeaderboardVM"]
