from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from arkad.domain.models import LeaderboardEntry, TimeFrame
from arkad.domain.ports import LeaderboardPort


def default_entries() -> List[LeaderboardEntry]:
    return [
        LeaderboardEntry(rank=1, username="ProTrader", profit_loss=15240.50, win_rate=78.5, is_verified=True),
        LeaderboardEntry(rank=2, username="BullRunner", profit_loss=12890.25, win_rate=72.3, is_verified=True),
        LeaderboardEntry(rank=3, username="MarketMaster", profit_loss=11650.00, win_rate=69.8, is_verified=False),
        LeaderboardEntry(rank=4, username="TradingGuru", profit_loss=9875.75, win_rate=68.2, is_verified=True),
        LeaderboardEntry(rank=5, username="StockWiz", profit_loss=8420.30, win_rate=65.7, is_verified=False),
    ]


@dataclass
class LeaderboardMock(LeaderboardPort):
    """Offline substitute for ``LeaderboardRestAdapter`` with a fixed delay.

    Every timeframe returns the same five traders unless ``by_timeframe``
    overrides it. The mock never fails.
    """

    latency_s: float = 0.5
    by_timeframe: Dict[TimeFrame, Sequence[LeaderboardEntry]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.calls: List[TimeFrame] = []

    async def fetch(self, timeframe: TimeFrame) -> List[LeaderboardEntry]:
        self.calls.append(timeframe)
        if self.latency_s > 0:
            await asyncio.sleep(self.latency_s)
        entries: Optional[Sequence[LeaderboardEntry]] = self.by_timeframe.get(timeframe)
        if entries is None:
            return default_entries()
        return list(entries)
