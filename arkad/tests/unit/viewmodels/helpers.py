from __future__ import annotations

import asyncio
from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence

from arkad.domain.models import LeaderboardEntry, TimeFrame, UserProfile

_CREATED = datetime(2025, 6, 17, 9, 30, tzinfo=timezone.utc)


def make_entries(*pairs: tuple) -> List[LeaderboardEntry]:
    """Build ranked entries from ``(username, profit_loss)`` pairs."""
    return [
        LeaderboardEntry(rank=index, username=name, profit_loss=float(pnl), win_rate=50.0)
        for index, (name, pnl) in enumerate(pairs, start=1)
    ]


def make_user(**overrides) -> UserProfile:
    fields = {
        "id": "u-1",
        "email": "jane@example.com",
        "username": "jane",
        "full_name": "Jane Trader",
        "bio": "Swing trader",
        "created_at": _CREATED,
        "updated_at": _CREATED,
    }
    fields.update(overrides)
    return UserProfile(**fields)


class ScriptedLeaderboard:
    """Leaderboard source whose calls finish after scripted latencies.

    Each call pops the next latency and returns the next scripted result, so
    completion order can differ from issue order.
    """

    def __init__(
        self,
        results: Sequence[List[LeaderboardEntry]],
        latencies_s: Optional[Sequence[float]] = None,
    ) -> None:
        self._results = list(results)
        self._latencies = list(latencies_s or [0.0] * len(self._results))
        self.calls: List[TimeFrame] = []
        self.completed: List[int] = []

    async def __call__(self, timeframe: TimeFrame) -> List[LeaderboardEntry]:
        index = len(self.calls)
        self.calls.append(timeframe)
        await asyncio.sleep(self._latencies[index])
        self.completed.append(index)
        return self._results[index]


class GatedSource:
    """Async source that blocks each call until the test releases it."""

    def __init__(self) -> None:
        self.gates: Dict[int, asyncio.Event] = {}
        self.results: Dict[int, object] = {}
        self.errors: Dict[int, Exception] = {}
        self.calls = 0

    async def __call__(self, *args) -> object:
        index = self.calls
        self.calls += 1
        gate = self.gates.setdefault(index, asyncio.Event())
        await gate.wait()
        if index in self.errors:
            raise self.errors[index]
        return self.results.get(index)

    def release(self, index: int, result: object = None, error: Optional[Exception] = None) -> None:
        if error is not None:
            self.errors[index] = error
        else:
            self.results[index] = result
        self.gates.setdefault(index, asyncio.Event()).set()


async def settle() -> None:
    """Let pending callbacks and task steps run."""
    for _ in range(5):
        await asyncio.sleep(0)


__all__ = ["GatedSource", "ScriptedLeaderboard", "make_entries", "make_user", "settle"]
