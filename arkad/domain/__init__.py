"""Domain package exports for value objects, snapshots and errors."""

from .errors import AuthError, UseCaseError
from .models import (
    DEFAULT_TIMEFRAME,
    LeaderboardEntry,
    MarketSentiment,
    MarketStance,
    SubscriptionTier,
    TimeFrame,
    UserProfile,
)
from .view_state import ViewState

__all__ = [
    "AuthError",
    "DEFAULT_TIMEFRAME",
    "LeaderboardEntry",
    "MarketSentiment",
    "MarketStance",
    "SubscriptionTier",
    "TimeFrame",
    "UseCaseError",
    "UserProfile",
    "ViewState",
]
