"""Domain DTOs for leaderboard entries and user profiles."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Mapping, Optional
from uuid import uuid4


class TimeFrame(str, Enum):
    """Window a leaderboard is ranked over."""

    DAILY = "Daily"
    WEEKLY = "Weekly"
    MONTHLY = "Monthly"
    ALL_TIME = "All Time"

    @classmethod
    def parse(cls, value: Any) -> "TimeFrame":
        """Accept enum members, raw values ("All Time") or names ("all_time")."""
        if isinstance(value, cls):
            return value
        text = str(value or "").strip()
        for member in cls:
            if text == member.value or text.upper().replace(" ", "_") == member.name:
                return member
        raise ValueError(f"Unknown timeframe: {value!r}")


DEFAULT_TIMEFRAME = TimeFrame.WEEKLY


class MarketStance(str, Enum):
    BULLISH = "bullish"
    BEARISH = "bearish"
    NEUTRAL = "neutral"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class MarketSentiment(str, Enum):
    BULLISH = "bullish"
    BEARISH = "bearish"
    NEUTRAL = "neutral"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @property
    def color(self) -> str:
        return {"bullish": "green", "bearish": "red", "neutral": "gray"}[self.value]


class SubscriptionTier(str, Enum):
    BASIC = "basic"
    PRO = "pro"
    ELITE = "elite"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


def _new_id() -> str:
    return str(uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _parse_dt(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    text = str(value or "").strip()
    if not text:
        return _utcnow()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


@dataclass(frozen=True)
class LeaderboardEntry:
    """One ranked trader row."""

    rank: int
    username: str
    profit_loss: float
    win_rate: float
    is_verified: bool = False
    user_id: Optional[str] = None
    total_trades: int = 0
    market_stance: Optional[MarketStance] = None
    id: str = field(default_factory=_new_id)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "LeaderboardEntry":
        """Build an entry from a backend JSON object (camelCase keys)."""
        username = str(payload.get("username") or "").strip()
        if not username:
            raise ValueError("Leaderboard entry requires a username")
        stance_raw = payload.get("marketStance")
        return cls(
            rank=int(payload.get("rank") or 0),
            username=username,
            profit_loss=float(payload.get("profitLoss") or 0.0),
            win_rate=float(payload.get("winRate") or 0.0),
            is_verified=bool(payload.get("isVerified", False)),
            user_id=_optional_text(payload.get("userId")),
            total_trades=int(payload.get("totalTrades") or 0),
            market_stance=MarketStance(stance_raw) if stance_raw else None,
            id=str(payload.get("id") or _new_id()),
        )


@dataclass(frozen=True)
class UserProfile:
    """Authenticated user's profile as reported by the auth service."""

    id: str
    email: str
    username: str
    full_name: str
    bio: Optional[str] = None
    profile_image_url: Optional[str] = None
    followers_count: int = 0
    following_count: int = 0
    is_verified: bool = False
    subscription_tier: SubscriptionTier = SubscriptionTier.BASIC
    total_profit_loss: float = 0.0
    win_rate: float = 0.0
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    def with_profile_fields(self, full_name: Optional[str], bio: Optional[str]) -> "UserProfile":
        """Return a copy with the editable fields applied; ``None`` keeps a field."""
        changes: Dict[str, Any] = {"updated_at": _utcnow()}
        if full_name is not None:
            changes["full_name"] = full_name
        if bio is not None:
            changes["bio"] = bio
        return replace(self, **changes)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "UserProfile":
        user_id = str(payload.get("id") or "").strip()
        email = str(payload.get("email") or "").strip()
        username = str(payload.get("username") or "").strip()
        if not user_id or not username:
            raise ValueError("User payload requires 'id' and 'username'")
        return cls(
            id=user_id,
            email=email,
            username=username,
            full_name=str(payload.get("fullName") or ""),
            bio=_optional_text(payload.get("bio")),
            profile_image_url=_optional_text(payload.get("profileImageURL")),
            followers_count=int(payload.get("followersCount") or 0),
            following_count=int(payload.get("followingCount") or 0),
            is_verified=bool(payload.get("isVerified", False)),
            subscription_tier=SubscriptionTier(payload.get("subscriptionTier") or "basic"),
            total_profit_loss=float(payload.get("totalProfitLoss") or 0.0),
            win_rate=float(payload.get("winRate") or 0.0),
            created_at=_parse_dt(payload.get("createdAt")),
            updated_at=_parse_dt(payload.get("updatedAt")),
        )

    def to_payload(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "email": self.email,
            "username": self.username,
            "fullName": self.full_name,
            "bio": self.bio,
            "profileImageURL": self.profile_image_url,
            "followersCount": self.followers_count,
            "followingCount": self.following_count,
            "isVerified": self.is_verified,
            "subscriptionTier": self.subscription_tier.value,
            "totalProfitLoss": self.total_profit_loss,
            "winRate": self.win_rate,
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.updated_at.isoformat(),
        }


__all__ = [
    "DEFAULT_TIMEFRAME",
    "LeaderboardEntry",
    "MarketSentiment",
    "MarketStance",
    "SubscriptionTier",
    "TimeFrame",
    "UserProfile",
]
