from __future__ import annotations

from typing import Optional

import pytest

from arkad.adapters.api_errors import ApiTimeoutError
from arkad.adapters.auth_mock import AuthMock
from arkad.adapters.leaderboard_mock import LeaderboardMock
from arkad.domain.errors import AuthError, UseCaseError
from arkad.domain.models import TimeFrame, UserProfile
from arkad.tests.unit.viewmodels.helpers import make_entries, make_user
from arkad.usecases.load_leaderboard import LoadLeaderboard
from arkad.usecases.load_profile import LoadProfile
from arkad.usecases.logout import Logout
from arkad.usecases.update_profile import UpdateProfile


class FailingLeaderboard:
    async def fetch(self, timeframe: TimeFrame):
        raise ApiTimeoutError("GET http://api/leaderboard: no response after 3 attempt(s)")


class UnreachableAuth(AuthMock):
    async def load_session(self) -> Optional[UserProfile]:
        raise AuthError(AuthError.NETWORK)


@pytest.mark.asyncio
async def test_load_leaderboard_sorts_by_rank() -> None:
    entries = make_entries(("Alice", 100), ("Bob", 90), ("Carl", 80))
    mock = LeaderboardMock(latency_s=0.0, by_timeframe={TimeFrame.DAILY: list(reversed(entries))})

    result = await LoadLeaderboard(mock)("Daily")

    assert [entry.username for entry in result] == ["Alice", "Bob", "Carl"]
    assert mock.calls == [TimeFrame.DAILY]


@pytest.mark.asyncio
async def test_load_leaderboard_maps_transport_errors() -> None:
    with pytest.raises(UseCaseError) as excinfo:
        await LoadLeaderboard(FailingLeaderboard())(TimeFrame.WEEKLY)
    assert excinfo.value.code == "REQUEST_TIMEOUT"


@pytest.mark.asyncio
async def test_load_profile_refreshes_session_first() -> None:
    auth = AuthMock(make_user())
    assert await LoadProfile(auth)() == make_user()
    assert auth.load_calls == 1


@pytest.mark.asyncio
async def test_load_profile_maps_session_errors() -> None:
    with pytest.raises(UseCaseError) as excinfo:
        await LoadProfile(UnreachableAuth(make_user()))()
    assert excinfo.value.code == AuthError.NETWORK


@pytest.mark.asyncio
async def test_update_profile_returns_reread_profile() -> None:
    auth = AuthMock(make_user())
    profile = await UpdateProfile(auth)("  Jane Doe  ", "New bio")
    assert profile is auth.current_user()
    assert profile.full_name == "Jane Doe"
    assert profile.bio == "New bio"


@pytest.mark.asyncio
@pytest.mark.parametrize("name, bio", [("", None), ("x" * 81, None), ("Ok", "b" * 281)])
async def test_update_profile_validates_input(name, bio) -> None:
    auth = AuthMock(make_user())
    with pytest.raises(UseCaseError) as excinfo:
        await UpdateProfile(auth)(name, bio)
    assert excinfo.value.code == AuthError.INVALID_INPUT
    assert auth.update_calls == 0


@pytest.mark.asyncio
async def test_update_profile_maps_auth_error() -> None:
    auth = AuthMock(make_user())
    auth.fail_with = AuthError(AuthError.AUTH_FAILED)
    with pytest.raises(UseCaseError) as excinfo:
        await UpdateProfile(auth)("Jane", None)
    assert excinfo.value.code == AuthError.AUTH_FAILED
    assert auth.current_user() == make_user()


@pytest.mark.asyncio
async def test_logout_clears_service_session() -> None:
    auth = AuthMock(make_user())
    await Logout(auth)()
    assert auth.current_user() is None
