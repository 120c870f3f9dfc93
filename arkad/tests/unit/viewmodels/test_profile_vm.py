from __future__ import annotations

from typing import List

import pytest

from arkad.adapters.auth_mock import AuthMock
from arkad.domain.errors import AuthError
from arkad.domain.view_state import ViewState
from arkad.tests.unit.viewmodels.helpers import make_user
from arkad.usecases.load_profile import LoadProfile
from arkad.usecases.logout import Logout
from arkad.usecases.update_profile import UpdateProfile
from arkad.viewmodels.profile_vm import ProfileVM


def _make_vm(auth: AuthMock, **kwargs) -> ProfileVM:
    return ProfileVM(
        load_profile=LoadProfile(auth),
        update_profile=UpdateProfile(auth),
        logout=Logout(auth),
        **kwargs,
    )


@pytest.mark.asyncio
async def test_initialize_mirrors_current_user() -> None:
    auth = AuthMock(make_user())
    vm = _make_vm(auth)

    await vm.initialize()

    assert vm.user == make_user()
    assert vm.loading is False
    assert auth.load_calls == 1


@pytest.mark.asyncio
async def test_summary_formats_profile_stats() -> None:
    auth = AuthMock(make_user(total_profit_loss=12_890.25, win_rate=72.3, followers_count=41))
    vm = _make_vm(auth)
    assert vm.summary() is None

    await vm.initialize()

    assert vm.summary() == "Jane Trader (@jane) - P/L $12.9K, win rate 72.3%, 41 followers"


@pytest.mark.asyncio
async def test_update_profile_republishes_authoritative_profile() -> None:
    auth = AuthMock(make_user())
    vm = _make_vm(auth)
    vm.open_edit_profile()

    await vm.initialize()
    assert await vm.update_profile("Jane Q. Trader", "Options only") is True

    assert vm.user.full_name == "Jane Q. Trader"
    assert vm.user.bio == "Options only"
    assert vm.user == auth.current_user()
    assert vm.show_edit_profile is False


@pytest.mark.asyncio
async def test_update_profile_does_not_touch_loading() -> None:
    auth = AuthMock(make_user(), latency_s=0.01)
    seen: List[ViewState] = []
    vm = _make_vm(auth)

    await vm.initialize()
    vm.subscribe(seen.append)
    await vm.update_profile("New Name", None)

    assert seen
    assert all(snapshot.loading is False for snapshot in seen)
    assert vm.user.bio == "Swing trader"


@pytest.mark.asyncio
async def test_failed_update_leaves_profile_unchanged_and_does_not_raise() -> None:
    auth = AuthMock(make_user())
    vm = _make_vm(auth)

    await vm.initialize()
    auth.fail_with = AuthError(AuthError.NETWORK)
    assert await vm.update_profile("X", None) is False

    assert vm.user == make_user()
    assert vm.loading is False
    assert vm.error == "Network error, try again"
    assert auth.update_calls == 1


@pytest.mark.asyncio
async def test_invalid_full_name_is_rejected_before_the_service() -> None:
    auth = AuthMock(make_user())
    vm = _make_vm(auth)

    await vm.initialize()
    assert await vm.update_profile("   ", None) is False

    assert auth.update_calls == 0
    assert vm.error == "Full name must be 1-80 characters."
    assert vm.user == make_user()


@pytest.mark.asyncio
async def test_logout_then_initialize_yields_no_user() -> None:
    auth = AuthMock(make_user())
    vm = _make_vm(auth)

    await vm.initialize()
    assert vm.user is not None
    assert await vm.logout() is True
    # Local state stays until the next initialize.
    assert vm.user is not None

    await vm.initialize()
    assert vm.user is None
    assert auth.logout_calls == 1


@pytest.mark.asyncio
async def test_update_without_session_reports_user_not_found() -> None:
    auth = AuthMock()
    vm = _make_vm(auth)

    await vm.initialize()
    assert await vm.update_profile("Nobody", None) is False

    assert vm.user is None
    assert vm.error == "User not found"
