"""Adapter and use-case wiring for the app runtime.

This module owns lazy construction of concrete adapters and use-case objects
that depend on values in :class:`arkad.viewmodels.settings_vm.SettingsVM`,
and builds the screen controllers with those use cases injected.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..adapters.auth_mock import AuthMock
from ..adapters.auth_rest import AuthRestAdapter
from ..adapters.leaderboard_mock import LeaderboardMock
from ..adapters.leaderboard_rest import LeaderboardRestAdapter
from ..domain.ports import AuthPort, LeaderboardPort
from ..usecases.load_leaderboard import LoadLeaderboard
from ..usecases.load_profile import LoadProfile
from ..usecases.logout import Logout
from ..usecases.update_profile import UpdateProfile
from ..viewmodels.leaderboard_vm import LeaderboardVM
from ..viewmodels.profile_vm import ProfileVM
from ..viewmodels.settings_vm import SettingsVM

LOGGER = logging.getLogger(__name__)


class AppController:
    """Create and cache runtime adapters/use-cases from settings state.

    Ports can be passed in directly (tests, embedding apps); otherwise
    ``ensure_ready`` builds mocks or REST adapters from the settings.
    """

    def __init__(
        self,
        settings_vm: SettingsVM,
        *,
        leaderboard_port: Optional[LeaderboardPort] = None,
        auth_port: Optional[AuthPort] = None,
    ) -> None:
        self.settings_vm = settings_vm
        self._injected_leaderboard = leaderboard_port
        self._injected_auth = auth_port
        self._leaderboard_port: Optional[LeaderboardPort] = leaderboard_port
        self._auth_port: Optional[AuthPort] = auth_port
        self.uc_load_leaderboard: Optional[LoadLeaderboard] = None
        self.uc_load_profile: Optional[LoadProfile] = None
        self.uc_update_profile: Optional[UpdateProfile] = None
        self.uc_logout: Optional[Logout] = None

    @property
    def leaderboard_port(self) -> Optional[LeaderboardPort]:
        return self._leaderboard_port

    @property
    def auth_port(self) -> Optional[AuthPort]:
        return self._auth_port

    def reset(self) -> None:
        """Drop cached adapters and use-cases so the next ``ensure_ready`` rebuilds them."""
        self._leaderboard_port = self._injected_leaderboard
        self._auth_port = self._injected_auth
        self.uc_load_leaderboard = None
        self.uc_load_profile = None
        self.uc_update_profile = None
        self.uc_logout = None

    def ensure_ready(self) -> bool:
        """Ensure ports and use-cases exist.

        Returns:
            ``True`` when dependencies are available, ``False`` when the REST
            mode is selected but no base URL is configured.
        """
        if self._leaderboard_port is None or self._auth_port is None:
            if not self.settings_vm.is_valid():
                return False
            if self.settings_vm.use_mock:
                self._build_mock_ports()
            else:
                self._build_rest_ports()

        if self.uc_load_leaderboard is None:
            self.uc_load_leaderboard = LoadLeaderboard(self._leaderboard_port)
        if self.uc_load_profile is None:
            self.uc_load_profile = LoadProfile(self._auth_port)
            self.uc_update_profile = UpdateProfile(self._auth_port)
            self.uc_logout = Logout(self._auth_port)
        return True

    def build_leaderboard_vm(self) -> LeaderboardVM:
        self._require_ready()
        return LeaderboardVM(
            self.uc_load_leaderboard,
            default_timeframe=self.settings_vm.default_timeframe,
            discard_stale=self.settings_vm.discard_stale,
        )

    def build_profile_vm(self) -> ProfileVM:
        self._require_ready()
        return ProfileVM(
            load_profile=self.uc_load_profile,
            update_profile=self.uc_update_profile,
            logout=self.uc_logout,
        )

    # ------------------------------------------------------------------
    def _require_ready(self) -> None:
        if not self.ensure_ready():
            raise RuntimeError("Configure the API base URL or enable mock mode first.")

    def _build_mock_ports(self) -> None:
        LOGGER.info("Using offline mock adapters")
        if self._leaderboard_port is None:
            self._leaderboard_port = LeaderboardMock(latency_s=self.settings_vm.mock_latency_s)
        if self._auth_port is None:
            self._auth_port = AuthMock()

    def _build_rest_ports(self) -> None:
        base_url = self.settings_vm.api_base_url
        token = self.settings_vm.api_token or None
        LOGGER.info("Using REST adapters against %s", base_url)
        if self._leaderboard_port is None:
            self._leaderboard_port = LeaderboardRestAdapter(
                base_url,
                token=token,
                request_timeout_s=self.settings_vm.request_timeout_s,
                retries=self.settings_vm.retries,
            )
        if self._auth_port is None:
            self._auth_port = AuthRestAdapter(
                base_url,
                token=token,
                request_timeout_s=self.settings_vm.request_timeout_s,
                retries=self.settings_vm.retries,
            )


__all__ = ["AppController"]
