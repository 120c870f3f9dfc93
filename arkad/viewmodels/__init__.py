"""ViewModel package for screen state and command surfaces.

Call context:
    ``arkad/app/controller.py`` builds the concrete viewmodels and injects
    use-case callables into them.

Dependencies:
    Modules in this package depend on domain types and formatting helpers
    only. I/O adapters and use-case orchestration remain outside.
"""

from .leaderboard_vm import LeaderboardRow, LeaderboardVM
from .profile_vm import ProfileVM
from .settings_vm import SettingsConfig, SettingsVM
from .view_state import ViewStateController

__all__ = [
    "LeaderboardRow",
    "LeaderboardVM",
    "ProfileVM",
    "SettingsConfig",
    "SettingsVM",
    "ViewStateController",
]
