"""Command-line entry point printing the leaderboard and the current profile."""

from __future__ import annotations

import argparse
import asyncio
import logging
from typing import List, Optional

from arkad.app.controller import AppController
from arkad.domain.models import TimeFrame
from arkad.utils.logging import apply_debug_preference, configure_root
from arkad.viewmodels.settings_vm import SettingsVM

LOGGER = logging.getLogger(__name__)


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="arkad", description="Show the Arkad leaderboard and profile.")
    parser.add_argument(
        "--timeframe",
        default=None,
        choices=[tf.value for tf in TimeFrame],
        help="Leaderboard window (default: settings value).",
    )
    parser.add_argument("--api", default=None, help="API base URL; implies REST adapters.")
    parser.add_argument("--token", default=None, help="Bearer token for the API.")
    parser.add_argument("--mock", action="store_true", help="Force offline mock adapters.")
    parser.add_argument("--debug", action="store_true", help="Enable DEBUG logging.")
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> SettingsVM:
    settings = SettingsVM()
    settings.apply_env()
    overrides = {}
    if args.api:
        overrides.update(api_base_url=args.api, use_mock=False)
    if args.token:
        overrides["api_token"] = args.token
    if args.mock:
        overrides["use_mock"] = True
    if args.timeframe:
        overrides["default_timeframe"] = args.timeframe
    if args.debug:
        overrides["debug_logging"] = True
    settings.apply_dict(overrides)
    return settings


async def run(controller: AppController) -> int:
    leaderboard_vm = controller.build_leaderboard_vm()
    profile_vm = controller.build_profile_vm()

    leaderboard_vm.initialize()
    profile_vm.initialize()
    await leaderboard_vm.wait_idle()
    await profile_vm.wait_idle()

    print(f"Leaderboard ({leaderboard_vm.selected_timeframe.value}) - {leaderboard_vm.sentiment_label()}")
    if leaderboard_vm.error:
        print(f"  error: {leaderboard_vm.error}")
    for row in leaderboard_vm.rows():
        badge = " *" if row.verified else ""
        print(f"  {row.rank:>4} {row.username:<16}{badge:<2} {row.profit_loss:>14} {row.win_rate:>7}")

    if profile_vm.error:
        print(f"Profile error: {profile_vm.error}")
    print(f"Profile: {profile_vm.summary() or 'not signed in'}")
    return 1 if leaderboard_vm.error else 0


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    configure_root()
    settings = build_settings(args)
    apply_debug_preference(settings.debug_logging)
    controller = AppController(settings)
    if not controller.ensure_ready():
        LOGGER.error("No API base URL configured; pass --api or --mock.")
        return 2
    return asyncio.run(run(controller))


if __name__ == "__main__":
    raise SystemExit(main())
