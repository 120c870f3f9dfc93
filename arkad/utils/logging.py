"""Root logger setup for the Arkad client.

Environment variables take precedence over the ``debug_logging`` setting:
  - ARKAD_LOG_LEVEL: level name (``warning``) or number (``30``)
  - ARKAD_DEBUG / ARKAD_DEBUG_LOGGING: truthy -> DEBUG
"""

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional, Union

LOG_FORMAT = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"
LOG_DATEFMT = "%H:%M:%S"

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_DEBUG_FLAGS = ("ARKAD_DEBUG", "ARKAD_DEBUG_LOGGING")
# requests' transport logs every connection at DEBUG
_NOISY_LOGGERS = ("urllib3",)


def env_truthy(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in _TRUTHY


def parse_level(value: Union[int, str, None], fallback: int = logging.INFO) -> int:
    """Turn ``"debug"``, ``"10"`` or ``10`` into a level; unknown names give ``fallback``."""
    if isinstance(value, int):
        return value
    text = (value or "").strip().upper()
    if not text:
        return fallback
    if text.isdigit():
        return int(text)
    level = logging.getLevelName(text)
    return level if isinstance(level, int) else fallback


def env_level(environ: Optional[Mapping[str, str]] = None) -> Optional[int]:
    """Level forced by the environment, or ``None`` when nothing is set."""
    env = os.environ if environ is None else environ
    explicit = (env.get("ARKAD_LOG_LEVEL") or "").strip()
    if explicit:
        return parse_level(explicit)
    if any(env_truthy(env.get(flag)) for flag in _DEBUG_FLAGS):
        return logging.DEBUG
    return None


def env_forces_debug(environ: Optional[Mapping[str, str]] = None) -> bool:
    level = env_level(environ)
    return level is not None and level <= logging.DEBUG


def _set_level(level: int) -> None:
    logging.getLogger().setLevel(level)
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.INFO))


def configure_root(default_level: Union[int, str] = logging.INFO) -> int:
    """Install the console handler once and return the effective level."""
    level = env_level()
    if level is None:
        level = parse_level(default_level)
    if not logging.getLogger().handlers:
        logging.basicConfig(format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    _set_level(level)
    return level


def apply_debug_preference(debug_enabled: bool) -> int:
    """Apply the ``debug_logging`` setting unless the environment pins a level."""
    level = env_level()
    if level is None:
        level = logging.DEBUG if debug_enabled else logging.INFO
    _set_level(level)
    return level


__all__ = [
    "LOG_FORMAT",
    "apply_debug_preference",
    "configure_root",
    "env_forces_debug",
    "env_level",
    "env_truthy",
    "parse_level",
]
