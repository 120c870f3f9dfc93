from __future__ import annotations

import os
from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, Mapping, Optional

from arkad.domain.models import DEFAULT_TIMEFRAME, TimeFrame
from ..utils.logging import env_forces_debug, env_truthy

_ENV_KEYS: Dict[str, str] = {
    "ARKAD_API_BASE_URL": "api_base_url",
    "ARKAD_API_TOKEN": "api_token",
    "ARKAD_USE_MOCK": "use_mock",
    "ARKAD_REQUEST_TIMEOUT_S": "request_timeout_s",
}


@dataclass
class SettingsConfig:
    """Typed runtime settings for adapter wiring and controller policy."""

    api_base_url: str = ""
    api_token: str = ""
    request_timeout_s: int = 10
    retries: int = 2
    use_mock: bool = True
    mock_latency_ms: int = 500
    default_timeframe: str = DEFAULT_TIMEFRAME.value
    discard_stale: bool = False


def _default_debug_logging() -> bool:
    return env_forces_debug()


class SettingsVM:
    """Keeps app settings state and validation, no I/O here."""

    def __init__(self, *, config: Optional[SettingsConfig] = None) -> None:
        self.config = config or SettingsConfig()
        self.debug_logging: bool = _default_debug_logging()

    # ------------------------------------------------------------------
    # Properties bridging to the typed config
    # ------------------------------------------------------------------
    @property
    def api_base_url(self) -> str:
        return self.config.api_base_url

    @property
    def api_token(self) -> str:
        return self.config.api_token

    @property
    def request_timeout_s(self) -> int:
        return self.config.request_timeout_s

    @property
    def retries(self) -> int:
        return self.config.retries

    @property
    def use_mock(self) -> bool:
        return self.config.use_mock

    @property
    def mock_latency_s(self) -> float:
        return self.config.mock_latency_ms / 1000.0

    @property
    def default_timeframe(self) -> TimeFrame:
        return TimeFrame.parse(self.config.default_timeframe)

    @property
    def discard_stale(self) -> bool:
        return self.config.discard_stale

    # ------------------------------------------------------------------
    def is_valid(self) -> bool:
        if not self.use_mock and not self.api_base_url:
            return False
        return self.request_timeout_s > 0 and self.retries >= 0

    def apply_dict(self, payload: Mapping[str, Any]) -> None:
        """Apply a flat settings mapping; unknown keys are rejected."""
        if not isinstance(payload, Mapping):
            raise ValueError("Settings payload must be a mapping of flat keys.")

        allowed = {*SettingsConfig.__annotations__.keys(), "debug_logging"}
        unknown = set(payload.keys()) - allowed
        if unknown:
            raise ValueError(f"Unsupported settings keys: {', '.join(sorted(str(key) for key in unknown))}")

        updates: Dict[str, Any] = {}
        for cfg_key in SettingsConfig.__annotations__.keys():
            if cfg_key in payload:
                updates[cfg_key] = self._coerce_config_value(cfg_key, payload[cfg_key])
        if updates:
            self.config = replace(self.config, **updates)

        if "debug_logging" in payload:
            self.debug_logging = self._coerce_bool(payload["debug_logging"])

    def apply_env(self, environ: Optional[Mapping[str, str]] = None) -> None:
        """Overlay ``ARKAD_*`` environment variables onto the current settings."""
        env = os.environ if environ is None else environ
        payload = {key: env[var] for var, key in _ENV_KEYS.items() if env.get(var)}
        if "api_base_url" in payload and not env.get("ARKAD_USE_MOCK"):
            payload["use_mock"] = False
        if payload:
            self.apply_dict(payload)

    def to_dict(self) -> dict:
        snapshot = asdict(self.config)
        snapshot["debug_logging"] = bool(self.debug_logging)
        return snapshot

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _coerce_config_value(self, key: str, raw: Any) -> Any:
        if key in {"api_base_url", "api_token"}:
            return self._coerce_optional_str(raw)
        if key in {"request_timeout_s", "retries", "mock_latency_ms"}:
            return self._coerce_int(key, raw, allow_negative=False)
        if key in {"use_mock", "discard_stale"}:
            return self._coerce_bool(raw)
        if key == "default_timeframe":
            try:
                return TimeFrame.parse(raw).value
            except ValueError as exc:
                raise ValueError(f"default_timeframe must be one of: {', '.join(t.value for t in TimeFrame)}") from exc
        raise ValueError(f"Unhandled config field: {key}")

    @staticmethod
    def _coerce_optional_str(value: Any) -> str:
        if value is None:
            return ""
        return str(value).strip()

    @staticmethod
    def _coerce_bool(value: Any) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, (int, float)):
            return bool(value)
        if isinstance(value, str):
            return env_truthy(value)
        return bool(value)

    @staticmethod
    def _coerce_int(name: str, value: Any, *, allow_negative: bool = True) -> int:
        if isinstance(value, bool):
            raise ValueError(f"{name} must be an integer.")
        if isinstance(value, (int, float)):
            coerced = int(value)
        elif isinstance(value, str):
            try:
                coerced = int(value.strip())
            except ValueError as exc:
                raise ValueError(f"{name} must be an integer.") from exc
        else:
            raise ValueError(f"{name} must be an integer.")
        if not allow_negative and coerced < 0:
            raise ValueError(f"{name} must be non-negative.")
        return coerced
