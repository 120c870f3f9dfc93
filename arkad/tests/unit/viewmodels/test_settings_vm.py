from __future__ import annotations

import pytest

from arkad.domain.models import TimeFrame
from arkad.viewmodels.settings_vm import SettingsVM


def test_apply_dict_updates_flat_keys() -> None:
    vm = SettingsVM()
    vm.apply_dict(
        {
            "api_base_url": " https://api.example.test ",
            "api_token": "tok",
            "request_timeout_s": "12",
            "retries": 1,
            "use_mock": "no",
            "mock_latency_ms": 250,
            "default_timeframe": "all_time",
            "discard_stale": "yes",
            "debug_logging": True,
        }
    )

    assert vm.api_base_url == "https://api.example.test"
    assert vm.api_token == "tok"
    assert vm.request_timeout_s == 12
    assert vm.retries == 1
    assert vm.use_mock is False
    assert vm.mock_latency_s == 0.25
    assert vm.default_timeframe is TimeFrame.ALL_TIME
    assert vm.discard_stale is True
    assert vm.to_dict()["default_timeframe"] == "All Time"
    assert vm.debug_logging is True
    assert vm.is_valid()


def test_apply_dict_rejects_unknown_keys() -> None:
    vm = SettingsVM()
    with pytest.raises(ValueError, match="Unsupported settings keys: box_urls"):
        vm.apply_dict({"box_urls": {}})


@pytest.mark.parametrize(
    "payload",
    [
        {"request_timeout_s": "soon"},
        {"retries": -1},
        {"mock_latency_ms": True},
        {"default_timeframe": "Yearly"},
    ],
)
def test_apply_dict_rejects_bad_values(payload) -> None:
    vm = SettingsVM()
    with pytest.raises(ValueError):
        vm.apply_dict(payload)
    assert vm.to_dict()["request_timeout_s"] == 10


def test_rest_mode_requires_base_url() -> None:
    vm = SettingsVM()
    vm.apply_dict({"use_mock": False})
    assert not vm.is_valid()


def test_apply_env_switches_to_rest_when_url_given() -> None:
    vm = SettingsVM()
    vm.apply_env({"ARKAD_API_BASE_URL": "http://localhost:8080", "ARKAD_API_TOKEN": "abc"})
    assert vm.use_mock is False
    assert vm.api_base_url == "http://localhost:8080"
    assert vm.api_token == "abc"


def test_apply_env_respects_explicit_mock_flag() -> None:
    vm = SettingsVM()
    vm.apply_env({"ARKAD_API_BASE_URL": "http://localhost:8080", "ARKAD_USE_MOCK": "1"})
    assert vm.use_mock is True


def test_default_payload_roundtrips(monkeypatch) -> None:
    monkeypatch.delenv("ARKAD_LOG_LEVEL", raising=False)
    monkeypatch.delenv("ARKAD_DEBUG", raising=False)
    monkeypatch.delenv("ARKAD_DEBUG_LOGGING", raising=False)
    payload = SettingsVM().to_dict()
    assert payload["use_mock"] is True
    assert payload["debug_logging"] is False

    vm = SettingsVM()
    vm.apply_dict(payload)
    assert vm.to_dict() == payload
