"""Tests for the BEACON_PRESET environment flag."""

import importlib
import os

import pytest

from beacon_light import config


@pytest.fixture
def reload_config(monkeypatch: pytest.MonkeyPatch):  # type: ignore[no-untyped-def]
    """Reload the config module under a patched environment, then restore it."""
    original = os.environ.get("BEACON_PRESET")
    yield monkeypatch
    if original is None:
        monkeypatch.delenv("BEACON_PRESET", raising=False)
    else:
        monkeypatch.setenv("BEACON_PRESET", original)
    importlib.reload(config)


def test_test_suite_runs_a_supported_preset() -> None:
    assert config.BEACON_PRESET in ("mainnet", "minimal")


def test_defaults_to_mainnet(reload_config: pytest.MonkeyPatch) -> None:
    reload_config.delenv("BEACON_PRESET", raising=False)
    assert importlib.reload(config).BEACON_PRESET == "mainnet"


def test_value_is_case_insensitive(reload_config: pytest.MonkeyPatch) -> None:
    reload_config.setenv("BEACON_PRESET", "MINIMAL")
    assert importlib.reload(config).BEACON_PRESET == "minimal"


def test_unknown_preset_raises(reload_config: pytest.MonkeyPatch) -> None:
    reload_config.setenv("BEACON_PRESET", "devnet")
    with pytest.raises(ValueError, match="Invalid BEACON_PRESET"):
        importlib.reload(config)
