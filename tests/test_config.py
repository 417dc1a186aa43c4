from __future__ import annotations

import logging

from backend.core.config import OverlayConfig


def test_defaults_match_ui_expectations() -> None:
    assert OverlayConfig().to_dict() == {
        "autoReconnect": True,
        "debugMode": False,
        "refreshInterval": 5,
        "minimizeToTray": True,
        "startMinimized": False,
        "autoLaunch": False,
    }


def test_from_env_overrides() -> None:
    config = OverlayConfig.from_env(
        {
            "ARCS_DEBUG_MODE": "yes",
            "ARCS_MINIMIZE_TO_TRAY": "0",
            "ARCS_REFRESH_INTERVAL": "12",
            "UNRELATED": "1",
        }
    )

    assert config.debug_mode is True
    assert config.minimize_to_tray is False
    assert config.refresh_interval == 12
    assert config.auto_reconnect is True


def test_from_env_ignores_invalid_values(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="backend.core.config"):
        config = OverlayConfig.from_env(
            {"ARCS_AUTO_LAUNCH": "maybe", "ARCS_REFRESH_INTERVAL": "soon"}
        )

    assert config == OverlayConfig()
    assert "ARCS_AUTO_LAUNCH" in caplog.text
    assert "ARCS_REFRESH_INTERVAL" in caplog.text


def test_merged_applies_known_keys_only() -> None:
    base = OverlayConfig()

    updated = base.merged({"debugMode": True, "refreshInterval": "10", "theme": "dark"})

    assert updated.debug_mode is True
    assert updated.refresh_interval == 10
    assert "theme" not in updated.to_dict()
    # Original is untouched
    assert base.debug_mode is False


def test_merged_skips_bad_refresh_interval() -> None:
    assert OverlayConfig().merged({"refreshInterval": "fast"}).refresh_interval == 5
