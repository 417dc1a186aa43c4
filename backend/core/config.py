"""Runtime settings for the overlay bridge.

Settings are read from `ARCS_*` environment variables (the entry point loads
`.env` first) and can be updated at runtime from the settings panel, which
sends partial camelCase dicts.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Any

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}

# camelCase key used by the UI -> dataclass field
_UI_KEYS = {
    "autoReconnect": "auto_reconnect",
    "debugMode": "debug_mode",
    "refreshInterval": "refresh_interval",
    "minimizeToTray": "minimize_to_tray",
    "startMinimized": "start_minimized",
    "autoLaunch": "auto_launch",
}


def _parse_bool(value: str) -> bool | None:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    return None


@dataclass(frozen=True)
class OverlayConfig:
    auto_reconnect: bool = True
    debug_mode: bool = False
    refresh_interval: int = 5  # seconds
    minimize_to_tray: bool = True
    start_minimized: bool = False
    auto_launch: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> OverlayConfig:
        """Build a config from `ARCS_<FIELD>` variables, e.g. `ARCS_DEBUG_MODE=1`.

        Unparseable values are logged and the default is kept.
        """
        environ = os.environ if environ is None else environ
        overrides: dict[str, Any] = {}

        for f in fields(cls):
            raw = environ.get(f"ARCS_{f.name.upper()}")
            if raw is None:
                continue
            if f.type in ("bool", bool):
                parsed = _parse_bool(raw)
            else:
                try:
                    parsed = int(raw)
                except ValueError:
                    parsed = None
            if parsed is None:
                logger.warning("Ignoring invalid ARCS_%s=%r", f.name.upper(), raw)
                continue
            overrides[f.name] = parsed

        return cls(**overrides)

    def merged(self, update: Mapping[str, Any]) -> OverlayConfig:
        """Return a copy with the known camelCase keys of `update` applied."""
        changes: dict[str, Any] = {}
        for key, value in update.items():
            field_name = _UI_KEYS.get(key)
            if field_name is None:
                logger.debug("Ignoring unknown config key %r", key)
                continue
            if field_name == "refresh_interval":
                try:
                    value = int(value)
                except (TypeError, ValueError):
                    logger.warning("Ignoring invalid refreshInterval %r", value)
                    continue
            else:
                value = bool(value)
            changes[field_name] = value
        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        """camelCase dict, as sent to the UI."""
        return {key: getattr(self, field_name) for key, field_name in _UI_KEYS.items()}
