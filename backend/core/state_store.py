"""Last-known game data and live config, shared by the server's handlers.

The transformer itself is stateless. Whatever receives exports (HTTP ingress)
publishes them here, and whatever pushes to clients (socket broadcast,
extension pub/sub) subscribes. New subscribers get the latest payload
replayed immediately so a freshly opened overlay is never blank.

Every reader and listener gets its own deep copy of the payload, so a
listener that annotates what it receives cannot change what later
subscribers are replayed.
"""

from __future__ import annotations

import copy
import logging
import threading
import time
from collections.abc import Callable, Mapping
from datetime import datetime, timezone
from typing import Any

from arcs_game_data import __version__, convert_export

from .config import OverlayConfig

logger = logging.getLogger(__name__)

GameDataListener = Callable[[dict[str, Any]], None]


class GameDataStore:
    """Thread-safe holder for the latest transformed export and runtime config."""

    def __init__(
        self,
        *,
        config: OverlayConfig | None = None,
        transform: Callable[[dict[str, Any]], dict[str, Any]] = convert_export,
    ) -> None:
        self._transform = transform
        self._lock = threading.RLock()
        self._config = config or OverlayConfig()
        self._last_game_data: dict[str, Any] | None = None
        self._last_received_at: float | None = None
        self._started_at = time.time()
        self._listeners: list[GameDataListener] = []
        self._config_listeners: list[Callable[[OverlayConfig], None]] = []

    def publish(self, raw: dict[str, Any]) -> dict[str, Any]:
        """Transform an export, remember it and notify listeners.

        Raises:
            MalformedExportError: the export is rejected and the previous
                payload stays current.
        """
        game_data = self._transform(raw)
        with self._lock:
            self._last_game_data = copy.deepcopy(game_data)
            self._last_received_at = time.time()
            listeners = list(self._listeners)
        self._notify(listeners, game_data)
        return game_data

    def get_last_game_data(self) -> dict[str, Any] | None:
        with self._lock:
            latest = self._last_game_data
        return copy.deepcopy(latest)

    def subscribe(self, listener: GameDataListener) -> Callable[[], None]:
        """Register a listener; replays the latest payload when there is one.

        Returns:
            A callable that removes the listener.
        """
        with self._lock:
            self._listeners.append(listener)
            latest = self._last_game_data
        if latest is not None:
            self._notify([listener], latest)

        def unsubscribe() -> None:
            with self._lock:
                self._listeners = [item for item in self._listeners if item is not listener]

        return unsubscribe

    def _notify(self, listeners: list[GameDataListener], game_data: dict[str, Any]) -> None:
        for listener in listeners:
            try:
                listener(copy.deepcopy(game_data))
            except Exception:
                logger.exception("Game data listener %r failed", listener)

    def get_config(self) -> OverlayConfig:
        with self._lock:
            return self._config

    def update_config(self, update: Mapping[str, Any]) -> OverlayConfig:
        """Apply a partial camelCase config update from the UI."""
        with self._lock:
            self._config = self._config.merged(update)
            config = self._config
            listeners = list(self._config_listeners)
        for listener in listeners:
            try:
                listener(config)
            except Exception:
                logger.exception("Config listener %r failed", listener)
        return config

    def on_config_update(self, listener: Callable[[OverlayConfig], None]) -> None:
        with self._lock:
            self._config_listeners.append(listener)

    def get_status(self) -> dict[str, Any]:
        """Status payload for the settings panel."""
        with self._lock:
            received_at = self._last_received_at
            config = self._config
        return {
            "version": __version__,
            "uptime": int(time.time() - self._started_at),
            "lastDataReceived": (
                datetime.fromtimestamp(received_at, tz=timezone.utc).isoformat()
                if received_at is not None
                else None
            ),
            "config": config.to_dict(),
        }
