from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)


class TransformerBase:
    """Base implementation: holds the raw export and shared lookup helpers.

    The raw export is read, never written. Every projection builds new lists
    so the returned payload shares no mutable state with the input.
    """

    def __init__(self, raw: dict[str, Any]):
        """Wrap a parsed export.

        Args:
            raw: Parsed JSON export. `players`, `ambitions` and `court` must
                be present (see `validate_export`).
        """
        self.raw = raw
        self.players: list[dict[str, Any]] = raw["players"]
        self.ambitions: list[dict[str, Any]] = raw["ambitions"]
        self.court: list[dict[str, Any]] = raw["court"]

    @property
    def player_count(self) -> int:
        return len(self.players)

    def _find_ambition(self, ambition_id: str) -> dict[str, Any] | None:
        """Return the first ambition record with `ambition_id`, if any."""
        for ambition in self.ambitions:
            if ambition.get("id") == ambition_id:
                return ambition
        return None

    def _player_field(self, key: str, default: Any = None) -> list[Any]:
        """Collect one field across all players, index-aligned."""
        return [player.get(key, default) for player in self.players]
