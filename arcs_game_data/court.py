from __future__ import annotations

from typing import Any

from .lookups import normalize_token
from .players import resolve_color


class CourtMixin:
    """Shared board projections: court cards, edicts and laws."""

    def _color_at(self, index: int) -> str:
        if index < self.player_count:
            return resolve_color(self.players[index].get("color"))
        return resolve_color(None)

    def get_court_agents(self, influence: list[int]) -> list[dict[str, Any]]:
        """Pair influence with player colors, keeping only positive values.

        Order follows the influence list (i.e. player order).
        """
        return [
            {"color": self._color_at(index), "value": value}
            for index, value in enumerate(influence)
            if value > 0
        ]

    def get_court_cards(self) -> list[dict[str, Any]]:
        return [
            {
                "id": normalize_token(card["id"]),
                "agents": self.get_court_agents(card.get("influence") or []),
            }
            for card in self.court
        ]

    def get_edicts(self) -> list[str]:
        return [normalize_token(edict) for edict in self.raw.get("edicts") or []]

    def get_laws(self) -> list[str]:
        return list(self.raw.get("laws") or [])
