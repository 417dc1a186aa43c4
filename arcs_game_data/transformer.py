"""Public `GameDataTransformer` facade composed from smaller mixin modules.

This file exists to keep the primary class easy to find while keeping the
player, ambition and court projections in their own modules.
"""

from __future__ import annotations

from typing import Any

from .ambitions import AmbitionsMixin
from .base import TransformerBase
from .court import CourtMixin
from .players import PlayersMixin
from .validation import validate_export


class GameDataTransformer(
    TransformerBase,
    PlayersMixin,
    AmbitionsMixin,
    CourtMixin,
):
    """Project a raw Arcs export into the overlay's game data shape."""

    def get_general_data(self) -> dict[str, Any]:
        """Build the `gameData` half of the payload (shared board state)."""
        fates = self.get_fates()
        return {
            "isCampaign": bool(self.raw.get("campaign", False)),
            "hasBlightkin": self.has_naturalist(fates),
            "hasEdenguard": self.has_guardian(fates),
            "ambitionDeclarations": self.get_all_ambition_declarations(),
            "ambitionPodium": self.get_all_ambition_podiums(),
            "courtCards": self.get_court_cards(),
            "edicts": self.get_edicts(),
            "laws": self.get_laws(),
        }

    def get_game_data(self) -> dict[str, Any]:
        """Build the full payload sent to the overlay.

        Returns:
            Dict with `playerData` and `gameData` keys. Every call builds
            fresh lists, so callers may mutate the result freely.
        """
        return {
            "playerData": self.get_player_data(),
            "gameData": self.get_general_data(),
        }


def convert_export(raw: dict[str, Any], *, validate: bool = True) -> dict[str, Any]:
    """Validate (optionally) and transform a raw export in one call.

    Raises:
        MalformedExportError: if `validate` is set and the export is missing
            required collections or carries values of the wrong type.
    """
    if validate:
        validate_export(raw)
    return GameDataTransformer(raw).get_game_data()
