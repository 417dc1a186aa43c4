from __future__ import annotations

from typing import Any

from .lookups import (
    DEFAULT_COLOR,
    DEFAULT_FATE,
    FATE_MARKER,
    GUARDIAN_FATE,
    NATURALIST_FATE,
    OUTRAGE_SLOTS,
    PLAYER_COLORS,
    ColorName,
    normalize_token,
)


def resolve_color(color_hex: str | None) -> ColorName:
    """Map an export color code to the overlay's color name.

    Unknown or missing codes fall back to white.
    """
    if color_hex is None:
        return DEFAULT_COLOR
    return PLAYER_COLORS.get(color_hex, DEFAULT_COLOR)


def extract_fate(cards: list[str]) -> str:
    """Pick the player's fate token out of their card ids.

    The first card containing "FATE" wins, even when a player still holds a
    second fate card from the draft. Players with no fate card get the
    Steward token.
    """
    for card in cards:
        if FATE_MARKER in card:
            return normalize_token(card)
    return DEFAULT_FATE


def normalize_outrage(outrage: Any) -> list[bool]:
    """Collapse the export's outrage markers into the overlay's five flags.

    The export only tells us whether outrage is present, not which
    resources it covers.
    """
    if isinstance(outrage, list) and outrage:
        return [True] * OUTRAGE_SLOTS
    return [False] * OUTRAGE_SLOTS


class PlayersMixin:
    """Per-player projections (`playerData`)."""

    def get_fates(self) -> list[str]:
        return [extract_fate(player.get("cards") or []) for player in self.players]

    @staticmethod
    def has_naturalist(fates: list[str]) -> bool:
        return NATURALIST_FATE in fates

    @staticmethod
    def has_guardian(fates: list[str]) -> bool:
        return GUARDIAN_FATE in fates

    def get_colors(self) -> list[ColorName]:
        return [resolve_color(player.get("color")) for player in self.players]

    def get_resources(self) -> list[list[str]]:
        """Resource slots per player, with empty slots as ""."""
        return [
            ["" if resource is None else resource for resource in player.get("resources") or []]
            for player in self.players
        ]

    def get_supply(self) -> dict[str, list]:
        return {
            "cities": self._player_field("cities", 0),
            "starports": self._player_field("spaceports", 0),
            "ships": self._player_field("ships", 0),
            "agents": self._player_field("agents", 0),
            # Favors are not exported by the mod yet
            "favors": [[] for _ in self.players],
        }

    def get_player_data(self) -> dict[str, Any]:
        """Build the `playerData` half of the payload.

        Every list is index-aligned with the export's `players`.
        """
        count = self.player_count
        return {
            "name": [player.get("name") or "" for player in self.players],
            "fate": self.get_fates(),
            "color": self.get_colors(),
            "power": self._player_field("power", 0),
            "objectiveProgress": [player.get("objective") or 0 for player in self.players],
            "resources": self.get_resources(),
            "supply": self.get_supply(),
            "outrage": [normalize_outrage(player.get("outrage")) for player in self.players],
            "courtCards": [
                [normalize_token(card) for card in player.get("court") or []]
                for player in self.players
            ],
            "ambitionProgress": self.get_all_ambition_rankings(),
            # Flagships are not part of the export; keep the slots so the
            # overlay layout stays stable.
            "hasFlagship": [False] * count,
            "flagshipBoard": [[""] for _ in range(count)],
            "titles": [list(player.get("titles") or []) for player in self.players],
        }
