"""Static lookup tables for Arcs exports.

Tokens are kept in their normalized form (first `-` replaced with `_`), which
is what the overlay extension keys its artwork on.
"""

from __future__ import annotations

from typing import Literal

ColorName = Literal["blue", "yellow", "white", "red"]

# Player color hex codes as written by the Tabletop Playground export
PLAYER_COLORS: dict[str, ColorName] = {
    "0095A9": "blue",
    "FFB700": "yellow",
    "D7D2CB": "white",
    "E1533D": "red",
}
DEFAULT_COLOR: ColorName = "white"

# Order matters: the overlay renders ambitions in this order
AMBITION_IDS: tuple[str, ...] = (
    "tycoon",
    "tyrant",
    "warlord",
    "keeper",
    "empath",
    "blightkin",
    "edenguard",
)

# Declared ambition marker (by its power value) -> overlay label
AMBITION_MARKER_LABELS: dict[int, str] = {
    9: "firstGold",
    6: "secondGold",
    4: "thirdGold",
    5: "firstSilver",
    3: "secondSilver",
    2: "thirdSilver",
}

UNKNOWN_AMBITION_PODIUM: list[list[int]] = [[-1], [-1]]

OUTRAGE_SLOTS = 5

# Campaign (Blighted Reach) fate cards
FATE_NAMES: dict[str, str] = {
    "ARCS_FATE01": "Steward",
    "ARCS_FATE02": "Founder",
    "ARCS_FATE03": "Magnate",
    "ARCS_FATE04": "Advocate",
    "ARCS_FATE05": "Caretaker",
    "ARCS_FATE06": "Partisan",
    "ARCS_FATE07": "Admiral",
    "ARCS_FATE08": "Believer",
    "ARCS_FATE09": "Pathfinder",
    "ARCS_FATE10": "Hegemon",
    "ARCS_FATE11": "Planet Breaker",
    "ARCS_FATE12": "Pirate",
    "ARCS_FATE13": "Blight Speaker",
    "ARCS_FATE14": "Pacifist",
    "ARCS_FATE15": "Peacekeeper",
    "ARCS_FATE16": "Warden",
    "ARCS_FATE17": "Overlord",
    "ARCS_FATE18": "Survivalist",
    "ARCS_FATE19": "Redeemer",
    "ARCS_FATE20": "Guardian",
    "ARCS_FATE21": "Naturalist",
    "ARCS_FATE22": "Gatekeeper",
    "ARCS_FATE23": "Conspirator",
    "ARCS_FATE24": "Judge",
}

STEWARD_FATE = "ARCS_FATE01"
GUARDIAN_FATE = "ARCS_FATE20"  # brings the edenguard ambition
NATURALIST_FATE = "ARCS_FATE21"  # brings the blightkin ambition

DEFAULT_FATE = STEWARD_FATE

FATE_MARKER = "FATE"


def normalize_token(token: str) -> str:
    """Normalize an export card id (`ARCS-CC07` -> `ARCS_CC07`).

    Only the first hyphen is replaced; later hyphens are part of the card
    name in a few expansion ids.
    """
    return token.replace("-", "_", 1)


def marker_label(marker: object) -> str | None:
    """Label for a declared ambition marker, or None if it is not a known value.

    Markers arrive as ints, or as numeric strings from older mod builds.
    """
    if isinstance(marker, str) and marker.strip().isdigit():
        marker = int(marker)
    if not isinstance(marker, int) or isinstance(marker, bool):
        return None
    return AMBITION_MARKER_LABELS.get(marker)


def fate_name(token: str) -> str:
    """Display name for a normalized fate token (`ARCS_FATE04` -> `Advocate`)."""
    return FATE_NAMES.get(token, "Unknown fate")
