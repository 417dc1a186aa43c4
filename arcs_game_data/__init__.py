"""Arcs game data package.

The main entrypoint is `arcs_game_data.GameDataTransformer`; most callers
only need `convert_export()`, which validates a Tabletop Playground export
and returns the overlay's `{"playerData", "gameData"}` payload.
"""

from .transformer import GameDataTransformer, convert_export
from .validation import ExportValidator, MalformedExportError, validate_export

__version__ = "1.0.0"

__all__ = [
    "ExportValidator",
    "GameDataTransformer",
    "MalformedExportError",
    "convert_export",
    "validate_export",
]
