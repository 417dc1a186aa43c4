"""
Arcs Companion Core
===================

Server-side collaborators of the transformer: runtime config and the
last-known game data store.
"""

# Lazy imports so the CLI does not pay for the store's imports
__all__ = ["GameDataStore", "OverlayConfig"]


def __getattr__(name):
    """Lazy import to avoid import cycles at module load time."""
    if name == "GameDataStore":
        from .state_store import GameDataStore

        return GameDataStore
    elif name == "OverlayConfig":
        from .config import OverlayConfig

        return OverlayConfig
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
