"""Pytest configuration and shared fixtures for the Arcs game data tests."""

import copy
import json
import os
import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return Path(__file__).resolve().parents[1]


@pytest.fixture(scope="session")
def sample_export_path():
    return FIXTURES_DIR / "sample_export.json"


@pytest.fixture(scope="session")
def _sample_export_pristine(sample_export_path):
    return json.loads(sample_export_path.read_text(encoding="utf-8"))


@pytest.fixture
def sample_export(_sample_export_pristine):
    """A fresh copy of the four-player campaign export, safe to modify."""
    return copy.deepcopy(_sample_export_pristine)


@pytest.fixture
def make_player():
    """Build a minimal well-formed player entry."""

    def _make(color="0095A9", cards=None, **overrides):
        player = {
            "color": color,
            "power": 0,
            "resources": [None] * 6,
            "outrage": [],
            "cities": 5,
            "spaceports": 5,
            "ships": 15,
            "agents": 10,
            "cards": ["ARCS-FATE01"] if cards is None else cards,
            "court": [],
            "titles": [],
        }
        player.update(overrides)
        return player

    return _make
