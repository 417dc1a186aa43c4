from pathlib import Path

import tomllib

import arcs_game_data


def test_versions_match_across_pyproject_and_package():
    """Release safety check: keep the package and pyproject versions in sync."""
    repo_root = Path(__file__).resolve().parents[1]

    pyproject = tomllib.loads((repo_root / "pyproject.toml").read_text(encoding="utf-8"))
    python_version = pyproject["project"]["version"]

    assert python_version == arcs_game_data.__version__, (
        f"Version mismatch: pyproject.toml={python_version} "
        f"arcs_game_data.__version__={arcs_game_data.__version__}"
    )
