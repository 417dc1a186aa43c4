import io
import json

import pytest

from backend.main import main


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    monkeypatch.setenv("ARCS_LOG_LEVEL", "WARNING")
    monkeypatch.delenv("ARCS_LOG_DIR", raising=False)


def test_transform_file_prints_game_data(capsys, sample_export_path):
    assert main([str(sample_export_path)]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert set(payload) == {"playerData", "gameData"}
    assert payload["playerData"]["color"] == ["blue", "red", "yellow", "white"]
    assert payload["gameData"]["ambitionPodium"]["keeper"] == [[], [0, 1, 2, 3]]


def test_pretty_output_is_indented(capsys, sample_export_path):
    assert main([str(sample_export_path), "--pretty"]) == 0

    out = capsys.readouterr().out
    assert out.startswith("{\n  ")
    json.loads(out)


def test_reads_stdin(capsys, monkeypatch, sample_export):
    stdin = io.TextIOWrapper(io.BytesIO(json.dumps(sample_export).encode("utf-8")))
    monkeypatch.setattr("sys.stdin", stdin)

    assert main(["-"]) == 0
    assert json.loads(capsys.readouterr().out)["gameData"]["edicts"] == ["ARCS_AID05A"]


def test_malformed_export_exits_2(capsys, tmp_path, sample_export):
    del sample_export["players"]
    path = tmp_path / "export.json"
    path.write_text(json.dumps(sample_export), encoding="utf-8")

    assert main([str(path)]) == 2

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "players" in captured.err


def test_invalid_json_exits_2(capsys, tmp_path):
    path = tmp_path / "export.json"
    path.write_text("{not json", encoding="utf-8")

    assert main([str(path)]) == 2
    assert "not valid JSON" in capsys.readouterr().err


def test_missing_file_exits_2(capsys, tmp_path):
    assert main([str(tmp_path / "nope.json")]) == 2
    assert "cannot read" in capsys.readouterr().err


def test_check_reports_issues(capsys, tmp_path, sample_export):
    sample_export["court"][1]["influence"] = [4, 0]
    path = tmp_path / "export.json"
    path.write_text(json.dumps(sample_export), encoding="utf-8")

    assert main([str(path), "--check"]) == 1

    report = json.loads(capsys.readouterr().out)
    assert report["valid"] is False
    assert report["issues"][0]["check"] == "influence_length"


def test_check_passes_on_sample(capsys, sample_export_path):
    assert main([str(sample_export_path), "--check"]) == 0
    assert json.loads(capsys.readouterr().out)["valid"] is True


def test_no_validate_transforms_well_formed_export(capsys, sample_export_path):
    assert main([str(sample_export_path), "--no-validate"]) == 0
    assert json.loads(capsys.readouterr().out)["gameData"]["isCampaign"] is True


def test_no_validate_missing_ambitions_exits_2(capsys, tmp_path, sample_export):
    del sample_export["ambitions"]
    path = tmp_path / "export.json"
    path.write_text(json.dumps(sample_export), encoding="utf-8")

    assert main([str(path), "--no-validate"]) == 2

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "expected shape" in captured.err
    assert "ambitions" in captured.err


def test_string_influence_is_rejected_before_transform(capsys, tmp_path, sample_export):
    sample_export["court"][1]["influence"] = ["4", "0", "1", "1"]
    path = tmp_path / "export.json"
    path.write_text(json.dumps(sample_export), encoding="utf-8")

    assert main([str(path)]) == 2
    assert "court.1.influence" in capsys.readouterr().err
