import json
from pathlib import Path

import main

LUNCH = Path(__file__).parent.parent / "wheels" / "lunch.json"


def test_simulate_prints_report(capsys):
    assert main.main([str(LUNCH), "--simulate", "400", "--seed", "1"]) == 0
    report = json.loads(capsys.readouterr().out)
    assert report["rounds"] == 400
    assert [s["label"] for s in report["segments"]] == ["Tacos", "Pizza", "Sushi", "Salad"]


def test_simulate_default_wheel(capsys):
    assert main.main(["--simulate", "10"]) == 0
    report = json.loads(capsys.readouterr().out)
    assert len(report["segments"]) == 2


def test_missing_wheel_file_exits_with_error(tmp_path, capsys):
    assert main.main([str(tmp_path / "nope.json"), "--simulate", "1"]) == 1
    assert "not found" in capsys.readouterr().err


def test_invalid_wheel_file_exits_with_error(tmp_path, capsys):
    path = tmp_path / "empty.json"
    path.write_text(json.dumps({"name": "Empty", "segments": []}), encoding="utf-8")
    assert main.main([str(path), "--simulate", "1"]) == 1
    assert "Invalid wheel" in capsys.readouterr().err


def test_non_utf8_wheel_file_exits_with_error(tmp_path, capsys):
    path = tmp_path / "binary.json"
    path.write_bytes(b"\xff\xfe{\x00}\x00")
    assert main.main([str(path), "--simulate", "1"]) == 1
    assert "Invalid wheel" in capsys.readouterr().err


def test_wheel_with_non_object_segments_exits_with_error(tmp_path, capsys):
    path = tmp_path / "strings.json"
    path.write_text(json.dumps({"name": "Strings", "segments": ["a", "b"]}), encoding="utf-8")
    assert main.main([str(path), "--simulate", "1"]) == 1
    assert "segment 0 must be an object" in capsys.readouterr().err
