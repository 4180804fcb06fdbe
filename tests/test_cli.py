import json
from pathlib import Path

import pytest

from deep_map.__main__ import main


EXAMPLE = {"user": {"name": "Alice", "address": {"city": "Wonderland", "zip": 12345}}, "active": True}
FLAT = {"user.name": "Alice", "user.address.city": "Wonderland", "user.address.zip": 12345, "active": True}


def _write(tmp_path: Path, document: object) -> str:
    path = tmp_path / "input.json"
    _ = path.write_text(json.dumps(document), encoding="utf-8")
    return str(path)


def test_flatten(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["flatten", _write(tmp_path, EXAMPLE)])
    output = capsys.readouterr().out
    assert json.loads(output) == FLAT
    assert list(json.loads(output)) == list(FLAT)


def test_unflatten(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["unflatten", _write(tmp_path, FLAT), "--indent", "2"])
    output = capsys.readouterr().out
    assert json.loads(output) == EXAMPLE
    assert output.startswith("{\n  ")


def test_reads_stdin(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    class _Stdin:
        @staticmethod
        def read() -> str:
            return json.dumps({"a": {"b": [1, 2]}})

    monkeypatch.setattr("sys.stdin", _Stdin())
    main(["flatten"])
    assert json.loads(capsys.readouterr().out) == {"a.b": [1, 2]}


def test_conflict_is_reported(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["unflatten", _write(tmp_path, {"a.b": 1, "a.b.c": 2})])
    assert excinfo.value.code == 2
    assert 'Path conflict at "a.b.c"' in capsys.readouterr().err


def test_invalid_key_is_reported(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit):
        main(["flatten", _write(tmp_path, {"a.b": 1})])
    assert "must not contain separator" in capsys.readouterr().err


def test_non_object_input_is_reported(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit):
        main(["flatten", _write(tmp_path, [1, 2])])
    assert "input must be a JSON object" in capsys.readouterr().err


def test_invalid_json_is_reported(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "broken.json"
    _ = path.write_text("{", encoding="utf-8")
    with pytest.raises(SystemExit):
        main(["flatten", str(path)])
    assert "invalid JSON input" in capsys.readouterr().err


def test_missing_file_is_reported(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit):
        main(["flatten", str(tmp_path / "absent.json")])
    assert "cannot read" in capsys.readouterr().err


def test_version(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])
    assert excinfo.value.code == 0
    assert capsys.readouterr().out.strip()
