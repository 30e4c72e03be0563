from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from sourcecanon.domain.resolution import resolve_sources
from sourcecanon.ui import cli
from tests.helpers.sources import bundled_app

if TYPE_CHECKING:
    from pathlib import Path


def test_cli_resolve_prints_all_descriptions(
    announcements_file: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    cli.main(["resolve", str(announcements_file)])

    output = json.loads(capsys.readouterr().out)
    assert sorted(output) == ["1", "o1", "pp1", "ppo1"]
    assert output["1"]["canonicalId"] == "o1"
    assert output["o1"]["prettyPrinted"] == "ppo1"


def test_cli_resolve_single_source_includes_alternates(
    announcements_file: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    cli.main(["resolve", str(announcements_file), "--source", "pp1"])

    output = json.loads(capsys.readouterr().out)
    assert output["id"] == "pp1"
    assert output["alternateIds"] == ["o1", "1"]
    assert output["correspondingSourceIds"] == []


def test_cli_missing_file_exits_with_usage_error(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as exc:
        cli.main(["resolve", str(tmp_path / "missing.jsonl")])

    assert exc.value.code == 2


def test_cli_resolution_error_exits_with_failure(tmp_path: Path) -> None:
    path = tmp_path / "cyclic.jsonl"
    payloads = [
        {"sourceId": "a", "kind": "sourceMapped", "generatedSourceIds": ["b"]},
        {"sourceId": "b", "kind": "sourceMapped", "generatedSourceIds": ["a"]},
    ]
    path.write_text("\n".join(json.dumps(payload) for payload in payloads), encoding="utf-8")

    with pytest.raises(SystemExit) as exc:
        cli.main(["resolve", str(path)])

    assert exc.value.code == 1


def test_cli_import_and_show_delegate_to_app(
    monkeypatch: pytest.MonkeyPatch,
    announcements_file: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    captured: dict[str, object] = {}

    def fake_import(path: Path, *, recording_id: str) -> int:
        captured["path"] = path
        captured["recording_id"] = recording_id
        return 4

    def fake_resolve(recording_id: str) -> object:
        captured["shown"] = recording_id
        return resolve_sources(bundled_app())

    monkeypatch.setattr(cli, "import_announcements", fake_import)
    monkeypatch.setattr(cli, "resolve_recording", fake_resolve)

    cli.main(["import", str(announcements_file), "--recording", "rec-1"])
    cli.main(["show", "--recording", "rec-1", "--source", "1"])

    assert captured == {
        "path": announcements_file,
        "recording_id": "rec-1",
        "shown": "rec-1",
    }
    output = json.loads(capsys.readouterr().out)
    assert output["canonicalId"] == "o1"
    assert output["prettyPrinted"] == "pp1"


def test_cli_show_unknown_source_exits_with_usage_error(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setattr(cli, "resolve_recording", lambda recording_id: resolve_sources([]))

    with pytest.raises(SystemExit) as exc:
        cli.main(["show", "--recording", "rec-1", "--source", "nope"])

    assert exc.value.code == 2


def test_cli_show_empty_recording_exits_with_usage_error(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    def fake_resolve(recording_id: str) -> object:
        raise LookupError(f"No announcements stored for recording {recording_id!r}")

    monkeypatch.setattr(cli, "resolve_recording", fake_resolve)

    with pytest.raises(SystemExit) as exc:
        cli.main(["show", "--recording", "rec-empty"])

    assert exc.value.code == 2


def test_cli_undecodable_file_exits_with_usage_error(tmp_path: Path) -> None:
    path = tmp_path / "latin1.jsonl"
    path.write_bytes(b'{"sourceId": "1", "kind": "other", "url": "/caf\xe9.js"}\n')

    with pytest.raises(SystemExit) as exc:
        cli.main(["resolve", str(path)])

    assert exc.value.code == 2


def test_cli_invalid_log_level_exits_with_usage_error(
    monkeypatch: pytest.MonkeyPatch,
    announcements_file: Path,
) -> None:
    monkeypatch.setenv("SOURCECANON_LOG_LEVEL", "chatty")

    with pytest.raises(SystemExit) as exc:
        cli.main(["resolve", str(announcements_file)])

    assert exc.value.code == 2


def test_cli_requires_a_command() -> None:
    with pytest.raises(SystemExit) as exc:
        cli.main([])

    assert exc.value.code == 2
