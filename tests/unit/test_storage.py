"""Unit tests for snapshot publishing."""

import json
from datetime import datetime
from pathlib import Path
from zoneinfo import ZoneInfo

from nowshowing.pipeline.assembler import build_snapshot, failure_snapshot
from nowshowing.storage import read_snapshot, write_snapshot

NOW = datetime(2026, 10, 19, 17, 30, tzinfo=ZoneInfo("Europe/London"))


class TestWriteSnapshot:
    def test_creates_parent_directories(self, tmp_path: Path) -> None:
        target = tmp_path / "public" / "nested" / "out.json"
        write_snapshot(failure_snapshot("boom", NOW), target)
        assert target.exists()

    def test_writes_utf8_json(self, tmp_path: Path) -> None:
        target = tmp_path / "out.json"
        write_snapshot(build_snapshot("Amélie\n18:00", now=NOW), target)
        data = json.loads(target.read_text(encoding="utf-8"))
        assert data["today_showings"][0]["film"] == "Amélie"
        assert data["generated_at"].startswith("2026-10-19T17:30:00")

    def test_overwrites_existing_file(self, tmp_path: Path) -> None:
        target = tmp_path / "out.json"
        target.write_text("not json")
        write_snapshot(failure_snapshot("boom", NOW), target)
        assert json.loads(target.read_text())["error"] == "boom"

    def test_leaves_no_temp_files(self, tmp_path: Path) -> None:
        write_snapshot(failure_snapshot("boom", NOW), tmp_path / "out.json")
        assert [p.name for p in tmp_path.iterdir()] == ["out.json"]


class TestReadSnapshot:
    def test_round_trips(self, tmp_path: Path) -> None:
        target = tmp_path / "out.json"
        original = build_snapshot("Dune\n18:00", now=NOW)
        write_snapshot(original, target)
        assert read_snapshot(target).model_dump() == original.model_dump()

    def test_missing_file(self, tmp_path: Path) -> None:
        assert read_snapshot(tmp_path / "missing.json") is None

    def test_corrupt_file(self, tmp_path: Path) -> None:
        target = tmp_path / "out.json"
        target.write_text("{")
        assert read_snapshot(target) is None
