"""Tests for the publish CLI helpers."""

import argparse
import json
from pathlib import Path

import pytest

from nowshowing.config import settings
from nowshowing.scripts.publish_snapshot import load_document, parse_now, publish


class TestLoadDocument:
    def test_json_file_is_api_pairs(self, tmp_path: Path) -> None:
        path = tmp_path / "pairs.json"
        path.write_text(json.dumps([["Dune", ["18:00"]]]))
        assert load_document(path) == [["Dune", ["18:00"]]]

    def test_other_files_are_text(self, tmp_path: Path) -> None:
        path = tmp_path / "page.html"
        path.write_text("<p>Dune</p>")
        assert load_document(path) == "<p>Dune</p>"


class TestParseNow:
    def test_sets_todays_time(self) -> None:
        moment = parse_now("17:30")
        assert (moment.hour, moment.minute, moment.second) == (17, 30, 0)
        assert moment.tzinfo is not None

    def test_accepts_12_hour(self) -> None:
        assert parse_now("9:05 pm").hour == 21

    def test_rejects_garbage(self) -> None:
        with pytest.raises(argparse.ArgumentTypeError):
            parse_now("teatime")


class TestPublish:
    async def test_publishes_saved_page(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        page = tmp_path / "page.txt"
        page.write_text("Y\n17:00 19:10\nX\n18:00\n")
        output = tmp_path / "out.json"
        args = argparse.Namespace(
            mode="browser",
            output=output,
            input=page,
            now=parse_now("17:30"),
            no_block=False,
        )

        assert await publish(args) is True

        data = json.loads(output.read_text())
        assert data["source"] == "file:text-sweep"
        assert data["next_starting"]["film"] == "X"
        assert "next starting:  18:00  X" in capsys.readouterr().out

    async def test_no_block_leaves_settings_alone(self, tmp_path: Path) -> None:
        page = tmp_path / "page.txt"
        page.write_text("Dune\n18:00\n")
        output = tmp_path / "out.json"
        args = argparse.Namespace(
            mode="browser",
            output=output,
            input=page,
            now=parse_now("17:30"),
            no_block=True,
        )

        assert await publish(args) is True

        assert "today_block" not in json.loads(output.read_text())
        assert settings.include_today_block is True
