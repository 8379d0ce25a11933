"""Tests for the command-line interface."""

import json
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from flowday.cli import main
from flowday.config import Config
from flowday.core.window import add_days, today_iso


@pytest.fixture
def config(tmp_path):
    return Config(data_dir=str(tmp_path / "data"))


@pytest.fixture
def run(config):
    runner = CliRunner()

    def _run(*args: str):
        with patch("flowday.cli.load_config", return_value=config):
            return runner.invoke(main, list(args))

    return _run


class TestLog:
    def test_records_today(self, run):
        result = run("log", "-e", "😀", "-e", "🔥", "--hue", "200")
        assert result.exit_code == 0
        assert "😀 🔥" in result.output
        assert "hue 200" in result.output

    def test_song(self, run):
        run("log", "-e", "🎧")
        result = run("log", "--title", "Heroes", "--artist", "Bowie")
        assert "♪ Heroes • Bowie" in result.output

    def test_locked_day_fails(self, run):
        result = run("log", "--date", add_days(today_iso(), -3), "-e", "😀")
        assert result.exit_code == 1
        assert "read-only" in result.output

    def test_bad_date_fails(self, run):
        result = run("log", "--date", "yesterday", "-e", "😀")
        assert result.exit_code == 1
        assert "YYYY-MM-DD" in result.output

    def test_hue_needs_emoji(self, run):
        result = run("log", "--hue", "100", "--title", "x")
        assert "Pick an emoji first" in result.output

    def test_hue_out_of_range(self, run):
        result = run("log", "-e", "😀", "--hue", "400")
        assert result.exit_code == 2


class TestDrop:
    def test_removes_slot(self, run):
        run("log", "-e", "😀", "-e", "🔥")
        result = run("drop", "1")
        assert result.exit_code == 0
        assert "😀" not in result.output
        assert "🔥" in result.output


class TestShow:
    def test_missing(self, run):
        result = run("show", "--date", "2020-01-01")
        assert "No entry for 2020-01-01." in result.output

    def test_json(self, run):
        run("log", "-e", "😀", "--hue", "90")
        result = run("show", "--json")
        data = json.loads(result.output)
        assert data["emojis"] == ["😀"]
        assert data["hue"] == 90
        assert data["date"] == today_iso()


class TestViews:
    def test_week_empty(self, run):
        result = run("week")
        assert "No entries yet." in result.output

    def test_week_json_past_offset(self, run):
        result = run("week", "--offset", "2", "--json")
        data = json.loads(result.output)
        assert len(data) == 7
        assert all(d["emojis"] == [] for d in data)

    def test_month_empty(self, run):
        result = run("month")
        assert "No colors recorded" in result.output

    def test_month_with_colors(self, run):
        run("log", "-e", "😀", "--hue", "210")
        result = run("month", "--json")
        data = json.loads(result.output)
        assert data["families"] == [210]
        assert data["empty"] is False

    def test_timeline(self, run):
        run("log", "-e", "😀")
        result = run("timeline")
        lines = result.output.strip().splitlines()
        assert len(lines) == 13
        assert lines[0].startswith("Today")
        assert "😀" in lines[0]

    def test_timeline_bad_date_fails(self, run):
        result = run("timeline", "--date", "yesterday")
        assert result.exit_code == 1
        assert "Error: Invalid date" in result.output
        assert "YYYY-MM-DD" in result.output

    def test_month_json_keeps_shape(self, run):
        run("log", "-e", "😀", "--hue", "30")
        result = run("month", "--json")
        data = json.loads(result.output)
        assert set(data) == {"month", "families", "stops", "empty"}
        assert data["stops"] == [30]

    def test_stats(self, run):
        run("log", "-e", "😀", "-e", "🔥")
        result = run("stats")
        assert "Most used:" in result.output
        assert "😀 + 🔥  1" in result.output

    def test_stats_empty(self, run):
        assert "No emojis recorded." in run("stats").output

    def test_recents(self, run):
        run("log", "-e", "😀")
        assert "😀" in run("recents").output


class TestImportExport:
    def test_export_then_import(self, run, tmp_path):
        run("log", "-e", "😀")
        exported = run("export").output
        assert json.loads(exported)["version"] == 2

        other = tmp_path / "other.json"
        other.write_text(
            json.dumps([{"date": "2024-06-01", "emojis": ["🌊"], "updatedAt": 1}])
        )
        result = run("import", str(other))
        assert "1 entries imported" in result.output
        assert "🌊" in run("show", "--date", "2024-06-01").output
