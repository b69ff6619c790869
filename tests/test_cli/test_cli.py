"""
Tests for event_ranker/cli.py, driven through typer's CliRunner.

What we test
------------
- recommend: prints ranked events and the page footer; a relative
  ``--catalog`` is read from the working directory; a page past the last one
  is rejected with exit code 1; ``--export`` writes the file.
- validate-catalog: a relative ``--file`` is read from the working directory;
  a missing file exits 1.
- Invalid preferences (duplicate skills) exit 1 without a traceback.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
from typer.testing import CliRunner

from event_ranker.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    yield
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


@pytest.fixture
def config_file(tmp_path, catalog_path) -> Path:
    """Config pointing at the committed catalog, with file logging off."""
    path = tmp_path / "cfg.toml"
    path.write_text(
        f'[catalog]\ncatalog_file = "{catalog_path.as_posix()}"\n'
        '[display]\npage_size = 5\n'
        '[logging]\nlevel = "WARNING"\nlog_file = ""\n',
        encoding="utf-8",
    )
    return path


def _write_catalog(directory: Path) -> Path:
    path = directory / "mycat.json"
    path.write_text(
        json.dumps(
            [
                {"name": "Local Finance Event", "category": "Finance",
                 "tags": ["Finance"], "popularity": "Low"},
                {"name": "Local Marketing Event", "category": "Marketing",
                 "tags": ["Marketing"], "popularity": "High"},
            ]
        ),
        encoding="utf-8",
    )
    return path


class TestRecommend:
    def test_prints_ranked_events(self, config_file):
        result = runner.invoke(app, ["recommend", "-s", "Finance", "--config", str(config_file)])
        assert result.exit_code == 0, result.output
        assert "Principles of Finance" in result.output
        assert "Page 1 of" in result.output

    def test_relative_catalog_read_from_cwd(self, tmp_path, config_file, monkeypatch):
        _write_catalog(tmp_path)
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(
            app,
            ["recommend", "-s", "Finance", "--catalog", "mycat.json", "--config", str(config_file)],
        )
        assert result.exit_code == 0, result.output
        assert "Local Finance Event" in result.output
        assert "Principles of Finance" not in result.output

    def test_page_past_end_rejected(self, config_file):
        result = runner.invoke(
            app, ["recommend", "-s", "Finance", "--page", "99", "--config", str(config_file)]
        )
        assert result.exit_code == 1
        assert "[ERROR] Page 99 is out of range" in result.output

    def test_last_page_accepted(self, tmp_path, config_file, monkeypatch):
        _write_catalog(tmp_path)
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(
            app,
            ["recommend", "-s", "Finance", "--catalog", "mycat.json",
             "--page-size", "1", "--page", "2", "--config", str(config_file)],
        )
        assert result.exit_code == 0, result.output
        assert "Page 2 of 2" in result.output
        assert "Local Marketing Event" in result.output

    def test_duplicate_skill_rejected(self, config_file):
        result = runner.invoke(
            app, ["recommend", "-s", "Finance", "-s", "Finance", "--config", str(config_file)]
        )
        assert result.exit_code == 1
        assert "Invalid preferences" in result.output

    def test_export_json(self, tmp_path, config_file):
        out = tmp_path / "ranked.json"
        result = runner.invoke(
            app,
            ["recommend", "-s", "Finance", "--export", str(out), "--config", str(config_file)],
        )
        assert result.exit_code == 0, result.output
        payload = json.loads(out.read_text(encoding="utf-8"))
        assert payload["results"][0]["name"] == "Principles of Finance"


class TestValidateCatalog:
    def test_relative_file_read_from_cwd(self, tmp_path, config_file, monkeypatch):
        _write_catalog(tmp_path)
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(
            app, ["validate-catalog", "--file", "mycat.json", "--config", str(config_file)]
        )
        assert result.exit_code == 0, result.output
        assert "Events: 2" in result.output

    def test_missing_file_exits_1(self, tmp_path, config_file, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(
            app, ["validate-catalog", "--file", "absent.json", "--config", str(config_file)]
        )
        assert result.exit_code == 1
        assert "Catalog file not found: absent.json" in result.output
