"""Integration tests for the `foundation-mcp` command line."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest
from loguru import logger
from typer.testing import CliRunner

from foundation_mcp.cli.main import app

from .test_pattern_analyzer import FULL_PLUGIN

runner = CliRunner()

QUIET_ENV = {"MCP_LOG_LEVEL": "ERROR", "CACHE_BACKEND": "memory", "MCP_LOG_FILE": ""}


@pytest.fixture(autouse=True)
def restore_logging():
    yield
    # The CLI callback replaces every loguru sink
    logger.remove()
    logger.add(sys.stderr)


class TestIndexCommand:
    def test_index_repo(self, foundation_repo: Path) -> None:
        result = runner.invoke(app, ["--repo", str(foundation_repo), "index"], env=QUIET_ENV)

        assert result.exit_code == 0
        assert "Foundation catalog" in result.output
        assert "Plugins" in result.output
        assert "Index built" in result.output

    def test_index_empty_directory_warns(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["--repo", str(tmp_path), "index", "--refresh"], env=QUIET_ENV)

        assert result.exit_code == 0
        assert "is --repo a Foundation checkout?" in result.output

    def test_invalid_configuration(self, foundation_repo: Path) -> None:
        env = {**QUIET_ENV, "CACHE_TTL": "0"}
        result = runner.invoke(app, ["--repo", str(foundation_repo), "index"], env=env)

        assert result.exit_code == 1
        assert "Invalid configuration" in result.output


class TestAnalyzeCommand:
    def test_analyze_plugin_file(self, tmp_path: Path) -> None:
        plugin = tmp_path / "foundation.drawer.js"
        plugin.write_text(FULL_PLUGIN)

        result = runner.invoke(app, ["--repo", str(tmp_path), "analyze", str(plugin)], env=QUIET_ENV)

        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["matches"] == "matches"
        assert payload["conformance"]["accessibility"] == 100

    def test_unsupported_type(self, tmp_path: Path) -> None:
        plugin = tmp_path / "foundation.drawer.js"
        plugin.write_text(FULL_PLUGIN)

        result = runner.invoke(
            app, ["--repo", str(tmp_path), "analyze", str(plugin), "--type", "utility"], env=QUIET_ENV
        )

        assert result.exit_code == 0
        assert json.loads(result.stdout)["matches"] == "no-match"

    def test_missing_file(self, tmp_path: Path) -> None:
        result = runner.invoke(
            app, ["--repo", str(tmp_path), "analyze", str(tmp_path / "nope.js")], env=QUIET_ENV
        )
        assert result.exit_code != 0


class TestRefactorCommand:
    def test_refactor_component(self, foundation_repo: Path, tmp_path: Path) -> None:
        source = tmp_path / "notice.scss"
        source.write_text(".notice { margin: 0; }\n")

        result = runner.invoke(
            app,
            [
                "--repo",
                str(foundation_repo),
                "refactor",
                str(source),
                "--type",
                "component",
                "--target",
                "callout",
            ],
            env=QUIET_ENV,
        )

        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["suggestedMatches"][0]["slug"] == "callout"
        assert payload["migrationSteps"][0] == "0. Study Callout component as reference"

    def test_refactor_unparseable_source(self, foundation_repo: Path, tmp_path: Path) -> None:
        source = tmp_path / "broken.js"
        source.write_text("class {")

        result = runner.invoke(
            app,
            ["--repo", str(foundation_repo), "refactor", str(source), "--type", "plugin"],
            env=QUIET_ENV,
        )

        assert result.exit_code == 1
        assert "Failed to parse JavaScript plugin" in result.output
