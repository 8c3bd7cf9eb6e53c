"""Tests for plugin conformance scoring."""

from __future__ import annotations

from pathlib import Path

import pytest

from foundation_mcp.analysis import PatternAnalyzer
from foundation_mcp.analysis.patterns import classify
from foundation_mcp.core.filesystem import LocalFileSource
from foundation_mcp.core.models import Conformance

FULL_PLUGIN = """\
/**
 * @class Drawer
 * Slide-in drawer
 */
import { Plugin } from './foundation.core.plugin';
import { Keyboard } from './foundation.util.keyboard';

export class Drawer extends Plugin {
  constructor(element, options) {
    super(element, options);
  }

  _init() {
    this.$element.attr('aria-hidden', 'true');
    Keyboard.register('Drawer', { ESCAPE: 'close' });
    this.$element.trigger('init.zf.drawer');
  }

  open() {
    this.$element.focus();
    this.$element.trigger('open.zf.drawer');
  }

  _destroy() {
    this.$element.off('.zf.drawer');
  }
}
"""


class TestAnalyzePlugin:
    def test_conforming_plugin(self) -> None:
        result = PatternAnalyzer().analyze_plugin(FULL_PLUGIN)

        assert result.conformance == Conformance(architecture=80, conventions=100, accessibility=100)
        assert result.matches == "matches"
        assert result.issues == []
        # Architecture tops out at 80, which is not below the threshold
        assert result.suggestions == []

    def test_minimal_class(self) -> None:
        result = PatternAnalyzer().analyze_plugin("class widget {}\n")

        assert result.conformance == Conformance(architecture=0, conventions=50, accessibility=0)
        assert result.matches == "no-match"
        messages = [issue.message for issue in result.issues]
        assert "Plugin must extend the Plugin base class" in messages
        assert "Missing required method: _init" in messages
        assert "Missing required method: _destroy" in messages
        assert "Plugin class name should be PascalCase" in messages
        assert len(result.suggestions) == 3

    def test_partial_match(self) -> None:
        code = """\
export class Drawer extends Plugin {
  constructor(element, options) { super(element, options); }
  _init() {}
  _destroy() {}
}
"""
        result = PatternAnalyzer().analyze_plugin(code)

        # 80 + (30 + 20 + 30) + 0
        assert result.conformance.conventions == 80
        assert result.matches == "partial-match"
        assert result.suggestions == ["Improve accessibility with ARIA and keyboard support"]

    def test_non_namespaced_event(self) -> None:
        code = FULL_PLUGIN.replace("'open.zf.drawer'", "'opened'")
        result = PatternAnalyzer().analyze_plugin(code)

        assert result.conformance.conventions == 80
        warnings = [issue for issue in result.issues if issue.severity == "warning"]
        assert [w.message for w in warnings] == ["Events should use .zf.{plugin} namespace"]

    def test_missing_destroy_costs_lifecycle_points(self) -> None:
        code = FULL_PLUGIN.replace("_destroy()", "teardown()")
        result = PatternAnalyzer().analyze_plugin(code)

        assert result.conformance.architecture == 40
        errors = [issue for issue in result.issues if issue.severity == "error"]
        assert [e.message for e in errors] == ["Missing required method: _destroy"]

    def test_parse_failure(self) -> None:
        result = PatternAnalyzer().analyze_plugin("export class {{{")

        assert result.matches == "no-match"
        assert result.conformance == Conformance()
        assert result.issues[0].severity == "error"
        assert result.issues[0].message == "Failed to parse code"
        assert result.suggestions == ["Fix syntax errors before analyzing"]

    def test_wire_format(self) -> None:
        wire = PatternAnalyzer().analyze_plugin(FULL_PLUGIN).to_wire()
        assert set(wire) == {"matches", "issues", "conformance", "suggestions"}
        assert wire["conformance"] == {"architecture": 80, "conventions": 100, "accessibility": 100}


class TestAnalyzePattern:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("pattern_type", ["component", "utility", "test"])
    async def test_unsupported_types(self, pattern_type: str) -> None:
        result = await PatternAnalyzer().analyze_pattern(FULL_PLUGIN, pattern_type)

        assert result.matches == "no-match"
        assert result.issues == []
        assert result.suggestions == ["Analysis for this pattern type is not yet implemented"]

    @pytest.mark.asyncio
    async def test_reads_code_from_file_path(self, tmp_path: Path) -> None:
        path = tmp_path / "foundation.drawer.js"
        path.write_text(FULL_PLUGIN)

        result = await PatternAnalyzer(LocalFileSource()).analyze_pattern(str(path), "plugin")

        assert result.matches == "matches"

    @pytest.mark.asyncio
    async def test_inline_code_with_file_source(self) -> None:
        result = await PatternAnalyzer(LocalFileSource()).analyze_pattern(FULL_PLUGIN, "plugin")
        assert result.matches == "matches"


class TestClassify:
    @pytest.mark.parametrize(
        ("scores", "expected"),
        [
            ((80, 80, 80), "matches"),
            ((100, 100, 40), "matches"),
            ((50, 50, 50), "partial-match"),
            ((80, 50, 20), "partial-match"),
            ((49, 50, 50), "no-match"),
        ],
    )
    def test_thresholds(self, scores: tuple[int, int, int], expected: str) -> None:
        architecture, conventions, accessibility = scores
        conformance = Conformance(
            architecture=architecture, conventions=conventions, accessibility=accessibility
        )
        assert classify(conformance) == expected
