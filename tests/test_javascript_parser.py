"""Tests for the tree-sitter backed JavaScript plugin parser."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import Mock

import pytest

from foundation_mcp.core.exceptions import ParseError
from foundation_mcp.parsers import parse, parse_script
from foundation_mcp.parsers.javascript import JavaScriptParser

from .conftest import ACCORDION_JS

PLUGIN_WITH_FIELDS = """\
import { Plugin } from './foundation.core.plugin';
import { onLoad } from './foundation.core.utils';

export class Tabs extends Plugin {
  static className = 'Tabs';
  isActive = false;

  constructor(element, options) {
    super(element, options);
  }

  _init() {
    this.$element.trigger('init.zf.tabs');
    this.$element.fire("change.zf.tabs");
    this.$element.trigger(eventName);
    this.$element.trigger(`templated.zf.tabs`);
    this.$element.trigger('init.zf.tabs');
  }

  _init() {}

  ['computed']() {}
}
"""


class TestParseScript:
    def test_extracts_exported_class(self) -> None:
        record = parse_script(ACCORDION_JS)
        assert record.class_name == "Accordion"
        assert record.parent_class_name == "Plugin"
        assert record.exported_names == ["Accordion"]
        assert record.method_names == ["constructor", "_init", "_destroy"]
        assert record.imported_module_names == [
            "./foundation.core.plugin",
            "./foundation.util.keyboard",
        ]

    def test_class_fields_and_member_dedup(self) -> None:
        record = parse_script(PLUGIN_WITH_FIELDS)
        assert record.property_names == ["className", "isActive"]
        assert record.method_names == ["constructor", "_init"]

    def test_only_string_literal_events_count(self) -> None:
        record = parse_script(PLUGIN_WITH_FIELDS)
        # Duplicates are kept in source order
        assert record.fired_event_names == ["init.zf.tabs", "change.zf.tabs", "init.zf.tabs"]

    def test_exported_class_wins_over_earlier_bare_class(self) -> None:
        code = """\
class Helper extends Base {
  help() {}
}

export class Main extends Plugin {
  _init() {}
}
"""
        record = parse_script(code)
        assert record.class_name == "Main"
        assert record.parent_class_name == "Plugin"
        assert record.method_names == ["help", "_init"]

    def test_bare_class_does_not_override_exported_class(self) -> None:
        code = """\
export class Main extends Plugin {}

class Helper extends Base {}
"""
        record = parse_script(code)
        assert record.class_name == "Main"
        assert record.parent_class_name == "Plugin"

    def test_no_class(self) -> None:
        record = parse_script("const x = 1;\n")
        assert record.class_name == ""
        assert record.parent_class_name is None

    def test_syntax_error_raises_parse_error_with_source(self) -> None:
        code = "export class Broken extends Plugin {\n  _init( {\n}\n"
        with pytest.raises(ParseError) as exc_info:
            parse_script(code)
        assert exc_info.value.details["code"] == code
        assert exc_info.value.code == "PARSE_ERROR"
        assert "code" not in exc_info.value.to_dict()["error"]["details"]
        assert isinstance(exc_info.value.details["line"], int)

    def test_error_without_error_node_reports_root_line(self) -> None:
        root = SimpleNamespace(
            type="program", is_missing=False, has_error=True, children=[], start_point=(0, 0)
        )
        parser = JavaScriptParser()
        parser._parser = Mock()
        parser._parser.parse.return_value = SimpleNamespace(root_node=root)

        with pytest.raises(ParseError) as exc_info:
            parser.parse("class {")
        assert exc_info.value.details["line"] == 1
        assert exc_info.value.message.endswith("syntax error near line 1")

    def test_parsing_is_deterministic(self) -> None:
        parser = JavaScriptParser()
        assert parser.parse(PLUGIN_WITH_FIELDS) == parser.parse(PLUGIN_WITH_FIELDS)


class TestDispatcher:
    def test_dispatches_by_syntax(self) -> None:
        assert parse(ACCORDION_JS, "javascript").class_name == "Accordion"
        assert parse(".a { color: red; }", "scss").class_names == ["a"]

    def test_unknown_syntax(self) -> None:
        with pytest.raises(ValueError):
            parse("", "python")
