"""Tests for the SCSS parser and doc-comment extraction."""

from __future__ import annotations

import pytest

from foundation_mcp.core.exceptions import ParseError
from foundation_mcp.parsers import extract_jsdoc, extract_sassdoc, parse_stylesheet
from foundation_mcp.parsers.docs import DocCommentState, DocState, LineEvent

from .conftest import ACCORDION_JS, CALLOUT_SCSS


class TestParseStylesheet:
    def test_variables_keep_dollar_and_raw_value(self) -> None:
        record = parse_stylesheet(CALLOUT_SCSS)
        assert len(record.variables) == 1
        variable = record.variables[0]
        assert variable.name == "$callout-padding"
        assert variable.default_value == "1rem !default"
        assert variable.description == "Callout padding"

    def test_mixins_and_parameters(self) -> None:
        record = parse_stylesheet(CALLOUT_SCSS)
        assert [m.name for m in record.mixins] == ["callout-base", "foundation-callout"]
        base, foundation = record.mixins
        assert base.parameters == ["$padding: $callout-padding"]
        assert base.description == "Adds the basic callout styles"
        assert foundation.parameters == []
        assert foundation.description is None

    def test_mixin_parameters_split_on_top_level_commas(self) -> None:
        code = "@mixin tint($color: rgba(0, 0, 0, 0.5), $size: 1rem) {}\n"
        record = parse_stylesheet(code)
        assert record.mixins[0].parameters == ["$color: rgba(0, 0, 0, 0.5)", "$size: 1rem"]

    def test_class_selectors_deduplicated_in_order(self) -> None:
        code = """\
.card, .card-divider { margin: 0; }
.card .card-section { padding: 0; }
.card { color: red; }
"""
        record = parse_stylesheet(code)
        assert record.class_names == ["card", "card-divider", "card-section"]

    def test_nested_selectors(self) -> None:
        record = parse_stylesheet(CALLOUT_SCSS)
        assert record.class_names == ["callout", "small"]

    def test_declaration_values_are_not_selectors(self) -> None:
        record = parse_stylesheet(".a { width: 0.5rem; font: 12px/1.5 sans-serif; }\n")
        assert record.class_names == ["a"]

    def test_comments_strings_and_interpolation(self) -> None:
        code = """\
/* .ignored { } */
// .also-ignored { }
$name: 'menu{';
.prefix-#{$name} { content: "}"; }
"""
        record = parse_stylesheet(code)
        assert record.variables[0].default_value == "'menu{'"
        assert record.class_names == ["prefix-"]

    def test_doc_comment_consumed_by_variable(self) -> None:
        record = parse_stylesheet("/// Padding amount\n$pad: 1rem;")
        assert record.variables[0].description == "Padding amount"

    def test_doc_comment_dropped_by_other_line(self) -> None:
        record = parse_stylesheet("/// Orphaned\n.x { color: red; }\n$pad: 1rem;")
        assert record.variables[0].description is None

    def test_doc_comment_used_once(self) -> None:
        record = parse_stylesheet("/// Padding amount\n$pad: 1rem;\n$margin: 2rem;")
        assert [v.name for v in record.variables] == ["$pad", "$margin"]
        assert record.variables[0].description == "Padding amount"
        assert record.variables[1].description is None

    def test_line_comment_inside_map(self) -> None:
        code = "$sizes: (\n  small: 0, // don't shrink\n  large: 2rem,\n) !default;\n.a{color:red;}"
        record = parse_stylesheet(code)

        assert [v.name for v in record.variables] == ["$sizes"]
        assert "don't" not in record.variables[0].default_value
        assert record.variables[0].default_value.endswith(") !default")
        assert record.class_names == ["a"]

    def test_line_comment_inside_mixin_signature(self) -> None:
        code = "@mixin foo(\n  $a, // first\n  $b\n) {\n  margin: $a $b;\n}\n"
        record = parse_stylesheet(code)
        assert record.mixins[0].name == "foo"
        assert record.mixins[0].parameters == ["$a", "$b"]

    def test_url_keeps_double_slash(self) -> None:
        code = "$logo: url(//cdn.example.com/logo.png);\n.brand { background: URL(http://x.com/a.png); }\n"
        record = parse_stylesheet(code)

        assert record.variables[0].default_value == "url(//cdn.example.com/logo.png)"
        assert record.class_names == ["brand"]

    @pytest.mark.parametrize(
        "code",
        [
            ".a { color: red;",
            ".a { color: red; }}",
            "/* never closed",
            "$x: 'unterminated;\n",
            ".a-#{$x;",
        ],
    )
    def test_malformed_input_raises(self, code: str) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_stylesheet(code)
        assert exc_info.value.details["code"] == code
        assert "line" in exc_info.value.details

    def test_unexpected_brace_reports_line(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_stylesheet(".a {}\n\n}\n")
        assert exc_info.value.details["line"] == 3

    def test_empty_source(self) -> None:
        record = parse_stylesheet("")
        assert record.variables == []
        assert record.mixins == []
        assert record.class_names == []


class TestDocCommentState:
    def test_accumulates_and_consumes(self) -> None:
        machine = DocCommentState()
        assert machine.feed(LineEvent.DOC, "/// First line") is None
        assert machine.state is DocState.ACCUMULATING
        assert machine.feed(LineEvent.DOC, "/// second line") is None
        assert machine.feed(LineEvent.BLANK, "") is None
        assert machine.state is DocState.ACCUMULATING
        assert machine.feed(LineEvent.MIXIN, "@mixin a {") == "First line second line"
        assert machine.state is DocState.IDLE
        assert machine.buffer == []

    def test_other_line_drops_buffer(self) -> None:
        machine = DocCommentState()
        machine.feed(LineEvent.DOC, "/// Lost")
        assert machine.feed(LineEvent.OTHER, ".a {") is None
        assert machine.state is DocState.IDLE
        assert machine.feed(LineEvent.VARIABLE, "$a: 1;") is None

    def test_empty_doc_lines_yield_no_description(self) -> None:
        machine = DocCommentState()
        machine.feed(LineEvent.DOC, "////")
        assert machine.feed(LineEvent.VARIABLE, "$a: 1;") is None


class TestExtractDocs:
    def test_sassdoc_keyed_by_name_without_dollar(self) -> None:
        docs = extract_sassdoc(CALLOUT_SCSS)
        assert docs == {
            "callout-padding": "Callout padding",
            "callout-base": "Adds the basic callout styles",
        }

    def test_jsdoc_description_tag(self) -> None:
        assert extract_jsdoc(ACCORDION_JS) == {"Accordion": "Collapsible content panels"}

    def test_jsdoc_first_line_fallback(self) -> None:
        code = "/** Toggles things\n * @function toggle\n */\nfunction toggle() {}\n"
        assert extract_jsdoc(code) == {"toggle": "Toggles things"}

    def test_jsdoc_without_name_is_skipped(self) -> None:
        assert extract_jsdoc("/** Just a note */\n") == {}
