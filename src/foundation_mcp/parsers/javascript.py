"""JavaScript plugin parser built on Tree-sitter.

Tree-sitter's JavaScript grammar accepts class fields and decorators, so
modern plugin sources parse even when those features are unused. The tree
is walked once in document order; every class declaration is visited
exactly once.
"""

from __future__ import annotations

from typing import Any

import tree_sitter_javascript
from tree_sitter import Language, Parser

from ..core.exceptions import ParseError
from ..core.models import ScriptRecord

JS_LANGUAGE = Language(tree_sitter_javascript.language())

EVENT_METHODS = frozenset({"trigger", "fire"})


def _text(node: Any) -> str:
    return node.text.decode("utf-8") if node is not None and node.text else ""


def _string_value(node: Any) -> str | None:
    """Return the value of a plain string literal node, else None."""
    if node is None or node.type != "string":
        return None
    return "".join(
        _text(child)
        for child in node.named_children
        if child.type in ("string_fragment", "escape_sequence")
    )


def _first_error_line(root: Any) -> int | None:
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == "ERROR" or node.is_missing:
            return node.start_point[0] + 1
        if node.has_error:
            stack.extend(reversed(node.children))
    return None


class _RecordBuilder:
    """Accumulates a ScriptRecord while the tree is walked."""

    def __init__(self) -> None:
        self.class_name = ""
        self.parent_class_name: str | None = None
        self.methods: dict[str, None] = {}
        self.properties: dict[str, None] = {}
        self.events: list[str] = []
        self.imports: list[str] = []
        self.exports: list[str] = []

    def visit(self, node: Any) -> None:
        handler = getattr(self, f"_visit_{node.type}", None)
        if handler is not None:
            handler(node)

    def _visit_import_statement(self, node: Any) -> None:
        source = _string_value(node.child_by_field_name("source"))
        if source:
            self.imports.append(source)

    def _visit_class_declaration(self, node: Any) -> None:
        name = _text(node.child_by_field_name("name"))
        parent = None
        for child in node.named_children:
            if child.type == "class_heritage" and child.named_children:
                superclass = child.named_children[0]
                if superclass.type == "identifier":
                    parent = _text(superclass)

        exported = self._is_named_export(node)
        if exported:
            # An exported class always defines the primary class.
            if name:
                self.class_name = name
                self.exports.append(name)
            if parent:
                self.parent_class_name = parent
        else:
            if not self.class_name and name:
                self.class_name = name
            if not self.parent_class_name and parent:
                self.parent_class_name = parent

        body = node.child_by_field_name("body")
        if body is not None:
            self._collect_members(body)

    def _visit_call_expression(self, node: Any) -> None:
        callee = node.child_by_field_name("function")
        if callee is None or callee.type != "member_expression":
            return
        prop = callee.child_by_field_name("property")
        if prop is None or _text(prop) not in EVENT_METHODS:
            return
        args = node.child_by_field_name("arguments")
        if args is None or not args.named_children:
            return
        event = _string_value(args.named_children[0])
        if event is not None:
            self.events.append(event)

    def _collect_members(self, body: Any) -> None:
        for member in body.named_children:
            if member.type == "method_definition":
                key = member.child_by_field_name("name")
                if key is not None and key.type == "property_identifier":
                    self.methods.setdefault(_text(key), None)
            elif member.type == "field_definition":
                key = member.child_by_field_name("property")
                if key is not None and key.type == "property_identifier":
                    self.properties.setdefault(_text(key), None)

    @staticmethod
    def _is_named_export(node: Any) -> bool:
        parent = node.parent
        if parent is None or parent.type != "export_statement":
            return False
        return not any(child.type == "default" for child in parent.children)

    def build(self) -> ScriptRecord:
        return ScriptRecord(
            class_name=self.class_name,
            parent_class_name=self.parent_class_name,
            method_names=list(self.methods),
            property_names=list(self.properties),
            fired_event_names=self.events,
            imported_module_names=self.imports,
            exported_names=self.exports,
        )


class JavaScriptParser:
    """Parses plugin sources into `ScriptRecord`s."""

    def __init__(self) -> None:
        self._parser = Parser(JS_LANGUAGE)

    def parse(self, code: str) -> ScriptRecord:
        tree = self._parser.parse(code.encode("utf-8"))
        root = tree.root_node
        if root.has_error:
            line = _first_error_line(root) or root.start_point[0] + 1
            raise ParseError(
                f"Failed to parse JavaScript plugin: syntax error near line {line}",
                {"code": code, "line": line},
            )

        builder = _RecordBuilder()
        stack = [root]
        while stack:
            node = stack.pop()
            builder.visit(node)
            stack.extend(reversed(node.children))
        return builder.build()


_default_parser: JavaScriptParser | None = None


def parse_script(code: str) -> ScriptRecord:
    """Parse JavaScript source with a lazily created shared parser."""
    global _default_parser
    if _default_parser is None:
        _default_parser = JavaScriptParser()
    return _default_parser.parse(code)
