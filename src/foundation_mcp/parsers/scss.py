"""SCSS component parser.

A small brace-aware scanner splits the stylesheet into statements
(declarations, rule preludes, at-rule preludes) while skipping comments
and strings and respecting `#{...}` interpolation. Statements then feed
the variable, mixin and class-selector extraction. Doc comments are paired
with declarations by line through `docs.sass_line_docs`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from ..core.exceptions import ParseError
from ..core.models import SassMixin, SassVariable, StylesheetRecord
from .docs import sass_line_docs

CLASS_SELECTOR = re.compile(r"\.([a-zA-Z0-9_-]+)")


@dataclass
class Statement:
    text: str
    line: int
    opens_block: bool


class _Scanner:
    def __init__(self, code: str) -> None:
        self.code = code
        self.pos = 0
        self.line = 1
        self.statements: list[Statement] = []
        self._buffer: list[str] = []
        self._buffer_line = 0
        # one entry per open paren, True when it opens a url(...) call
        self._parens: list[bool] = []
        self._interp_depth = 0
        self._block_depth = 0

    def fail(self, message: str, line: int | None = None) -> ParseError:
        line = line or self.line
        return ParseError(
            f"Failed to parse SCSS component: {message} (line {line})",
            {"code": self.code, "line": line},
        )

    def scan(self) -> list[Statement]:
        code = self.code
        while self.pos < len(code):
            ch = code[self.pos]
            nxt = code[self.pos + 1] if self.pos + 1 < len(code) else ""

            if ch == "/" and nxt == "*":
                self._skip_block_comment()
            elif ch == "/" and nxt == "/" and not self._in_url():
                self._skip_line_comment()
            elif ch in ("'", '"'):
                self._read_string(ch)
            elif ch == "#" and nxt == "{":
                self._interp_depth += 1
                self._append("#{")
                self.pos += 2
            elif ch == "{" and self._interp_depth == 0:
                self._emit(opens_block=True)
                self._block_depth += 1
                self.pos += 1
            elif ch == "}" and self._interp_depth > 0:
                self._interp_depth -= 1
                self._append("}")
                self.pos += 1
            elif ch == "}":
                self._emit(opens_block=False)
                self._block_depth -= 1
                if self._block_depth < 0:
                    raise self.fail("unexpected '}'")
                self.pos += 1
            elif ch == ";" and not self._parens and self._interp_depth == 0:
                self._emit(opens_block=False)
                self.pos += 1
            else:
                if ch == "(":
                    self._parens.append("".join(self._buffer).rstrip().lower().endswith("url"))
                elif ch == ")" and self._parens:
                    self._parens.pop()
                self._append(ch)
                self.pos += 1

        if self._interp_depth > 0:
            raise self.fail("unclosed interpolation")
        if self._block_depth > 0:
            raise self.fail("unclosed block")
        self._emit(opens_block=False)
        return self.statements

    def _append(self, text: str) -> None:
        if not self._buffer and not text.isspace():
            self._buffer_line = self.line
        if self._buffer or not text.isspace():
            self._buffer.append(text)
        self.line += text.count("\n")

    def _emit(self, opens_block: bool) -> None:
        text = "".join(self._buffer).strip()
        if text or opens_block:
            self.statements.append(Statement(text, self._buffer_line or self.line, opens_block))
        self._buffer = []
        self._buffer_line = 0
        self._parens = []

    def _in_url(self) -> bool:
        return bool(self._parens) and self._parens[-1]

    def _skip_block_comment(self) -> None:
        end = self.code.find("*/", self.pos + 2)
        if end == -1:
            raise self.fail("unterminated comment")
        self.line += self.code.count("\n", self.pos, end)
        self.pos = end + 2

    def _skip_line_comment(self) -> None:
        end = self.code.find("\n", self.pos)
        self.pos = len(self.code) if end == -1 else end

    def _read_string(self, quote: str) -> None:
        start_line = self.line
        i = self.pos + 1
        while i < len(self.code):
            ch = self.code[i]
            if ch == "\\":
                i += 2
                continue
            if ch == quote:
                self._append(self.code[self.pos : i + 1])
                self.pos = i + 1
                return
            if ch == "\n":
                break
            i += 1
        raise self.fail("unterminated string", start_line)


def _split_top_level(params: str) -> list[str]:
    parts: list[str] = []
    depth = 0
    current: list[str] = []
    for ch in params:
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
        if ch == "," and depth == 0:
            parts.append("".join(current).strip())
            current = []
        else:
            current.append(ch)
    parts.append("".join(current).strip())
    return [p for p in parts if p]


def _parse_mixin(prelude: str) -> tuple[str, list[str]]:
    signature = prelude[len("@mixin") :].strip()
    if "(" not in signature:
        return signature, []
    name, _, rest = signature.partition("(")
    end = rest.rfind(")")
    params = rest[:end] if end != -1 else rest
    return name.strip(), _split_top_level(params)


def parse_stylesheet(code: str) -> StylesheetRecord:
    """Parse SCSS source into a `StylesheetRecord`.

    Raises ``ParseError`` for unbalanced braces, unterminated comments or
    strings.
    """
    statements = _Scanner(code).scan()
    line_docs = sass_line_docs(code)

    variables: list[SassVariable] = []
    mixins: list[SassMixin] = []
    classes: dict[str, None] = {}

    for stmt in statements:
        text = stmt.text
        if text.startswith("@mixin"):
            name, parameters = _parse_mixin(text)
            mixins.append(
                SassMixin(name=name, parameters=parameters, description=line_docs.get(stmt.line))
            )
        elif text.startswith("$") and ":" in text and not stmt.opens_block:
            name, _, value = text.partition(":")
            variables.append(
                SassVariable(
                    name=name.strip(),
                    default_value=value.strip(),
                    description=line_docs.get(stmt.line),
                )
            )
        elif stmt.opens_block and text and not text.startswith("@"):
            for class_name in CLASS_SELECTOR.findall(text):
                classes.setdefault(class_name, None)

    return StylesheetRecord(variables=variables, mixins=mixins, class_names=list(classes))
