"""Doc-comment extraction for JavaScript (JSDoc) and Sass (SassDoc) sources."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass, field

JSDOC_BLOCK = re.compile(r"/\*\*([\s\S]*?)\*/")
JSDOC_NAME = re.compile(r"@(?:class|function|method)\s+(\w+)")
JSDOC_DESCRIPTION = re.compile(r"@description\s+(.+)")

SASS_MIXIN_LINE = re.compile(r"@mixin\s+([a-zA-Z0-9_-]+)")
SASS_VARIABLE_LINE = re.compile(r"^\s*\$([a-zA-Z0-9_-]+)\s*:")


def extract_jsdoc(code: str) -> dict[str, str]:
    """Map `@class`/`@function`/`@method` names to their description.

    The description comes from an explicit `@description` tag, otherwise
    from the first line of the comment block.
    """
    docs: dict[str, str] = {}
    for match in JSDOC_BLOCK.finditer(code):
        comment = match.group(1)
        name_match = JSDOC_NAME.search(comment)
        if not name_match:
            continue
        desc_match = JSDOC_DESCRIPTION.search(comment)
        if desc_match:
            description = desc_match.group(1).strip()
        else:
            description = re.sub(r"^\s*\*\s*", "", comment.split("\n")[0]).strip()
        docs[name_match.group(1)] = description
    return docs


class DocState(enum.Enum):
    IDLE = "idle"
    ACCUMULATING = "accumulating"


class LineEvent(enum.Enum):
    DOC = "doc"
    MIXIN = "mixin"
    VARIABLE = "variable"
    BLANK = "blank"
    OTHER = "other"


def classify_line(line: str) -> LineEvent:
    stripped = line.strip()
    if not stripped:
        return LineEvent.BLANK
    if stripped.startswith("///"):
        return LineEvent.DOC
    if SASS_MIXIN_LINE.search(line):
        return LineEvent.MIXIN
    if SASS_VARIABLE_LINE.match(line):
        return LineEvent.VARIABLE
    return LineEvent.OTHER


@dataclass
class DocCommentState:
    """State machine pairing `///` comment runs with the declaration below.

    DOC lines accumulate into a buffer, MIXIN and VARIABLE lines consume
    and clear it, BLANK lines keep it, and any OTHER line drops it.
    """

    state: DocState = DocState.IDLE
    buffer: list[str] = field(default_factory=list)

    def feed(self, event: LineEvent, line: str) -> str | None:
        """Advance on one line; return the consumed description, if any."""
        if event is LineEvent.DOC:
            text = line.strip().lstrip("/").strip()
            if text:
                self.buffer.append(text)
            self.state = DocState.ACCUMULATING
            return None

        if self.state is DocState.IDLE or event is LineEvent.BLANK:
            return None

        consumed = None
        if event in (LineEvent.MIXIN, LineEvent.VARIABLE):
            consumed = " ".join(self.buffer) or None
        self.buffer = []
        self.state = DocState.IDLE
        return consumed


def sass_line_docs(code: str) -> dict[int, str]:
    """Map 1-based line numbers of documented declarations to their docs."""
    machine = DocCommentState()
    docs: dict[int, str] = {}
    for lineno, line in enumerate(code.split("\n"), start=1):
        description = machine.feed(classify_line(line), line)
        if description:
            docs[lineno] = description
    return docs


def extract_sassdoc(code: str) -> dict[str, str]:
    """Map mixin and variable names (without `$`) to their `///` docs."""
    lines = code.split("\n")
    docs: dict[str, str] = {}
    for lineno, description in sass_line_docs(code).items():
        line = lines[lineno - 1]
        match = SASS_MIXIN_LINE.search(line) or SASS_VARIABLE_LINE.match(line)
        if match:
            docs[match.group(1)] = description
    return docs
