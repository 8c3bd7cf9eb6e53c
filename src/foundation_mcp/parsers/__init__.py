"""Structural parsers for Foundation plugin and component sources."""

from typing import Literal

from ..core.models import ScriptRecord, StylesheetRecord
from .docs import DocCommentState, extract_jsdoc, extract_sassdoc
from .javascript import JavaScriptParser, parse_script
from .scss import parse_stylesheet

Syntax = Literal["javascript", "scss"]


def parse(text: str, syntax: Syntax) -> ScriptRecord | StylesheetRecord:
    """Parse `text` with the grammar named by `syntax`."""
    if syntax == "javascript":
        return parse_script(text)
    if syntax == "scss":
        return parse_stylesheet(text)
    raise ValueError(f"Unsupported syntax: {syntax}")


__all__ = [
    "DocCommentState",
    "JavaScriptParser",
    "extract_jsdoc",
    "extract_sassdoc",
    "parse",
    "parse_script",
    "parse_stylesheet",
]
