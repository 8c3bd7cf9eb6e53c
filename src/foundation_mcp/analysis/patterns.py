"""Pattern analyzer: scores plugin source against Foundation's plugin architecture."""

import re

from loguru import logger

from ..core.exceptions import ParseError
from ..core.interfaces import FileSource
from ..core.models import Conformance, MatchLevel, PatternAnalysisResult, ValidationIssue
from ..parsers.javascript import parse_script

PASCAL_CASE = re.compile(r"^[A-Z][a-zA-Z0-9]*$")
TRIGGERED_EVENT = re.compile(r"\.trigger\(['\"]([^'\"]+)['\"]\)")

REQUIRED_METHODS = ("_init", "_destroy")

MATCH_THRESHOLD = 80
PARTIAL_THRESHOLD = 50
SUGGESTION_THRESHOLD = 80
CONVENTIONS_BASE = 30

AXIS_SUGGESTIONS = {
    "architecture": "Review Foundation plugin architecture guide",
    "conventions": "Follow Foundation naming conventions",
    "accessibility": "Improve accessibility with ARIA and keyboard support",
}


def classify(conformance: Conformance) -> MatchLevel:
    if conformance.overall >= MATCH_THRESHOLD:
        return "matches"
    if conformance.overall >= PARTIAL_THRESHOLD:
        return "partial-match"
    return "no-match"


def unsupported_result() -> PatternAnalysisResult:
    return PatternAnalysisResult(
        matches="no-match",
        suggestions=["Analysis for this pattern type is not yet implemented"],
    )


def parse_failure_result() -> PatternAnalysisResult:
    return PatternAnalysisResult(
        matches="no-match",
        issues=[
            ValidationIssue(
                severity="error",
                message="Failed to parse code",
                suggestion="Ensure code is valid JavaScript",
            )
        ],
        suggestions=["Fix syntax errors before analyzing"],
    )


class PatternAnalyzer:
    """Deterministic conformance scoring for plugin code.

    Three axes are scored independently:

    - architecture: extends `Plugin`, defines `_init`/`_destroy` and a
      constructor (at most 80).
    - conventions: PascalCase class, JSDoc `@class` block, events in the
      `.zf.` namespace, plus a flat base of 30.
    - accessibility: ARIA attributes, keyboard handling, focus management.

    Only the `plugin` pattern type has a scoring path; other types get a
    fixed "not implemented" report.
    """

    def __init__(self, file_source: FileSource | None = None):
        """Initialize the analyzer.

        Args:
            file_source: When set, `code` arguments naming an existing file are
                replaced by that file's contents
        """
        self.file_source = file_source

    async def analyze_pattern(self, code: str, pattern_type: str) -> PatternAnalysisResult:
        """Score code against the Foundation pattern for `pattern_type`.

        Args:
            code: Source text, or a path readable through the file source
            pattern_type: One of plugin, component, utility or test

        Returns:
            Conformance scores, issues and suggestions; only plugins are scored,
            other types get a fixed "not implemented" result
        """
        logger.debug(f"Analyzing pattern (type={pattern_type})")

        if self.file_source is not None and await self.file_source.exists(code):
            code = await self.file_source.read_text(code)

        if pattern_type == "plugin":
            return self.analyze_plugin(code)
        return unsupported_result()

    def analyze_plugin(self, code: str) -> PatternAnalysisResult:
        """Score plugin source on architecture, conventions and accessibility.

        Args:
            code: JavaScript plugin source

        Returns:
            The analysis result; unparseable source yields a zero-score result
            instead of raising
        """
        try:
            record = parse_script(code)
        except ParseError as e:
            logger.warning(f"Failed to analyze plugin pattern: {e}")
            return parse_failure_result()

        issues: list[ValidationIssue] = []

        # Architecture
        architecture = 0
        if record.parent_class_name == "Plugin":
            architecture += 30
        else:
            issues.append(
                ValidationIssue(
                    severity="error",
                    message="Plugin must extend the Plugin base class",
                    suggestion="export class YourPlugin extends Plugin { ... }",
                )
            )

        missing = [m for m in REQUIRED_METHODS if m not in record.method_names]
        if not missing:
            architecture += 40
        for method in missing:
            issues.append(
                ValidationIssue(
                    severity="error",
                    message=f"Missing required method: {method}",
                    suggestion=f"Add {method}() method to your plugin class",
                )
            )

        if "constructor" in record.method_names:
            architecture += 10
        else:
            issues.append(
                ValidationIssue(
                    severity="warning",
                    message="Plugin should have a constructor",
                    suggestion="constructor(element, options) { super(element, options); }",
                )
            )

        # Conventions
        conventions = 0
        if record.class_name and PASCAL_CASE.match(record.class_name):
            conventions += 30
        else:
            issues.append(
                ValidationIssue(
                    severity="warning",
                    message="Plugin class name should be PascalCase",
                    suggestion="Use PascalCase for class names (e.g., MyPlugin)",
                )
            )

        if "/**" in code and "@class" in code:
            conventions += 20
        else:
            issues.append(
                ValidationIssue(
                    severity="info",
                    message="Add JSDoc comments to your plugin",
                    suggestion="Add /** @class */ comment above your plugin class",
                )
            )

        events = TRIGGERED_EVENT.findall(code)
        if all(".zf." in event for event in events):
            conventions += 20
        else:
            issues.append(
                ValidationIssue(
                    severity="warning",
                    message="Events should use .zf.{plugin} namespace",
                    suggestion="Use event names like 'open.zf.accordion'",
                )
            )

        # Accessibility
        accessibility = 0
        if "aria-" in code or "role=" in code:
            accessibility += 40
        else:
            issues.append(
                ValidationIssue(
                    severity="warning",
                    message="Plugin should implement ARIA attributes for accessibility",
                    suggestion="Add ARIA attributes for screen reader support",
                )
            )

        if "Keyboard" in code or "KEYS" in code:
            accessibility += 30
        else:
            issues.append(
                ValidationIssue(
                    severity="info",
                    message="Consider adding keyboard navigation support",
                    suggestion="Use Foundation.Keyboard utility for keyboard events",
                )
            )

        if "focus()" in code or "$element.focus" in code:
            accessibility += 30

        conformance = Conformance(
            architecture=min(architecture, 100),
            conventions=min(conventions + CONVENTIONS_BASE, 100),
            accessibility=min(accessibility, 100),
        )
        suggestions = [
            text
            for axis, text in AXIS_SUGGESTIONS.items()
            if getattr(conformance, axis) < SUGGESTION_THRESHOLD
        ]

        return PatternAnalysisResult(
            matches=classify(conformance),
            issues=issues,
            conformance=conformance,
            suggestions=suggestions,
        )
