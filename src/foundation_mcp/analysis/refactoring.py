"""Refactoring analyzer: migration guidance from custom code to Foundation."""

import re

from loguru import logger

from ..core.indexer import CodebaseIndexer
from ..core.models import (
    CatalogSnapshot,
    CodeAdaptation,
    RefactoringAnalysisResult,
    SourceKind,
    SuggestedMatch,
)
from ..parsers.javascript import parse_script
from ..parsers.scss import parse_stylesheet
from . import templates
from .features import COMPONENT_FEATURES, PLUGIN_FEATURES, FeatureRule, detect_features

FEATURE_SIMILARITY = 85
EXPLICIT_SIMILARITY = 100
MAX_SUGGESTIONS = 3

HEX_COLOR = re.compile(r"#[0-9a-fA-F]{3,6}\b")


class RefactoringAnalyzer:
    """Maps custom plugin or component code onto Foundation equivalents.

    The analysis is a pure function of the source text, the declared kind,
    the optional explicit target and the current catalog snapshot. A parse
    failure of the source is fatal and propagates as ``ParseError``.
    """

    def __init__(self, indexer: CodebaseIndexer):
        self.indexer = indexer

    async def analyze_for_refactoring(
        self,
        source_code: str,
        source_kind: SourceKind,
        target_slug: str | None = None,
    ) -> RefactoringAnalysisResult:
        """Build migration guidance for custom code.

        Args:
            source_code: Plugin JavaScript or component SCSS to migrate
            source_kind: Either plugin or component
            target_slug: Optional catalog slug the caller wants to migrate to

        Returns:
            Suggested matches with steps, breaking changes and integration guide

        Raises:
            ParseError: If the source does not parse as its declared kind
        """
        logger.info(f"Analyzing code for Foundation refactoring (kind={source_kind})")

        if source_kind == "plugin":
            parse_script(source_code)
            rules = PLUGIN_FEATURES
        elif source_kind == "component":
            parse_stylesheet(source_code)
            rules = COMPONENT_FEATURES
        else:
            raise ValueError(f"Unsupported source kind: {source_kind}")

        snapshot = await self.indexer.build_index()
        suggestions = self.find_matches(
            snapshot, source_kind, detect_features(source_code, rules), target_slug
        )
        top = suggestions[0] if suggestions else None

        return RefactoringAnalysisResult(
            source_kind=source_kind,
            suggested_matches=suggestions,
            migration_steps=migration_steps(source_kind, top),
            code_adaptation=code_adaptation(source_kind),
            breaking_changes=breaking_changes(source_kind, source_code),
            recommended_approach=recommended_approach(source_kind, top),
            integration_guide=integration_guide(source_kind, top),
        )

    @staticmethod
    def find_matches(
        snapshot: CatalogSnapshot,
        source_kind: SourceKind,
        detected: list[FeatureRule],
        target_slug: str | None = None,
    ) -> list[SuggestedMatch]:
        """Rank catalog targets for the detected features.

        An explicit target found in the kind's catalog wins outright.
        Otherwise every detected feature maps to its fixed target, in table
        order, and the first three are kept.

        Args:
            snapshot: Catalog used to resolve `target_slug`
            source_kind: Selects the plugin or component catalog
            detected: Feature rules found in the source, in table order
            target_slug: Explicit target requested by the caller

        Returns:
            At most three suggestions
        """
        if target_slug:
            catalog = snapshot.plugins if source_kind == "plugin" else snapshot.components
            for entry in catalog:
                if entry.slug == target_slug:
                    return [
                        SuggestedMatch(
                            name=entry.name,
                            slug=entry.slug,
                            similarity_score=EXPLICIT_SIMILARITY,
                            reasoning=f"User specified target: {entry.name}",
                        )
                    ]
            logger.debug(f"Explicit target {target_slug} not in catalog, using feature detection")

        matches = [
            SuggestedMatch(
                name=rule.target_name,
                slug=rule.target_slug,
                similarity_score=FEATURE_SIMILARITY,
                reasoning=f"Detected {rule.feature} functionality",
            )
            for rule in detected
        ]
        return matches[:MAX_SUGGESTIONS]


def migration_steps(kind: SourceKind, top: SuggestedMatch | None) -> list[str]:
    if kind == "plugin":
        steps = list(templates.PLUGIN_MIGRATION_STEPS)
        reference = templates.PLUGIN_REFERENCE_STEP
    else:
        steps = list(templates.COMPONENT_MIGRATION_STEPS)
        reference = templates.COMPONENT_REFERENCE_STEP
    if top is not None:
        steps.insert(0, reference.format(name=top.name))
    return steps


def code_adaptation(kind: SourceKind) -> CodeAdaptation:
    if kind == "plugin":
        return CodeAdaptation(
            before=templates.PLUGIN_BEFORE,
            after=templates.PLUGIN_AFTER,
            changes=list(templates.PLUGIN_CHANGES),
        )
    return CodeAdaptation(
        before=templates.COMPONENT_BEFORE,
        after=templates.COMPONENT_AFTER,
        changes=list(templates.COMPONENT_CHANGES),
    )


def breaking_changes(kind: SourceKind, code: str) -> list[str]:
    changes: list[str] = []
    if kind == "plugin":
        if "addEventListener" in code:
            changes.append("Replace addEventListener with jQuery .on() method")
        if "classList" in code:
            changes.append("Use jQuery addClass/removeClass instead of classList")
        if "dispatchEvent" in code:
            changes.append("Use jQuery .trigger() for events instead of dispatchEvent")
        if "destroy" not in code:
            changes.append("Must implement _destroy() for proper cleanup")
        if "ARIA" not in code and "aria-" not in code:
            changes.append("Add ARIA attributes for accessibility compliance")
        changes.extend(templates.PLUGIN_TRAILING_BREAKING_CHANGES)
        return changes

    if "px" in code and "rem" not in code:
        changes.append("Replace px units with rem-calc() for responsive design")
    if "!default" not in code:
        changes.append("Add !default flag to all variables for customization")
    if "@mixin" not in code:
        changes.append("Organize styles into reusable mixins")
    if "@include" not in code:
        changes.append("Include mixin in main component mixin")
    if HEX_COLOR.search(code):
        changes.append("Use Foundation color palette variables instead of hardcoded colors")
    changes.extend(templates.COMPONENT_TRAILING_BREAKING_CHANGES)
    return changes


def recommended_approach(kind: SourceKind, top: SuggestedMatch | None) -> str:
    if kind == "plugin":
        name = top.name if top else templates.PLUGIN_FALLBACK_NAME
        return templates.PLUGIN_APPROACH.format(name=name)
    name = top.name if top else templates.COMPONENT_FALLBACK_NAME
    return templates.COMPONENT_APPROACH.format(name=name)


def integration_guide(kind: SourceKind, top: SuggestedMatch | None) -> list[str]:
    if kind == "plugin":
        if top is None:
            return templates.plugin_integration_guide()
        return templates.plugin_integration_guide(top.slug, top.name)
    if top is None:
        return templates.component_integration_guide()
    return templates.component_integration_guide(top.slug)
