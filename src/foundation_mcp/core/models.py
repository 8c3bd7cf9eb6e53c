"""Data models shared by the parsers, the indexer and the analyzers."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .exceptions import NotFoundError


class WireModel(BaseModel):
    """Base model serialized with camelCase keys on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class FrozenWireModel(WireModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )


# ========== Structural records ==========


class ScriptRecord(WireModel):
    """Structural features extracted from a JavaScript plugin file."""

    class_name: str = ""
    parent_class_name: str | None = None
    method_names: list[str] = []
    property_names: list[str] = []
    fired_event_names: list[str] = []
    imported_module_names: list[str] = []
    exported_names: list[str] = []


class SassVariable(WireModel):
    name: str
    default_value: str
    description: str | None = None


class SassMixin(WireModel):
    name: str
    parameters: list[str] = []
    description: str | None = None


class StylesheetRecord(WireModel):
    """Structural features extracted from an SCSS component file."""

    variables: list[SassVariable] = []
    mixins: list[SassMixin] = []
    class_names: list[str] = []


# ========== Catalog ==========


class PluginEntry(FrozenWireModel):
    kind: Literal["plugin"] = "plugin"
    name: str
    slug: str
    path: str
    description: str
    class_name: str
    selector: str
    supports_nesting: bool = False
    deprecated_in_version: str | None = None
    docs: str = ""


class ComponentEntry(FrozenWireModel):
    kind: Literal["component"] = "component"
    name: str
    slug: str
    scss_path: str
    description: str
    mixins: tuple[str, ...] = ()
    css_classes: tuple[str, ...] = ()
    docs: str = ""


class UtilityEntry(FrozenWireModel):
    kind: Literal["utility"] = "utility"
    name: str
    slug: str
    path: str
    description: str
    exports: tuple[str, ...] = ()


class GridEntry(FrozenWireModel):
    kind: Literal["grid-system"] = "grid-system"
    name: str
    slug: str
    scss_path: str
    description: str


class CatalogSnapshot(FrozenWireModel):
    """Immutable aggregate of the four catalogs built by one directory walk."""

    plugins: tuple[PluginEntry, ...] = ()
    components: tuple[ComponentEntry, ...] = ()
    utilities: tuple[UtilityEntry, ...] = ()
    grids: tuple[GridEntry, ...] = ()

    def find_plugin(self, slug: str) -> PluginEntry:
        for plugin in self.plugins:
            if plugin.slug == slug:
                return plugin
        raise NotFoundError(f"Plugin not found: {slug}", {"slug": slug})

    def find_component(self, slug: str) -> ComponentEntry:
        for component in self.components:
            if component.slug == slug:
                return component
        raise NotFoundError(f"Component not found: {slug}", {"slug": slug})


# ========== Pattern analysis ==========


Severity = Literal["error", "warning", "info"]
MatchLevel = Literal["matches", "partial-match", "no-match"]


class ValidationIssue(WireModel):
    severity: Severity
    message: str
    suggestion: str | None = None
    line: int | None = None


class Conformance(WireModel):
    architecture: int = 0
    conventions: int = 0
    accessibility: int = 0

    @property
    def overall(self) -> float:
        return (self.architecture + self.conventions + self.accessibility) / 3


class PatternAnalysisResult(WireModel):
    matches: MatchLevel
    issues: list[ValidationIssue] = []
    conformance: Conformance = Field(default_factory=Conformance)
    suggestions: list[str] = []


# ========== Refactoring analysis ==========


SourceKind = Literal["plugin", "component"]


class SuggestedMatch(WireModel):
    name: str
    slug: str
    similarity_score: int
    reasoning: str


class CodeAdaptation(WireModel):
    before: str
    after: str
    changes: list[str] = []


class RefactoringAnalysisResult(WireModel):
    source_kind: SourceKind
    suggested_matches: list[SuggestedMatch] = []
    migration_steps: list[str] = []
    code_adaptation: CodeAdaptation
    breaking_changes: list[str] = []
    recommended_approach: str = ""
    integration_guide: list[str] = []


# ========== Generators ==========


class PluginFeatures(WireModel):
    keyboard: bool = False
    nesting: bool = False
    events: list[str] = []
    state_management: bool = False


class GeneratePluginParams(WireModel):
    name: str = Field(min_length=1, description="Plugin class name (e.g. MyAccordion)")
    slug: str = Field(min_length=1, description="Kebab-case slug (e.g. my-accordion)")
    description: str = Field(description="Plugin description")
    selector: str | None = Field(default=None, description="CSS selector (default: [data-{slug}])")
    features: PluginFeatures = Field(default_factory=PluginFeatures)
    include_tests: bool = True
    include_docs: bool = True


class SassVariableSpec(WireModel):
    description: str
    type: str = Field(description="Color, Number, String, etc.")
    default_value: str | int | float | bool


class GenerateComponentParams(WireModel):
    name: str = Field(min_length=1, description="Component name (e.g. Alert)")
    slug: str = Field(min_length=1, description="Kebab-case slug")
    description: str = Field(description="Component description")
    css_classes: list[str] = []
    variables: dict[str, SassVariableSpec] | None = None
    include_tests: bool = True
    include_docs: bool = True
    grid: Literal["xy-grid", "float-grid", "both"] = "xy-grid"


class GeneratedFile(WireModel):
    path: str
    content: str


class GenerationResult(WireModel):
    status: Literal["success", "error"]
    files: dict[str, GeneratedFile] = {}
    integration_steps: list[str] = []
    error: str | None = None


# ========== Integrations ==========


class WordPressIntegrationParams(WireModel):
    context: Literal["theme", "plugin"] = Field(
        default="theme", description="Whether Foundation ships inside a theme or a plugin"
    )
    bundler: Literal["none", "webpack", "vite", "rollup"] = Field(
        default="none", description="Asset bundler, or none to use the prebuilt dist files"
    )
    enable_rtl: bool = Field(default=False, alias="enableRTL")
    enable_motion_ui: bool = Field(default=False, alias="enableMotionUI")
    enable_block_editor: bool = False
    enqueue_jquery: bool = Field(default=True, alias="enqueueJQuery")


class WordPressIntegrationGuide(WireModel):
    summary: str
    steps: list[str]
    enqueue_example: str
    php_template_tips: list[str]
    block_editor: list[str] = []
    rtl: list[str] = []
    motion_ui: str = Field(alias="motionUI")
    troubleshooting: list[str]
