"""Request models for the MCP tools.

Each model's JSON schema (camelCase, as sent by clients) is advertised as
the tool's `inputSchema`; arguments are validated once, at the boundary.
"""

from typing import Literal, NamedTuple

from pydantic import Field

from ..core.models import (
    GenerateComponentParams,
    GeneratePluginParams,
    SourceKind,
    WireModel,
    WordPressIntegrationParams,
)

PatternType = Literal["plugin", "component", "utility", "test"]


class AnalyzePatternRequest(WireModel):
    code: str = Field(description="Code snippet or file path")
    pattern_type: PatternType


class ValidatePluginRequest(WireModel):
    code: str = Field(description="Code or file path")


class RefactorToFoundationRequest(WireModel):
    source_code: str = Field(description="Code to refactor")
    source_type: Literal["custom-plugin", "custom-component", "plugin", "component"] = Field(
        description="Type of code"
    )
    foundation_target: str | None = Field(
        default=None, description="Specific Foundation component to migrate to"
    )

    @property
    def source_kind(self) -> SourceKind:
        return "plugin" if self.source_type.endswith("plugin") else "component"


class FindSimilarPatternRequest(WireModel):
    query: str = Field(description="Description of pattern to find")
    type: PatternType | None = None
    limit: int = Field(default=5, ge=1, le=20)


class QueryArchitectureRequest(WireModel):
    question: str = Field(description="Architecture question")
    context: Literal["plugin", "component", "build", "testing"] | None = None


class ReferenceRequest(WireModel):
    slug: str = Field(min_length=1, description="Catalog slug (e.g. accordion, button)")


class EmptyRequest(WireModel):
    pass


class ToolSpec(NamedTuple):
    name: str
    description: str
    request_model: type[WireModel]

    def input_schema(self) -> dict:
        return self.request_model.model_json_schema(by_alias=True)


TOOL_SPECS: tuple[ToolSpec, ...] = (
    ToolSpec(
        name="generate_plugin",
        description="Generate a new Foundation plugin with boilerplate code",
        request_model=GeneratePluginParams,
    ),
    ToolSpec(
        name="generate_component",
        description="Generate a new Foundation Sass component",
        request_model=GenerateComponentParams,
    ),
    ToolSpec(
        name="analyze_pattern",
        description="Analyze code against Foundation patterns",
        request_model=AnalyzePatternRequest,
    ),
    ToolSpec(
        name="validate_plugin",
        description="Validate plugin code against Foundation standards",
        request_model=ValidatePluginRequest,
    ),
    ToolSpec(
        name="refactor_to_foundation",
        description="Analyze code and suggest Foundation refactoring strategy",
        request_model=RefactorToFoundationRequest,
    ),
    ToolSpec(
        name="find_similar_pattern",
        description="Find similar plugins and components in the codebase",
        request_model=FindSimilarPatternRequest,
    ),
    ToolSpec(
        name="query_architecture",
        description="Query Foundation architecture and patterns",
        request_model=QueryArchitectureRequest,
    ),
    ToolSpec(
        name="get_plugin_reference",
        description="Get API reference for a specific plugin",
        request_model=ReferenceRequest,
    ),
    ToolSpec(
        name="get_component_reference",
        description="Get API reference for a specific component",
        request_model=ReferenceRequest,
    ),
    ToolSpec(
        name="list_catalog",
        description="Summarize the indexed plugins, components, utilities and grids",
        request_model=EmptyRequest,
    ),
    ToolSpec(
        name="invalidate_index",
        description="Drop the cached index so the next request re-walks the repository",
        request_model=EmptyRequest,
    ),
    ToolSpec(
        name="wordpress_integration_guide",
        description="Guidance for using Foundation inside WordPress themes or plugins",
        request_model=WordPressIntegrationParams,
    ),
)
