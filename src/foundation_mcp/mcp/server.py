"""MCP server implementation with service-oriented architecture."""

from typing import Any

from loguru import logger
from mcp.server import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.models import InitializationOptions
from mcp.server.stdio import stdio_server
from mcp.types import (
    CallToolResult,
    Resource,
    ResourceTemplate,
    ServerCapabilities,
    Tool,
)
from pydantic import AnyUrl
from pydantic import ValidationError as PydanticValidationError

from .. import __version__
from ..config.settings import ServerConfig
from ..core.exceptions import FoundationMCPError, ValidationError
from ..core.interfaces import CacheBackend, FileSource
from ..core.models import GenerateComponentParams, GeneratePluginParams, WordPressIntegrationParams
from ..generators.wordpress import wordpress_integration_guide
from .architecture import answer_question
from .resources import JSON_MIME, ResourceProvider, component_reference, plugin_reference
from .schemas import (
    TOOL_SPECS,
    AnalyzePatternRequest,
    FindSimilarPatternRequest,
    QueryArchitectureRequest,
    ReferenceRequest,
    RefactorToFoundationRequest,
    ValidatePluginRequest,
)
from .services import ProtocolService, RoutingService, SessionService

SERVER_NAME = "foundation-mcp"

# Placeholder score for substring matches in find_similar_pattern
SUBSTRING_SIMILARITY = 75


class FoundationMCPServer:
    """Foundation MCP server: tool and resource handlers over shared services."""

    def __init__(
        self,
        config: ServerConfig,
        cache: CacheBackend | None = None,
        file_source: FileSource | None = None,
    ):
        self.config = config
        self.session_service = SessionService(config, cache, file_source)
        self.routing_service = RoutingService()
        self.protocol_service = ProtocolService()
        self.resources = ResourceProvider(self.session_service.indexer)

        self._register_handlers()

    def _register_handlers(self) -> None:
        """Register all tool handlers with routing service."""
        handlers = {
            "generate_plugin": self._generate_plugin,
            "generate_component": self._generate_component,
            "analyze_pattern": self._analyze_pattern,
            "validate_plugin": self._validate_plugin,
            "refactor_to_foundation": self._refactor_to_foundation,
            "find_similar_pattern": self._find_similar_pattern,
            "query_architecture": self._query_architecture,
            "get_plugin_reference": self._get_plugin_reference,
            "get_component_reference": self._get_component_reference,
            "list_catalog": self._list_catalog,
            "invalidate_index": self._invalidate_index,
            "wordpress_integration_guide": self._wordpress_integration_guide,
        }
        for tool_name, handler in handlers.items():
            self.routing_service.register_handler(tool_name, handler)

    def get_tools(self) -> list[Tool]:
        return [
            Tool(name=spec.name, description=spec.description, inputSchema=spec.input_schema())
            for spec in TOOL_SPECS
        ]

    def get_capabilities(self) -> ServerCapabilities:
        return ServerCapabilities(tools={"listChanged": False}, resources={}, logging={})

    async def initialize(self) -> None:
        await self.session_service.initialize()

    async def cleanup(self) -> None:
        await self.session_service.cleanup()

    async def call_tool(self, name: str, arguments: dict[str, Any] | None) -> CallToolResult:
        """Route a tool call; every failure becomes an `isError` result."""
        try:
            return await self.routing_service.route_tool_call(name, arguments)
        except PydanticValidationError as e:
            error = ValidationError(
                f"Invalid arguments for {name}",
                {"errors": [{"loc": list(err["loc"]), "msg": err["msg"]} for err in e.errors()]},
            )
        except FoundationMCPError as e:
            error = e
        except Exception as e:
            logger.exception(f"Tool {name} failed")
            error = FoundationMCPError(f"Tool execution failed: {e}")

        logger.warning(f"Tool {name} returned {error.code}: {error.message}")
        return self.protocol_service.build_error_response(error)

    # ========== Tool Handlers ==========

    async def _generate_plugin(self, args: dict[str, Any]) -> CallToolResult:
        params = GeneratePluginParams.model_validate(args)
        result = self.session_service.plugin_generator.generate(params)
        return self.protocol_service.build_json_response(result)

    async def _generate_component(self, args: dict[str, Any]) -> CallToolResult:
        params = GenerateComponentParams.model_validate(args)
        result = self.session_service.component_generator.generate(params)
        return self.protocol_service.build_json_response(result)

    async def _analyze_pattern(self, args: dict[str, Any]) -> CallToolResult:
        params = AnalyzePatternRequest.model_validate(args)
        result = await self.session_service.pattern_analyzer.analyze_pattern(
            params.code, params.pattern_type
        )
        return self.protocol_service.build_json_response(result)

    async def _validate_plugin(self, args: dict[str, Any]) -> CallToolResult:
        params = ValidatePluginRequest.model_validate(args)
        result = await self.session_service.pattern_analyzer.analyze_pattern(params.code, "plugin")
        validation = {
            "valid": result.matches == "matches",
            "errors": [i.message for i in result.issues if i.severity == "error"],
            "warnings": [i.message for i in result.issues if i.severity == "warning"],
            "coverage": {
                "required_methods": result.conformance.architecture,
                "event_handling": result.conformance.conventions,
                "accessibility": result.conformance.accessibility,
            },
        }
        return self.protocol_service.build_json_response(validation)

    async def _refactor_to_foundation(self, args: dict[str, Any]) -> CallToolResult:
        params = RefactorToFoundationRequest.model_validate(args)
        result = await self.session_service.refactoring_analyzer.analyze_for_refactoring(
            params.source_code, params.source_kind, params.foundation_target
        )
        return self.protocol_service.build_json_response(result)

    async def _find_similar_pattern(self, args: dict[str, Any]) -> CallToolResult:
        params = FindSimilarPatternRequest.model_validate(args)
        snapshot = await self.session_service.indexer.build_index()

        candidates = []
        if params.type in (None, "plugin"):
            candidates += [(p, p.path) for p in snapshot.plugins]
        if params.type in (None, "component"):
            candidates += [(c, c.scss_path) for c in snapshot.components]

        query = params.query.lower()
        matches = [
            {
                "name": entry.name,
                "path": path,
                "similarity": SUBSTRING_SIMILARITY,
                "relevantSnippets": [entry.description],
                "documentation": entry.docs,
            }
            for entry, path in candidates
            if query in f"{entry.name} {entry.description}".lower()
        ]
        return self.protocol_service.build_json_response({"results": matches[: params.limit]})

    async def _query_architecture(self, args: dict[str, Any]) -> CallToolResult:
        params = QueryArchitectureRequest.model_validate(args)
        return self.protocol_service.build_json_response(answer_question(params.question))

    async def _get_plugin_reference(self, args: dict[str, Any]) -> CallToolResult:
        params = ReferenceRequest.model_validate(args)
        snapshot = await self.session_service.indexer.build_index()
        return self.protocol_service.build_json_response(
            plugin_reference(snapshot.find_plugin(params.slug))
        )

    async def _get_component_reference(self, args: dict[str, Any]) -> CallToolResult:
        params = ReferenceRequest.model_validate(args)
        snapshot = await self.session_service.indexer.build_index()
        return self.protocol_service.build_json_response(
            component_reference(snapshot.find_component(params.slug))
        )

    async def _list_catalog(self, args: dict[str, Any]) -> CallToolResult:
        snapshot = await self.session_service.indexer.build_index()
        summary = {
            catalog: {
                "count": len(entries),
                "slugs": [entry.slug for entry in entries],
            }
            for catalog, entries in (
                ("plugins", snapshot.plugins),
                ("components", snapshot.components),
                ("utilities", snapshot.utilities),
                ("grids", snapshot.grids),
            )
        }
        return self.protocol_service.build_json_response(summary)

    async def _invalidate_index(self, args: dict[str, Any]) -> CallToolResult:
        await self.session_service.indexer.invalidate_cache()
        return self.protocol_service.build_json_response({"status": "invalidated"})

    async def _wordpress_integration_guide(self, args: dict[str, Any]) -> CallToolResult:
        params = WordPressIntegrationParams.model_validate(args)
        return self.protocol_service.build_json_response(wordpress_integration_guide(params))


class ToolCallError(Exception):
    """Carries an error payload out of the SDK's call_tool handler."""


def create_mcp_server(mcp_server: FoundationMCPServer) -> Server:
    """Create the SDK server and bind its request handlers to `mcp_server`.

    Args:
        mcp_server: Foundation server whose tools and resources are exposed.

    Returns:
        A configured `Server` ready to run on any transport.
    """
    server = Server(SERVER_NAME)

    @server.list_tools()
    async def handle_list_tools() -> list[Tool]:
        return mcp_server.get_tools()

    @server.call_tool()
    async def handle_call_tool(name: str, arguments: dict | None):
        result = await mcp_server.call_tool(name, arguments)
        if result.isError:
            # The SDK reports a raised exception as an isError result with its text
            raise ToolCallError(result.content[0].text)
        return result.content

    @server.list_resources()
    async def handle_list_resources() -> list[Resource]:
        return mcp_server.resources.list_resources()

    @server.list_resource_templates()
    async def handle_list_resource_templates() -> list[ResourceTemplate]:
        return mcp_server.resources.list_resource_templates()

    @server.read_resource()
    async def handle_read_resource(uri: AnyUrl):
        text = await mcp_server.resources.read(str(uri))
        return [ReadResourceContents(content=text, mime_type=JSON_MIME)]

    return server


async def run_mcp_server(config: ServerConfig) -> None:
    """Run the MCP server using stdio transport."""
    mcp_server = FoundationMCPServer(config)
    server = create_mcp_server(mcp_server)

    init_options = InitializationOptions(
        server_name=SERVER_NAME,
        server_version=__version__,
        capabilities=mcp_server.get_capabilities(),
    )

    try:
        await mcp_server.initialize()
        async with stdio_server() as (read_stream, write_stream):
            await server.run(read_stream, write_stream, init_options)
    except KeyboardInterrupt:
        logger.info("Received interrupt signal, shutting down...")
    except Exception as e:
        logger.error(f"MCP server error: {e}")
        raise
    finally:
        logger.info("Performing server cleanup...")
        await mcp_server.cleanup()
