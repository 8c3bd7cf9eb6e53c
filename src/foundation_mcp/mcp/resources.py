"""Read-only MCP resources exposing the catalog snapshot as JSON."""

import json
import re

from loguru import logger
from mcp.types import Resource, ResourceTemplate
from pydantic import AnyUrl

from ..core.exceptions import NotFoundError
from ..core.indexer import CodebaseIndexer
from ..core.models import ComponentEntry, PluginEntry
from .architecture import plugin_architecture

JSON_MIME = "application/json"

CATALOG_INDEXES = {
    "plugins": "Complete index of all Foundation plugins",
    "components": "Complete index of all Foundation components",
    "utilities": "Complete index of all Foundation JavaScript utilities",
    "grids": "Built-in Foundation grid systems",
}

ARCHITECTURE_URI = "foundation://architecture/plugins"

REFERENCE_URI = re.compile(r"^foundation://(plugins|components)/([^/]+)/reference$")


class ResourceProvider:
    """Lists and reads `foundation://` resources from the current snapshot."""

    def __init__(self, indexer: CodebaseIndexer):
        self.indexer = indexer

    def list_resources(self) -> list[Resource]:
        return [
            Resource(
                uri=AnyUrl(f"foundation://{catalog}/index"),
                name=f"Foundation {catalog.capitalize()} Index",
                description=description,
                mimeType=JSON_MIME,
            )
            for catalog, description in CATALOG_INDEXES.items()
        ] + [
            Resource(
                uri=AnyUrl(ARCHITECTURE_URI),
                name="Plugin Architecture Guide",
                description="Lifecycle and required methods of Foundation plugins",
                mimeType=JSON_MIME,
            )
        ]

    def list_resource_templates(self) -> list[ResourceTemplate]:
        return [
            ResourceTemplate(
                uriTemplate="foundation://plugins/{slug}/reference",
                name="Plugin Reference",
                description="API reference for one Foundation plugin",
                mimeType=JSON_MIME,
            ),
            ResourceTemplate(
                uriTemplate="foundation://components/{slug}/reference",
                name="Component Reference",
                description="Sass reference for one Foundation component",
                mimeType=JSON_MIME,
            ),
        ]

    async def read(self, uri: str) -> str:
        """Return the JSON text for `uri`.

        Raises ``NotFoundError`` for unknown URIs or slugs.
        """
        logger.debug(f"Reading resource {uri}")
        if uri == ARCHITECTURE_URI:
            return json.dumps(plugin_architecture(), indent=2)

        snapshot = await self.indexer.build_index()

        for catalog in CATALOG_INDEXES:
            if uri == f"foundation://{catalog}/index":
                entries = getattr(snapshot, catalog)
                return json.dumps([entry.to_wire() for entry in entries], indent=2)

        match = REFERENCE_URI.match(uri)
        if match:
            catalog, slug = match.groups()
            if catalog == "plugins":
                return json.dumps(plugin_reference(snapshot.find_plugin(slug)), indent=2)
            return json.dumps(component_reference(snapshot.find_component(slug)), indent=2)

        raise NotFoundError(f"Resource not found: {uri}", {"uri": uri})


def plugin_reference(plugin: PluginEntry) -> dict:
    return {
        "name": plugin.name,
        "slug": plugin.slug,
        "description": plugin.description,
        "selector": plugin.selector,
        "className": plugin.class_name,
        "supportsNesting": plugin.supports_nesting,
        "documentation": plugin.docs,
        "path": plugin.path,
    }


def component_reference(component: ComponentEntry) -> dict:
    return {
        "name": component.name,
        "slug": component.slug,
        "description": component.description,
        "mixins": list(component.mixins),
        "cssClasses": list(component.css_classes),
        "documentation": component.docs,
        "scssPath": component.scss_path,
    }
