"""Codebase indexer for a Foundation for Sites checkout."""

import asyncio
import os
import re
from pathlib import Path

from loguru import logger

from ..config.settings import ServerConfig
from ..parsers.docs import extract_jsdoc, extract_sassdoc
from ..parsers.javascript import parse_script
from ..parsers.scss import parse_stylesheet
from .cache import CacheKeys
from .exceptions import ParseError
from .interfaces import CacheBackend, FileSource
from .models import CatalogSnapshot, ComponentEntry, GridEntry, PluginEntry, UtilityEntry

DOCS_URL = "https://get.foundation/sites/docs/{slug}.html"

DATA_SELECTOR = re.compile(r"\[data-([a-z-]+)\]")

# Errors that only cost us the one file being indexed
FILE_ERRORS = (ParseError, OSError, UnicodeDecodeError)

BUILTIN_GRIDS = (
    GridEntry(
        name="XY Grid",
        slug="xy-grid",
        scss_path="scss/xy-grid/",
        description="Modern CSS Grid and Flexbox-based layout system",
    ),
    GridEntry(
        name="Float Grid",
        slug="float-grid",
        scss_path="scss/grid/",
        description="Classic float-based grid system",
    ),
)


def _is_plugin_file(path: str) -> bool:
    name = os.path.basename(path)
    return not (
        "foundation.util." in name or "foundation.core." in name or name == "foundation.js"
    )


class CodebaseIndexer:
    """Builds the catalog snapshot from the framework checkout.

    The snapshot is cached as one unit under `CacheKeys.index()`; there is
    no incremental indexing, a stale snapshot is dropped with
    `invalidate_cache()` and rebuilt on the next `build_index()`.
    """

    def __init__(self, config: ServerConfig, cache: CacheBackend, file_source: FileSource):
        """Initialize the indexer.

        Args:
            config: Server configuration; `foundation_repo_path` is the checkout root
            cache: Backend holding the snapshot between calls
            file_source: File access used for every walk and read
        """
        self.config = config
        self.cache = cache
        self.file_source = file_source
        self.repo_root = Path(config.foundation_repo_path)

    async def build_index(self) -> CatalogSnapshot:
        """Return the catalog snapshot, walking the checkout on a cache miss.

        Files that fail to parse are logged and skipped, so one bad file never
        fails the whole build.

        Returns:
            The cached `CatalogSnapshot`, or a freshly built one
        """
        cached = await self.cache.get(CacheKeys.index())
        if cached is not None:
            logger.debug("Returning cached index")
            if isinstance(cached, CatalogSnapshot):
                return cached
            return CatalogSnapshot.model_validate(cached)

        logger.info(f"Building Foundation codebase index from {self.repo_root}")
        plugins, components, utilities, grids = await asyncio.gather(
            self._index_plugins(),
            self._index_components(),
            self._index_utilities(),
            self._index_grids(),
        )

        snapshot = CatalogSnapshot(
            plugins=tuple(plugins),
            components=tuple(components),
            utilities=tuple(utilities),
            grids=tuple(grids),
        )
        await self.cache.set(CacheKeys.index(), snapshot)
        logger.info(
            f"Index built: {len(plugins)} plugins, {len(components)} components, "
            f"{len(utilities)} utilities, {len(grids)} grids"
        )
        return snapshot

    async def invalidate_cache(self) -> None:
        """Drop the cached snapshot; the next `build_index` re-walks the checkout."""
        await self.cache.delete(CacheKeys.index())
        logger.info("Index cache invalidated")

    # ========== Catalog walks ==========

    async def _index_plugins(self) -> list[PluginEntry]:
        files = await self.file_source.find_files(str(self.repo_root / "js"), "foundation.*.js")
        plugins: list[PluginEntry] = []
        for file in filter(_is_plugin_file, files):
            try:
                plugin = await self._parse_plugin_file(file)
            except FILE_ERRORS as e:
                logger.warning(f"Failed to parse plugin file {file}: {e}")
                continue
            if plugin is not None:
                plugins.append(plugin)
        return plugins

    async def _parse_plugin_file(self, file: str) -> PluginEntry | None:
        content = await self.file_source.read_text(file)
        record = parse_script(content)
        if not record.class_name:
            logger.warning(f"Skipping {file}: no plugin class found")
            return None

        slug = Path(file).stem.replace("foundation.", "", 1)
        docs = extract_jsdoc(content)
        selector_match = DATA_SELECTOR.search(content)
        selector = f"[data-{selector_match.group(1)}]" if selector_match else f"[data-{slug}]"

        return PluginEntry(
            name=record.class_name,
            slug=slug,
            path=self._relative(file),
            description=docs.get(record.class_name) or f"{record.class_name} plugin",
            class_name=record.class_name,
            selector=selector,
            supports_nesting="nested" in content or "Nest" in content,
            docs=DOCS_URL.format(slug=slug),
        )

    async def _index_components(self) -> list[ComponentEntry]:
        files = await self.file_source.find_files(
            str(self.repo_root / "scss" / "components"), "*.scss"
        )
        components: list[ComponentEntry] = []
        for file in files:
            try:
                components.append(await self._parse_component_file(file))
            except FILE_ERRORS as e:
                logger.warning(f"Failed to parse component file {file}: {e}")
        return components

    async def _parse_component_file(self, file: str) -> ComponentEntry:
        content = await self.file_source.read_text(file)
        record = parse_stylesheet(content)

        stem = Path(file).stem
        slug = stem[1:] if stem.startswith("_") else stem
        name = " ".join(word[:1].upper() + word[1:] for word in slug.split("-"))
        docs = extract_sassdoc(content)

        return ComponentEntry(
            name=name,
            slug=slug,
            scss_path=self._relative(file),
            description=docs.get(slug) or f"{name} component",
            mixins=tuple(mixin.name for mixin in record.mixins),
            css_classes=tuple(record.class_names),
            docs=DOCS_URL.format(slug=slug),
        )

    async def _index_utilities(self) -> list[UtilityEntry]:
        files = await self.file_source.find_files(
            str(self.repo_root / "js"), "foundation.util.*.js"
        )
        utilities: list[UtilityEntry] = []
        for file in files:
            try:
                utilities.append(await self._parse_utility_file(file))
            except FILE_ERRORS as e:
                logger.warning(f"Failed to parse utility file {file}: {e}")
        return utilities

    async def _parse_utility_file(self, file: str) -> UtilityEntry:
        content = await self.file_source.read_text(file)
        record = parse_script(content)

        slug = Path(file).stem.replace("foundation.util.", "", 1)
        words = " ".join(part for part in re.split(r"(?=[A-Z])", slug) if part)
        name = words[:1].upper() + words[1:]
        docs = extract_jsdoc(content)

        return UtilityEntry(
            name=name,
            slug=slug,
            path=self._relative(file),
            description=docs.get(record.class_name) or f"{name} utility",
            exports=tuple(record.exported_names),
        )

    async def _index_grids(self) -> list[GridEntry]:
        return list(BUILTIN_GRIDS)

    def _relative(self, file: str) -> str:
        return Path(os.path.relpath(file, self.repo_root)).as_posix()
