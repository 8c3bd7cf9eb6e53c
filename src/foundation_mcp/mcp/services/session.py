"""SessionService: owns the collaborators shared by every request."""

from loguru import logger

from ...analysis import PatternAnalyzer, RefactoringAnalyzer
from ...config.settings import ServerConfig
from ...core.cache import create_cache
from ...core.filesystem import LocalFileSource
from ...core.indexer import CodebaseIndexer
from ...core.interfaces import CacheBackend, FileSource
from ...generators import ComponentGenerator, PluginGenerator


class SessionService:
    """Wires the cache, file source, indexer, analyzers and generators.

    The cache is created here from configuration (or injected by tests)
    rather than living in a module-level singleton.
    """

    def __init__(
        self,
        config: ServerConfig,
        cache: CacheBackend | None = None,
        file_source: FileSource | None = None,
    ):
        """Create the shared collaborators.

        Args:
            config: Server configuration
            cache: Cache backend; built from `config.cache` when omitted
            file_source: File access; the local filesystem when omitted
        """
        self.config = config
        self.cache = cache if cache is not None else create_cache(config)
        self.file_source = file_source if file_source is not None else LocalFileSource()

        self.indexer = CodebaseIndexer(config, self.cache, self.file_source)
        self.pattern_analyzer = PatternAnalyzer(self.file_source)
        self.refactoring_analyzer = RefactoringAnalyzer(self.indexer)
        self.plugin_generator = PluginGenerator()
        self.component_generator = ComponentGenerator()

        self._initialized = False

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    async def initialize(self) -> None:
        """Warm the index so the first tool call doesn't pay for the walk.

        Calling it again after a successful start is a no-op.
        """
        if self._initialized:
            return
        logger.info(
            f"Starting Foundation MCP session (repo={self.config.foundation_repo_path}, "
            f"cache={self.config.cache.backend})"
        )
        snapshot = await self.indexer.build_index()
        logger.info(
            f"Indexed {len(snapshot.plugins)} plugins and {len(snapshot.components)} components"
        )
        self._initialized = True

    async def cleanup(self) -> None:
        """Close the cache backend and mark the session uninitialized."""
        close = getattr(self.cache, "close", None)
        if close is not None:
            await close()
        self._initialized = False
