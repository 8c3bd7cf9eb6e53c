"""Local file source backed by pathlib."""

import asyncio
from pathlib import Path

from loguru import logger


class LocalFileSource:
    """`FileSource` implementation reading from the local disk.

    Blocking filesystem calls are pushed to a worker thread so concurrent
    catalog walks don't stall the event loop.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    async def exists(self, path: str) -> bool:
        return await asyncio.to_thread(self._is_file, path)

    async def read_text(self, path: str) -> str:
        return await asyncio.to_thread(Path(path).read_text, encoding=self.encoding)

    async def find_files(self, root_dir: str, pattern: str) -> list[str]:
        return await asyncio.to_thread(self._glob, root_dir, pattern)

    @staticmethod
    def _is_file(path: str) -> bool:
        # Code snippets are passed through here too; very long or multi-line
        # strings make the OS reject the name outright.
        try:
            return Path(path).is_file()
        except (OSError, ValueError):
            return False

    @staticmethod
    def _glob(root_dir: str, pattern: str) -> list[str]:
        root = Path(root_dir)
        if not root.is_dir():
            logger.warning(f"Directory not found, nothing to index: {root}")
            return []
        return sorted(str(p.resolve()) for p in root.glob(pattern) if p.is_file())
