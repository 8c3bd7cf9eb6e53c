"""Async interfaces (protocols) for the collaborators the core depends on.

The indexer and analyzers only talk to a key/value cache and a file
source through these protocols, so tests can swap in mocks and the
process wiring decides which concrete backends to use.
"""
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class CacheBackend(Protocol):
    """Key/value cache with optional per-entry TTL (seconds)."""

    async def get(self, key: str) -> Any | None:
        """Return the cached value or None when missing or expired."""

    async def set(self, key: str, value: Any, ttl: int | None = None) -> None:
        """Store `value` under `key`, replacing any previous value."""

    async def delete(self, key: str) -> None:
        """Drop `key` if present."""

    async def has(self, key: str) -> bool:
        """Return True if `key` is present and not expired."""

    async def clear(self) -> None:
        """Drop every key."""


@runtime_checkable
class FileSource(Protocol):
    """Read-only access to the framework checkout."""

    async def exists(self, path: str) -> bool:
        """Return True if `path` names an existing file."""

    async def read_text(self, path: str) -> str:
        """Return the UTF-8 contents of `path`."""

    async def find_files(self, root_dir: str, pattern: str) -> list[str]:
        """Return sorted absolute paths under `root_dir` matching `pattern`."""
