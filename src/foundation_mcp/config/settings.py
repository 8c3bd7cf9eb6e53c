"""Server configuration loaded from environment variables."""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, PositiveInt, model_validator
from pydantic import ValidationError as PydanticValidationError

from ..core.exceptions import ConfigurationError

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class CacheConfig(BaseModel):
    backend: Literal["memory", "redis"] = "memory"
    ttl: PositiveInt = 3600
    max_size: PositiveInt = 1000
    redis_url: str | None = None

    @model_validator(mode="after")
    def check_redis_url(self) -> "CacheConfig":
        if self.backend == "redis" and not self.redis_url:
            raise ValueError("REDIS_URL is required when using the redis cache backend")
        return self


class ServerConfig(BaseModel):
    """Top-level server configuration."""

    foundation_repo_path: Path = Field(default_factory=Path.cwd)
    log_level: LogLevel = "INFO"
    log_file: Path | None = None
    cache: CacheConfig = Field(default_factory=CacheConfig)


def load_config(
    env: Mapping[str, str] | None = None, repo_path: Path | None = None
) -> ServerConfig:
    """Build a `ServerConfig` from environment variables.

    `repo_path` (e.g. from a CLI flag) wins over FOUNDATION_REPO_PATH, which
    wins over MCP_PROJECT_ROOT; the current directory is the last resort.

    Raises ``ConfigurationError`` when a value is missing or malformed.
    """
    env = os.environ if env is None else env

    if repo_path is None:
        env_repo = env.get("FOUNDATION_REPO_PATH") or env.get("MCP_PROJECT_ROOT")
        repo_path = Path(env_repo) if env_repo else Path.cwd()

    raw_cache: dict[str, object] = {
        "backend": env.get("CACHE_BACKEND", "memory").lower(),
        "ttl": env.get("CACHE_TTL", "3600"),
        "max_size": env.get("CACHE_MAX_SIZE", "1000"),
        "redis_url": env.get("REDIS_URL") or None,
    }

    log_level = env.get("MCP_LOG_LEVEL", "INFO").upper()
    if log_level == "WARN":
        log_level = "WARNING"

    try:
        return ServerConfig(
            foundation_repo_path=repo_path.expanduser().resolve(),
            log_level=log_level,
            log_file=env.get("MCP_LOG_FILE") or None,
            cache=CacheConfig(**raw_cache),
        )
    except PydanticValidationError as e:
        raise ConfigurationError(
            f"Invalid configuration: {e.errors()[0]['msg']}",
            {"errors": [err["msg"] for err in e.errors()]},
        ) from e
