"""Central configuration loading utilities."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class BaseEnvSettings(BaseSettings):
    """Base settings that enforce case sensitivity for env vars."""

    model_config = {
        "env_file": None,
        "case_sensitive": True,
        "extra": "ignore",
        "populate_by_name": True,
    }


class StorageSettings(BaseEnvSettings):
    """Where snippet blobs are written and read."""

    connection_string: Optional[str] = Field(None, alias="AzureWebJobsStorage")
    backend: Literal["azure", "memory"] = Field("azure", alias="SNIPPETS_STORAGE_BACKEND")
    container: str = Field("snippets", alias="SNIPPETS_CONTAINER")
    blob_suffix: str = Field(".json", alias="SNIPPETS_BLOB_SUFFIX")


class DispatcherSettings(BaseEnvSettings):
    """HTTP surface of the tool endpoint."""

    route: str = Field("webhooks/mcp/sse", alias="MCP_ROUTE")
    auth_level: Literal["ANONYMOUS", "FUNCTION", "ADMIN"] = Field("FUNCTION", alias="MCP_AUTH_LEVEL")
    response_format: Literal["json", "sse"] = Field("json", alias="MCP_RESPONSE_FORMAT")
    cors_enabled: bool = Field(True, alias="MCP_CORS_ENABLED")
    cors_allow_headers: str = Field(
        "Content-Type, Authorization, x-functions-key",
        alias="MCP_CORS_ALLOW_HEADERS",
    )
    log_level: str = Field("INFO", alias="MCP_LOG_LEVEL")


def _resolve_env_file(explicit: Optional[str] = None) -> Optional[str]:
    """Determine the environment file to load configuration from."""

    candidates: list[Path] = []

    if explicit:
        candidates.append(Path(explicit).expanduser())

    value = os.getenv("MCP_SNIPPETS_ENV_FILE")
    if value:
        candidates.append(Path(value).expanduser())

    project_root = Path(__file__).resolve().parents[2]
    env_dir = project_root / "env"
    candidates.extend(
        [
            env_dir / "snippets.env",
            env_dir / "snippets.local.env",
            project_root / ".env",
        ]
    )

    for candidate in candidates:
        if candidate.exists():
            return str(candidate)

    return None


@lru_cache(maxsize=1)
def load_storage_settings(env_file: Optional[str] = None) -> StorageSettings:
    return StorageSettings(_env_file=_resolve_env_file(env_file))


@lru_cache(maxsize=1)
def load_dispatcher_settings(env_file: Optional[str] = None) -> DispatcherSettings:
    return DispatcherSettings(_env_file=_resolve_env_file(env_file))


def reset_settings_cache() -> None:
    load_storage_settings.cache_clear()  # type: ignore[attr-defined]
    load_dispatcher_settings.cache_clear()  # type: ignore[attr-defined]
