"""Shared fixtures: in-memory blob store, tool registry and dispatcher."""

import pytest

from mcp_snippets.http import SnippetDispatcher
from mcp_snippets.settings import DispatcherSettings, StorageSettings
from mcp_snippets.snippets.tools import build_snippet_registry
from mcp_snippets.storage import InMemoryBlobStore


@pytest.fixture
def store() -> InMemoryBlobStore:
    return InMemoryBlobStore()


@pytest.fixture
def registry(store):
    return build_snippet_registry(store)


@pytest.fixture
def dispatcher_settings() -> DispatcherSettings:
    return DispatcherSettings(_env_file=None, MCP_RESPONSE_FORMAT="json", MCP_CORS_ENABLED=True)


@pytest.fixture
def storage_settings() -> StorageSettings:
    return StorageSettings(_env_file=None, SNIPPETS_STORAGE_BACKEND="memory")


@pytest.fixture
def dispatcher(registry, dispatcher_settings) -> SnippetDispatcher:
    return SnippetDispatcher(registry, dispatcher_settings)
