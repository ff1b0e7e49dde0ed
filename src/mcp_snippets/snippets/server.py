"""Factory for the snippet MCP server served over stdio."""

from __future__ import annotations

from typing import Any, Dict, Optional

from mcp.server.fastmcp import FastMCP

from ..logging import configure_logging, get_logger
from ..protocol import ToolInvocationEnvelope
from ..settings import load_dispatcher_settings, load_storage_settings
from ..storage import build_blob_store
from .registry import ToolRegistry
from .tools import (
    ECHO_TOOL,
    GET_SNIPPET_TOOL,
    SAVE_SNIPPET_TOOL,
    SNIPPET_NAME_PROPERTY_NAME,
    SNIPPET_PROPERTY_NAME,
    TRIGGER_INPUT_PROPERTY_NAME,
    build_snippet_registry,
)

LOGGER = get_logger(__name__)


def build_snippet_server(registry: Optional[ToolRegistry] = None) -> FastMCP:
    configure_logging(load_dispatcher_settings().log_level)
    if registry is None:
        storage = load_storage_settings()
        registry = build_snippet_registry(build_blob_store(storage), storage.blob_suffix)

    def _call(tool_name: str, arguments: Dict[str, Any]) -> Dict[str, Any]:
        return registry.invoke(ToolInvocationEnvelope(name=tool_name, arguments=arguments))

    def echo(triggerInput: str) -> Dict[str, Any]:
        return _call(ECHO_TOOL.tool_name, {TRIGGER_INPUT_PROPERTY_NAME: triggerInput})

    def save_snippet(snippetName: str, snippet: str) -> Dict[str, Any]:
        return _call(
            SAVE_SNIPPET_TOOL.tool_name,
            {SNIPPET_NAME_PROPERTY_NAME: snippetName, SNIPPET_PROPERTY_NAME: snippet},
        )

    def get_snippet(snippetName: str) -> Dict[str, Any]:
        return _call(GET_SNIPPET_TOOL.tool_name, {SNIPPET_NAME_PROPERTY_NAME: snippetName})

    server = FastMCP("snippets")

    # FastMCP derives the input schema from each wrapper's signature
    for definition, tool_func in (
        (ECHO_TOOL, echo),
        (SAVE_SNIPPET_TOOL, save_snippet),
        (GET_SNIPPET_TOOL, get_snippet),
    ):
        server.tool(name=definition.tool_name, description=definition.description)(tool_func)
        LOGGER.info("mcp_tool_registered", tool=definition.tool_name)

    return server


def run() -> None:
    server = build_snippet_server()
    server.run()
