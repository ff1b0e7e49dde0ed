"""Snippet tools, their registry and the MCP server built from them."""

from .registry import RegisteredTool, ToolRegistry
from .server import build_snippet_server
from .tools import SNIPPET_TOOL_DEFINITIONS, SnippetTools, build_snippet_registry

__all__ = [
    "RegisteredTool",
    "SNIPPET_TOOL_DEFINITIONS",
    "SnippetTools",
    "ToolRegistry",
    "build_snippet_registry",
    "build_snippet_server",
]
