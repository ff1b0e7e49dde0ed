#!/usr/bin/env python3
"""
Demo script showing how the snippet endpoint answers requests locally.
This simulates what an MCP client would send to the function route.
"""

import asyncio
import json

from mcp_snippets.http import SnippetDispatcher
from mcp_snippets.protocol import IncomingRequest
from mcp_snippets.settings import DispatcherSettings
from mcp_snippets.snippets import build_snippet_server
from mcp_snippets.snippets.tools import build_snippet_registry
from mcp_snippets.storage import InMemoryBlobStore


def _show(dispatcher: SnippetDispatcher, method: str, payload=None) -> None:
    body = json.dumps(payload).encode() if payload is not None else b""
    response = dispatcher.dispatch(IncomingRequest(method=method, body=body))
    print(f"   {method} -> {response.status_code}")
    for header, value in response.headers.items():
        print(f"     {header}: {value}")
    if response.body:
        print(f"     body: {response.body.decode()!r}")


async def demo_tool_calls():
    """Walk through the three request kinds and the three tools."""

    print("=== Snippet Endpoint Demo ===\n")

    store = InMemoryBlobStore()
    registry = build_snippet_registry(store)
    dispatcher = SnippetDispatcher(registry, DispatcherSettings(_env_file=None))

    server = build_snippet_server(registry)
    tools = await server.list_tools()
    print(f"Available tools ({len(tools)}):")
    for tool in tools:
        print(f"  - {tool.name}: {tool.description or 'No description'}")

    print("\n1. CORS preflight")
    _show(dispatcher, "OPTIONS")

    print("\n2. Stream probe")
    _show(dispatcher, "GET")

    print("\n3. echo tool call")
    _show(dispatcher, "POST", {"name": "echo", "arguments": {"triggerInput": "Hello, World!"}})

    print("\n4. saveSnippet then getSnippet")
    _show(dispatcher, "POST", {"name": "saveSnippet", "arguments": {"snippetName": "greeting", "snippet": "hi"}})
    _show(dispatcher, "POST", {"name": "getSnippet", "arguments": {"snippetName": "greeting"}})

    print("\n5. Rejected requests")
    _show(dispatcher, "POST", {"name": "getSnippet", "arguments": {"snippetName": "../secret"}})
    _show(dispatcher, "POST", {"name": "unknown", "arguments": {}})

    print("\n=== Server Transport Options ===")
    print("1. http (default): the function route served locally")
    print("   Command: mcp-snippets http --port 7071")
    print("2. stdio: the same tools over MCP stdin/stdout")
    print("   Command: mcp-snippets stdio")


if __name__ == "__main__":
    asyncio.run(demo_tool_calls())
