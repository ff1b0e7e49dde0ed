"""Snippet tool-invocation endpoint for serverless HTTP and MCP clients."""

__version__ = "0.1.0"
