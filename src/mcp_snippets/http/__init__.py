"""HTTP surface: dispatcher, local ASGI app and Azure Functions binding."""

from .app import build_dispatcher, create_app
from .dispatcher import READY_FRAME, SnippetDispatcher

__all__ = ["READY_FRAME", "SnippetDispatcher", "build_dispatcher", "create_app"]
