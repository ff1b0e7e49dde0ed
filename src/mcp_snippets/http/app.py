"""Local starlette application serving the dispatcher on one route."""

from __future__ import annotations

from typing import Optional

from starlette.applications import Starlette
from starlette.concurrency import run_in_threadpool
from starlette.requests import Request
from starlette.responses import Response
from starlette.routing import Route

from ..logging import configure_logging, get_logger
from ..protocol import ALLOWED_METHODS, IncomingRequest
from ..settings import DispatcherSettings, StorageSettings, load_dispatcher_settings, load_storage_settings
from ..snippets.tools import build_snippet_registry
from ..storage import BlobStore, build_blob_store
from .dispatcher import SnippetDispatcher

LOGGER = get_logger(__name__)

_REJECTED_METHODS = ("PUT", "PATCH", "DELETE")


def build_dispatcher(
    store: Optional[BlobStore] = None,
    settings: Optional[DispatcherSettings] = None,
    storage_settings: Optional[StorageSettings] = None,
) -> SnippetDispatcher:
    settings = settings or load_dispatcher_settings()
    storage_settings = storage_settings or load_storage_settings()
    configure_logging(settings.log_level)
    registry = build_snippet_registry(store or build_blob_store(storage_settings), storage_settings.blob_suffix)
    return SnippetDispatcher(registry, settings)


def create_app(dispatcher: Optional[SnippetDispatcher] = None) -> Starlette:
    dispatcher = dispatcher or build_dispatcher()
    path = "/" + dispatcher.settings.route.strip("/")

    async def endpoint(request: Request) -> Response:
        incoming = IncomingRequest(
            method=request.method,
            headers=dict(request.headers),
            body=await request.body(),
        )
        outgoing = await run_in_threadpool(dispatcher.dispatch, incoming)
        return Response(
            content=outgoing.body,
            status_code=outgoing.status_code,
            headers=outgoing.headers,
        )

    LOGGER.info("http_route_mounted", path=path)
    # other verbs are routed too so the dispatcher answers them with 405
    return Starlette(routes=[Route(path, endpoint, methods=[*ALLOWED_METHODS, *_REJECTED_METHODS])])
