"""Method-multiplexed dispatcher for the single tool-invocation route."""

from __future__ import annotations

import json
from typing import Any, Dict, Optional

from ..errors import ToolInvocationError, UnsupportedMethod
from ..logging import get_logger
from ..protocol import (
    ALLOWED_METHODS,
    CorsPreflightOk,
    DispatchResult,
    IncomingRequest,
    OutgoingResponse,
    RequestKind,
    StreamReady,
    ToolError,
    ToolSuccess,
    classify_request,
    parse_envelope,
)
from ..settings import DispatcherSettings, load_dispatcher_settings
from ..snippets.registry import ToolRegistry

LOGGER = get_logger(__name__)

READY_FRAME = b'data: {"ready":true}\n\n'
EVENT_STREAM = "text/event-stream"
APPLICATION_JSON = "application/json"
INTERNAL_ERROR_MESSAGE = "Internal server error"


def sse_frame(payload: Dict[str, Any]) -> bytes:
    return f"data: {json.dumps(payload)}\n\n".encode("utf-8")


class SnippetDispatcher:
    """Turn an :class:`IncomingRequest` into an :class:`OutgoingResponse`.

    ``resolve`` decides what happened and never raises; ``build_response``
    renders the outcome for the transport. Client errors are detected before
    any tool runs, so a rejected request has no side effects.
    """

    def __init__(self, registry: ToolRegistry, settings: Optional[DispatcherSettings] = None) -> None:
        self.registry = registry
        self.settings = settings or load_dispatcher_settings()

    def dispatch(self, request: IncomingRequest) -> OutgoingResponse:
        LOGGER.info("request_received", method=request.method, body_length=len(request.body or b""))
        return self.build_response(self.resolve(request))

    def resolve(self, request: IncomingRequest) -> DispatchResult:
        try:
            kind = classify_request(request.method)
            if kind is RequestKind.PREFLIGHT:
                return CorsPreflightOk()
            if kind is RequestKind.STREAM_PROBE:
                LOGGER.info("stream_probe_acknowledged")
                return StreamReady()
            envelope = parse_envelope(request.body or b"")
            return ToolSuccess(payload=self.registry.invoke(envelope))
        except ToolInvocationError as exc:
            if exc.status_code >= 500:
                LOGGER.error("tool_call_failed", kind=exc.kind, error=exc.message)
            else:
                LOGGER.warning("tool_call_rejected", kind=exc.kind, error=exc.message)
            return ToolError(kind=exc.kind, message=exc.message, status_code=exc.status_code)
        except Exception:  # noqa: BLE001
            LOGGER.exception("tool_call_crashed", method=request.method)
            return ToolError(kind="InternalError", message=INTERNAL_ERROR_MESSAGE, status_code=500)

    def build_response(self, result: DispatchResult) -> OutgoingResponse:
        if isinstance(result, CorsPreflightOk):
            headers = {
                "Access-Control-Allow-Origin": "*",
                "Access-Control-Allow-Methods": ",".join(ALLOWED_METHODS),
                "Access-Control-Allow-Headers": self.settings.cors_allow_headers,
            }
            return OutgoingResponse(status_code=200, headers=headers, body=b"")

        if isinstance(result, StreamReady):
            headers = {
                "Content-Type": EVENT_STREAM,
                "Cache-Control": "no-cache",
                "Connection": "keep-alive",
            }
            return self._finish(OutgoingResponse(status_code=200, headers=headers, body=READY_FRAME))

        if isinstance(result, ToolSuccess):
            return self._finish(self._render(200, result.payload))

        if isinstance(result, ToolError):
            response = self._render(result.status_code, {"error": result.message})
            if result.kind == UnsupportedMethod.kind:
                response.headers["Allow"] = ", ".join(ALLOWED_METHODS)
            return self._finish(response)

        raise TypeError(f"Unsupported dispatch result: {result!r}")

    def _render(self, status_code: int, payload: Dict[str, Any]) -> OutgoingResponse:
        if self.settings.response_format == "sse":
            return OutgoingResponse(
                status_code=status_code,
                headers={"Content-Type": EVENT_STREAM},
                body=sse_frame(payload),
            )
        return OutgoingResponse(
            status_code=status_code,
            headers={"Content-Type": APPLICATION_JSON},
            body=json.dumps(payload).encode("utf-8"),
        )

    def _finish(self, response: OutgoingResponse) -> OutgoingResponse:
        if self.settings.cors_enabled:
            response.headers["Access-Control-Allow-Origin"] = "*"
        return response
