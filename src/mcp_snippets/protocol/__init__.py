"""Tool-invocation protocol: request classification, envelopes and result types."""

from .classifier import ALLOWED_METHODS, RequestKind, classify_request
from .envelope import parse_envelope
from .models import (
    CorsPreflightOk,
    DispatchResult,
    IncomingRequest,
    OutgoingResponse,
    StreamReady,
    ToolDefinition,
    ToolError,
    ToolInvocationEnvelope,
    ToolProperty,
    ToolSuccess,
)

__all__ = [
    "ALLOWED_METHODS",
    "CorsPreflightOk",
    "DispatchResult",
    "IncomingRequest",
    "OutgoingResponse",
    "RequestKind",
    "StreamReady",
    "ToolDefinition",
    "ToolError",
    "ToolInvocationEnvelope",
    "ToolProperty",
    "ToolSuccess",
    "classify_request",
    "parse_envelope",
]
