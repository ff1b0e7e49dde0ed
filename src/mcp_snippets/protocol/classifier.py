"""Map an HTTP method onto the kind of request being made."""

from __future__ import annotations

from enum import Enum

from ..errors import UnsupportedMethod


class RequestKind(str, Enum):
    PREFLIGHT = "preflight"
    STREAM_PROBE = "stream_probe"
    TOOL_CALL = "tool_call"


_METHOD_KINDS = {
    "GET": RequestKind.STREAM_PROBE,
    "POST": RequestKind.TOOL_CALL,
    "OPTIONS": RequestKind.PREFLIGHT,
}

ALLOWED_METHODS = tuple(_METHOD_KINDS)


def classify_request(method: str) -> RequestKind:
    """Return the request kind for ``method``; the body is never inspected."""
    try:
        return _METHOD_KINDS[method.upper()]
    except KeyError:
        raise UnsupportedMethod(method) from None
