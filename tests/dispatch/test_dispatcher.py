"""End-to-end dispatch from request to transport response."""

import json

import pytest

from mcp_snippets.errors import StoreUnavailable
from mcp_snippets.http import READY_FRAME, SnippetDispatcher
from mcp_snippets.protocol import IncomingRequest, ToolError, ToolSuccess
from mcp_snippets.settings import DispatcherSettings


def _post(dispatcher, payload):
    body = payload if isinstance(payload, bytes) else json.dumps(payload).encode()
    return dispatcher.dispatch(IncomingRequest(method="POST", body=body))


@pytest.mark.parametrize("body", [b"", b"garbage", b'{"name": "echo"'])
def test_options_is_preflight_regardless_of_body(dispatcher, body: bytes) -> None:
    response = dispatcher.dispatch(IncomingRequest(method="OPTIONS", body=body))
    assert response.status_code == 200
    assert response.body == b""
    assert response.headers["Access-Control-Allow-Origin"] == "*"
    assert response.headers["Access-Control-Allow-Methods"] == "GET,POST,OPTIONS"
    assert "Content-Type" in response.headers["Access-Control-Allow-Headers"]


def test_get_returns_ready_frame(dispatcher) -> None:
    response = dispatcher.dispatch(IncomingRequest(method="GET", body=b"ignored"))
    assert response.status_code == 200
    assert response.body == b'data: {"ready":true}\n\n' == READY_FRAME
    assert response.headers["Content-Type"] == "text/event-stream"
    assert response.headers["Cache-Control"] == "no-cache"
    assert response.headers["Connection"] == "keep-alive"
    assert response.headers["Access-Control-Allow-Origin"] == "*"


def test_echo_tool_call(dispatcher) -> None:
    response = _post(dispatcher, {"name": "echo", "arguments": {"triggerInput": "Hello, World!"}})
    assert response.status_code == 200
    assert response.headers["Content-Type"] == "application/json"
    assert json.loads(response.body) == {"content": "Hello, World!"}


def test_save_then_get(dispatcher) -> None:
    saved = _post(dispatcher, {"name": "saveSnippet", "arguments": {"snippetName": "x", "snippet": "hi"}})
    assert json.loads(saved.body) == {"success": True, "message": "Snippet saved successfully"}
    fetched = _post(dispatcher, {"name": "getSnippet", "arguments": {"snippetName": "x"}})
    assert fetched.status_code == 200
    assert json.loads(fetched.body) == {"success": True, "snippet": "hi"}


def test_get_unknown_snippet_is_not_a_server_error(dispatcher) -> None:
    response = _post(dispatcher, {"name": "getSnippet", "arguments": {"snippetName": "nope"}})
    assert response.status_code == 200
    assert json.loads(response.body)["success"] is False


@pytest.mark.parametrize(
    "payload, kind",
    [
        (b"{not json", "MalformedJson"),
        (b"", "MalformedJson"),
        (b"[" * 200000, "MalformedJson"),
        ({"arguments": {}}, "MissingField"),
        ({"name": "echo"}, "MissingField"),
        ({"name": "echo", "arguments": {}}, "MissingArgument"),
        ({"name": "doesNotExist", "arguments": {}}, "UnknownTool"),
        ({"name": "saveSnippet", "arguments": {"snippetName": "../secret", "snippet": "x"}}, "InvalidArgument"),
    ],
)
def test_client_errors_are_400(dispatcher, payload, kind: str) -> None:
    body = payload if isinstance(payload, bytes) else json.dumps(payload).encode()
    result = dispatcher.resolve(IncomingRequest(method="POST", body=body))
    assert isinstance(result, ToolError)
    assert result.kind == kind
    response = dispatcher.build_response(result)
    assert response.status_code == 400
    assert set(json.loads(response.body)) == {"error"}
    assert response.headers["Access-Control-Allow-Origin"] == "*"


def test_unknown_tool_message_names_the_tool(dispatcher) -> None:
    response = _post(dispatcher, {"name": "frobnicate", "arguments": {}})
    assert "frobnicate" in json.loads(response.body)["error"]


def test_unsupported_method(dispatcher) -> None:
    response = dispatcher.dispatch(IncomingRequest(method="DELETE"))
    assert response.status_code == 405
    assert response.headers["Allow"] == "GET, POST, OPTIONS"


def test_store_outage_is_sanitized_500(dispatcher, store, monkeypatch) -> None:
    def _fail(key):
        raise StoreUnavailable()

    monkeypatch.setattr(store, "get", _fail)
    response = _post(dispatcher, {"name": "getSnippet", "arguments": {"snippetName": "x"}})
    assert response.status_code == 500
    assert json.loads(response.body) == {"error": "Snippet storage is unavailable"}


def test_unexpected_exception_is_sanitized_500(dispatcher, store, monkeypatch) -> None:
    def _boom(key, value):
        raise RuntimeError("secret stack detail")

    monkeypatch.setattr(store, "put", _boom)
    response = _post(dispatcher, {"name": "saveSnippet", "arguments": {"snippetName": "x", "snippet": "y"}})
    assert response.status_code == 500
    assert json.loads(response.body) == {"error": "Internal server error"}
    assert b"secret" not in response.body


def test_resolve_success_result(dispatcher) -> None:
    result = dispatcher.resolve(
        IncomingRequest(method="POST", body=b'{"name": "echo", "arguments": {"triggerInput": "a"}}')
    )
    assert result == ToolSuccess(payload={"content": "a"})


def test_sse_mode_frames_success_and_errors(registry) -> None:
    settings = DispatcherSettings(_env_file=None, MCP_RESPONSE_FORMAT="sse")
    dispatcher = SnippetDispatcher(registry, settings)
    ok = _post(dispatcher, {"name": "echo", "arguments": {"triggerInput": "hi"}})
    assert ok.headers["Content-Type"] == "text/event-stream"
    assert ok.body == b'data: {"content": "hi"}\n\n'
    bad = _post(dispatcher, b"nope")
    assert bad.status_code == 400
    assert bad.body.startswith(b"data: ") and bad.body.endswith(b"\n\n")
    assert json.loads(bad.body[len(b"data: "):].strip()) == {"error": "Request body is not valid JSON"}


def test_cors_can_be_disabled(registry) -> None:
    settings = DispatcherSettings(_env_file=None, MCP_CORS_ENABLED=False)
    dispatcher = SnippetDispatcher(registry, settings)
    response = dispatcher.dispatch(IncomingRequest(method="GET"))
    assert "Access-Control-Allow-Origin" not in response.headers
