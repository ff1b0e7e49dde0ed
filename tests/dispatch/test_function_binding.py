"""Azure Functions request/response conversion."""

import json

import azure.functions as func

from mcp_snippets.http.function_binding import auth_level, to_http_response, to_incoming_request

URL = "http://localhost:7071/api/webhooks/mcp/sse"


def test_round_trip_through_azure_types(dispatcher) -> None:
    req = func.HttpRequest(
        method="POST",
        url=URL,
        headers={"Content-Type": "application/json"},
        body=json.dumps({"name": "echo", "arguments": {"triggerInput": "hi"}}).encode(),
    )
    incoming = to_incoming_request(req)
    assert incoming.method == "POST"
    assert incoming.headers["content-type"] == "application/json"

    response = to_http_response(dispatcher.dispatch(incoming))
    assert response.status_code == 200
    assert response.mimetype == "application/json"
    assert json.loads(response.get_body()) == {"content": "hi"}


def test_stream_probe_through_azure_types(dispatcher) -> None:
    req = func.HttpRequest(method="GET", url=URL, body=b"")
    response = to_http_response(dispatcher.dispatch(to_incoming_request(req)))
    assert response.mimetype == "text/event-stream"
    assert response.get_body() == b'data: {"ready":true}\n\n'


def test_auth_level_names() -> None:
    assert auth_level("FUNCTION") is func.AuthLevel.FUNCTION
    assert auth_level("anonymous") is func.AuthLevel.ANONYMOUS


def test_preflight_through_azure_types(dispatcher) -> None:
    req = func.HttpRequest(method="OPTIONS", url=URL, body=b"ignored")
    response = to_http_response(dispatcher.dispatch(to_incoming_request(req)))
    assert response.status_code == 200
    assert response.get_body() == b""
    assert response.headers.get("Access-Control-Allow-Origin") == "*"
    assert response.headers.get("Access-Control-Allow-Methods") == "GET,POST,OPTIONS"
    assert response.headers.get("Access-Control-Allow-Headers")
