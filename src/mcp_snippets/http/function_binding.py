"""Azure Functions HTTP trigger adapter around the dispatcher."""

from __future__ import annotations

import azure.functions as func

from ..protocol import IncomingRequest, OutgoingResponse


def to_incoming_request(req: func.HttpRequest) -> IncomingRequest:
    return IncomingRequest(
        method=req.method,
        headers={key.lower(): value for key, value in req.headers.items()},
        body=req.get_body() or b"",
    )


def to_http_response(response: OutgoingResponse) -> func.HttpResponse:
    headers = dict(response.headers)
    mimetype = headers.get("Content-Type", "text/plain")
    return func.HttpResponse(
        body=response.body,
        status_code=response.status_code,
        headers=headers,
        mimetype=mimetype,
    )


def auth_level(name: str) -> func.AuthLevel:
    return func.AuthLevel[name.upper()]
