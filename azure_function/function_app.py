"""Azure Functions entry point that routes the MCP snippet route to the dispatcher."""

from __future__ import annotations

import azure.functions as func

from mcp_snippets.http import build_dispatcher
from mcp_snippets.http.function_binding import auth_level, to_http_response, to_incoming_request
from mcp_snippets.settings import load_dispatcher_settings

_settings = load_dispatcher_settings()

app = func.FunctionApp(http_auth_level=auth_level(_settings.auth_level))

# Built once so that each invocation reuses the same registry and blob client.
_dispatcher = build_dispatcher(settings=_settings)


@app.function_name(name="SnippetTools")
@app.route(route=_settings.route, methods=["GET", "POST", "OPTIONS"])
def handle_request(req: func.HttpRequest) -> func.HttpResponse:
    """Classify the request and answer it through the shared dispatcher."""
    return to_http_response(_dispatcher.dispatch(to_incoming_request(req)))
