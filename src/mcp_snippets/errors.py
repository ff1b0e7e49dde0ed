"""Exceptions raised while classifying, validating and running tool calls."""

from __future__ import annotations


class ToolInvocationError(Exception):
    """Base class for failures that are reported to the caller."""

    kind = "InternalError"
    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ClientError(ToolInvocationError):
    """The request itself is unusable; nothing has been executed."""

    status_code = 400


class MalformedJson(ClientError):
    kind = "MalformedJson"

    def __init__(self, detail: str = "Request body is not valid JSON") -> None:
        super().__init__(detail)


class MissingField(ClientError):
    kind = "MissingField"

    def __init__(self, field: str) -> None:
        super().__init__(f"Missing required field: {field}")
        self.field = field


class MissingArgument(ClientError):
    kind = "MissingArgument"

    def __init__(self, tool_name: str, key: str) -> None:
        super().__init__(f"Tool '{tool_name}' requires argument: {key}")
        self.tool_name = tool_name
        self.key = key


class InvalidArgument(ClientError):
    kind = "InvalidArgument"

    def __init__(self, tool_name: str, key: str, reason: str) -> None:
        super().__init__(f"Invalid argument '{key}' for tool '{tool_name}': {reason}")
        self.tool_name = tool_name
        self.key = key
        self.reason = reason


class UnknownTool(ClientError):
    kind = "UnknownTool"

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class UnsupportedMethod(ClientError):
    kind = "UnsupportedMethod"
    status_code = 405

    def __init__(self, method: str) -> None:
        super().__init__(f"Unsupported method: {method}")
        self.method = method


class StoreError(ToolInvocationError):
    """Raised by blob store implementations."""


class SnippetNotFound(StoreError):
    kind = "NotFound"

    def __init__(self, key: str) -> None:
        super().__init__(f"Snippet not found: {key}")
        self.key = key


class StoreUnavailable(StoreError):
    kind = "StoreUnavailable"

    def __init__(self, message: str = "Snippet storage is unavailable") -> None:
        super().__init__(message)
