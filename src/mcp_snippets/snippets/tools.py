"""Snippet tool implementations and their definitions."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping

from ..errors import InvalidArgument, SnippetNotFound
from ..logging import get_logger
from ..protocol import ToolDefinition, ToolProperty
from ..storage import BlobStore, InvalidSnippetName, snippet_blob_name
from .registry import ToolRegistry

LOGGER = get_logger(__name__)

SNIPPET_NAME_PROPERTY_NAME = "snippetName"
SNIPPET_PROPERTY_NAME = "snippet"
TRIGGER_INPUT_PROPERTY_NAME = "triggerInput"

ECHO_TOOL = ToolDefinition(
    toolName="echo",
    description="Logs the trigger input along with 'Hello, World!' and echoes it back.",
    requiredArguments=[
        ToolProperty(propertyName=TRIGGER_INPUT_PROPERTY_NAME, propertyType="string", description="input string"),
    ],
    aliases=["getsnippets"],
)

SAVE_SNIPPET_TOOL = ToolDefinition(
    toolName="saveSnippet",
    description="Saves a named text snippet to blob storage.",
    requiredArguments=[
        ToolProperty(propertyName=SNIPPET_NAME_PROPERTY_NAME, propertyType="string", description="The name of the snippet."),
        ToolProperty(propertyName=SNIPPET_PROPERTY_NAME, propertyType="string", description="The content of the snippet."),
    ],
    aliases=["saveSnippets"],
)

GET_SNIPPET_TOOL = ToolDefinition(
    toolName="getSnippet",
    description="Retrieves a named text snippet from blob storage.",
    requiredArguments=[
        ToolProperty(propertyName=SNIPPET_NAME_PROPERTY_NAME, propertyType="string", description="The name of the snippet."),
    ],
    aliases=["getSnippets"],
)

SNIPPET_TOOL_DEFINITIONS: List[ToolDefinition] = [ECHO_TOOL, SAVE_SNIPPET_TOOL, GET_SNIPPET_TOOL]


def _string_argument(tool_name: str, arguments: Mapping[str, Any], key: str) -> str:
    value = arguments[key]
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if value is None:
        raise InvalidArgument(tool_name, key, "must not be null")
    raise InvalidArgument(tool_name, key, "must be a string")


class SnippetTools:
    """Tool handlers bound to a blob store."""

    def __init__(self, store: BlobStore, blob_suffix: str = ".json") -> None:
        self.store = store
        self.blob_suffix = blob_suffix

    def _blob_name(self, tool_name: str, arguments: Mapping[str, Any]) -> str:
        snippet_name = _string_argument(tool_name, arguments, SNIPPET_NAME_PROPERTY_NAME)
        try:
            return snippet_blob_name(snippet_name, self.blob_suffix)
        except InvalidSnippetName as exc:
            raise InvalidArgument(tool_name, SNIPPET_NAME_PROPERTY_NAME, str(exc)) from exc

    def echo(self, arguments: Mapping[str, Any]) -> Dict[str, Any]:
        trigger_input = _string_argument(ECHO_TOOL.tool_name, arguments, TRIGGER_INPUT_PROPERTY_NAME)
        LOGGER.info("trigger_input_received", trigger_input=trigger_input)
        LOGGER.info("Hello, World!")
        return {"content": trigger_input}

    def save_snippet(self, arguments: Mapping[str, Any]) -> Dict[str, Any]:
        tool_name = SAVE_SNIPPET_TOOL.tool_name
        blob_name = self._blob_name(tool_name, arguments)
        snippet = _string_argument(tool_name, arguments, SNIPPET_PROPERTY_NAME)
        LOGGER.info("saving_snippet", blob=blob_name, length=len(snippet))
        self.store.put(blob_name, snippet.encode("utf-8"))
        return {"success": True, "message": "Snippet saved successfully"}

    def get_snippet(self, arguments: Mapping[str, Any]) -> Dict[str, Any]:
        blob_name = self._blob_name(GET_SNIPPET_TOOL.tool_name, arguments)
        LOGGER.info("retrieving_snippet", blob=blob_name)
        try:
            content = self.store.get(blob_name)
        except SnippetNotFound:
            LOGGER.info("snippet_not_found", blob=blob_name)
            return {"success": False, "error": "not found"}
        return {"success": True, "snippet": content.decode("utf-8", errors="replace")}


def build_snippet_registry(store: BlobStore, blob_suffix: str = ".json") -> ToolRegistry:
    tools = SnippetTools(store, blob_suffix)
    registry = ToolRegistry()
    registry.register(ECHO_TOOL, tools.echo)
    registry.register(SAVE_SNIPPET_TOOL, tools.save_snippet)
    registry.register(GET_SNIPPET_TOOL, tools.get_snippet)
    return registry
