"""Tool registry: name lookup and required-argument checks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Mapping

from ..errors import MissingArgument, UnknownTool
from ..logging import get_logger
from ..protocol import ToolDefinition, ToolInvocationEnvelope

LOGGER = get_logger(__name__)

ToolHandler = Callable[[Mapping[str, Any]], Dict[str, Any]]


@dataclass(frozen=True, slots=True)
class RegisteredTool:
    definition: ToolDefinition
    handler: ToolHandler


class ToolRegistry:
    """Exact, case-sensitive mapping from tool name (or alias) to handler."""

    def __init__(self) -> None:
        self._by_name: Dict[str, RegisteredTool] = {}
        self._definitions: List[ToolDefinition] = []

    def register(self, definition: ToolDefinition, handler: ToolHandler) -> None:
        entry = RegisteredTool(definition=definition, handler=handler)
        names = [definition.tool_name, *definition.aliases]
        for name in names:
            if name in self._by_name:
                raise ValueError(f"Tool name already registered: {name}")
        for name in names:
            self._by_name[name] = entry
        self._definitions.append(definition)
        LOGGER.info("tool_registered", tool=definition.tool_name, aliases=list(definition.aliases))

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def definitions(self) -> List[ToolDefinition]:
        return list(self._definitions)

    def resolve(self, name: str) -> RegisteredTool:
        try:
            return self._by_name[name]
        except KeyError:
            raise UnknownTool(name) from None

    def invoke(self, envelope: ToolInvocationEnvelope) -> Dict[str, Any]:
        tool = self.resolve(envelope.name)
        _check_required(tool.definition.tool_name, tool.definition.argument_names, envelope.arguments)
        LOGGER.info("tool_invoked", tool=tool.definition.tool_name, requested_as=envelope.name)
        return tool.handler(envelope.arguments)


def _check_required(tool_name: str, required: Iterable[str], arguments: Mapping[str, Any]) -> None:
    for key in required:
        if key not in arguments:
            raise MissingArgument(tool_name, key)
