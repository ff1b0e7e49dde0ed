"""Pydantic models and result types for the tool-invocation protocol."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Union

from pydantic import BaseModel, Field


class ToolProperty(BaseModel):
    model_config = {"frozen": True, "populate_by_name": True}

    property_name: str = Field(..., alias="propertyName")
    property_type: str = Field("string", alias="propertyType")
    description: str = ""


class ToolDefinition(BaseModel):
    model_config = {"frozen": True, "populate_by_name": True}

    tool_name: str = Field(..., alias="toolName")
    description: str
    required_arguments: List[ToolProperty] = Field(default_factory=list, alias="requiredArguments")
    aliases: List[str] = Field(default_factory=list)

    @property
    def argument_names(self) -> List[str]:
        return [prop.property_name for prop in self.required_arguments]


class ToolInvocationEnvelope(BaseModel):
    name: str
    arguments: Dict[str, Any]


@dataclass(slots=True)
class IncomingRequest:
    """Transport-neutral view of an inbound HTTP request."""

    method: str
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes = b""


@dataclass(slots=True)
class OutgoingResponse:
    status_code: int
    headers: Dict[str, str] = field(default_factory=dict)
    body: bytes = b""


@dataclass(frozen=True, slots=True)
class StreamReady:
    pass


@dataclass(frozen=True, slots=True)
class CorsPreflightOk:
    pass


@dataclass(frozen=True, slots=True)
class ToolSuccess:
    payload: Dict[str, Any]


@dataclass(frozen=True, slots=True)
class ToolError:
    kind: str
    message: str
    status_code: int = 400


DispatchResult = Union[StreamReady, CorsPreflightOk, ToolSuccess, ToolError]
