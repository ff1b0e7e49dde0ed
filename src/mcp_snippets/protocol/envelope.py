"""Parse and validate the ``{"name": ..., "arguments": {...}}`` envelope."""

from __future__ import annotations

import json
from typing import Union

from ..errors import MalformedJson, MissingField
from .models import ToolInvocationEnvelope


def parse_envelope(body: Union[bytes, str]) -> ToolInvocationEnvelope:
    """Parse a raw POST body into a :class:`ToolInvocationEnvelope`.

    Fields are checked in a fixed order, ``name`` first and then
    ``arguments``, and the first unusable one is reported.
    """

    try:
        text = body.decode("utf-8") if isinstance(body, (bytes, bytearray)) else body
        data = json.loads(text)
    except (UnicodeDecodeError, ValueError, RecursionError) as exc:
        raise MalformedJson() from exc

    if not isinstance(data, dict):
        raise MalformedJson("Request body must be a JSON object")

    name = data.get("name")
    if not isinstance(name, str) or not name:
        raise MissingField("name")

    arguments = data.get("arguments")
    if not isinstance(arguments, dict):
        raise MissingField("arguments")

    return ToolInvocationEnvelope(name=name, arguments=arguments)
