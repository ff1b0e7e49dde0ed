"""Snippet name to blob name normalization."""

from __future__ import annotations

import re

MAX_SNIPPET_NAME_LENGTH = 128

_SNIPPET_NAME_RE = re.compile(r"[A-Za-z0-9][A-Za-z0-9_.-]*")


class InvalidSnippetName(ValueError):
    """Raised when a snippet name cannot be used as a blob name."""


def normalize_snippet_name(name: str) -> str:
    candidate = name
    if not candidate.strip():
        raise InvalidSnippetName("snippet name must not be empty")
    if candidate != candidate.strip():
        raise InvalidSnippetName("snippet name must not start or end with whitespace")
    if len(candidate) > MAX_SNIPPET_NAME_LENGTH:
        raise InvalidSnippetName(f"snippet name exceeds {MAX_SNIPPET_NAME_LENGTH} characters")
    if ".." in candidate or not _SNIPPET_NAME_RE.fullmatch(candidate):
        raise InvalidSnippetName(
            "snippet name may only contain letters, digits, '.', '_' and '-' "
            "and must not contain path separators or '..'"
        )
    return candidate


def snippet_blob_name(name: str, suffix: str = ".json") -> str:
    """Return the blob name used to store snippet ``name``."""
    return f"{normalize_snippet_name(name)}{suffix}"
