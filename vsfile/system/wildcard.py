"""File name wildcard helpers."""

from __future__ import annotations

ASTERISK = "*"
QUESTION = "?"

_WILDCARDS = (ASTERISK, QUESTION)


def add_asterisk(extension: str) -> str:
    """Turn an extension into a search pattern: '.cs' -> '*.cs'."""
    return ASTERISK + extension


def has_wildcard(path: str | None) -> bool:
    if not path or not path.strip():
        return False
    return any(w in path for w in _WILDCARDS)
