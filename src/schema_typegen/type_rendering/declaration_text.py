"""Text helpers shared by the declaration renderers."""

from __future__ import annotations

import re
from collections.abc import Iterable

IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")
_INVALID_IDENTIFIER_CHARS = re.compile(r"[^A-Za-z0-9_$]")


def comment_text(text: str) -> str:
    """Return text that cannot close the surrounding ``/** ... */`` block."""
    return text.replace("*/", "*\\/")


def declaration_names(names: Iterable[str]) -> list[str]:
    """Turn definition names into unique identifiers, keeping valid names unchanged.

    Characters outside ``[A-Za-z0-9_$]`` become ``_`` and a leading digit gets a
    ``_`` prefix. A rewritten name that collides with another name gets a numeric
    suffix.
    """
    originals = list(names)
    taken = {name for name in originals if IDENTIFIER_PATTERN.match(name)}
    result: list[str] = []
    for name in originals:
        if IDENTIFIER_PATTERN.match(name):
            result.append(name)
            continue
        candidate = _identifier(name)
        unique = candidate
        suffix = 2
        while unique in taken:
            unique = f"{candidate}_{suffix}"
            suffix += 1
        taken.add(unique)
        result.append(unique)
    return result


def _identifier(name: str) -> str:
    cleaned = _INVALID_IDENTIFIER_CHARS.sub("_", name)
    if not cleaned or cleaned[0].isdigit():
        cleaned = f"_{cleaned}"
    return cleaned
