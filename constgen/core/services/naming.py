"""
Name sanitizer — turn a human-readable label into a C# identifier.
"""

from __future__ import annotations

import re

from constgen.core.errors import EmptyIdentifier

_INVALID_CHARS = re.compile(r"[^A-Za-z0-9]")


def sanitize(raw: str) -> str:
    """Strip everything outside ``[A-Za-z0-9]`` and guard a leading digit.

    ``sanitize("Player 1") == "Player1"``, ``sanitize("3Lives") == "_3Lives"``.
    Sanitizing an already-sanitized name returns it unchanged.

    Raises:
        EmptyIdentifier: If nothing usable is left (e.g. ``"---"``).
    """
    result = _INVALID_CHARS.sub("", raw)
    if not result:
        raise EmptyIdentifier(raw)
    if result[0].isdigit():
        result = "_" + result
    return result
