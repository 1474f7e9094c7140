"""String formatting helpers used when rendering diagnostics."""

from __future__ import annotations

# ==============================================================================
# ESCAPE TABLES
# ==============================================================================

_SIMPLE_ESCAPES: dict[str, str] = {
    '"': '\\"',
    "\\": "\\\\",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\b": "\\b",
    "\f": "\\f",
}


def quote(value: str | None) -> str:
    """Return ``value`` as a double quoted literal with control characters escaped.

    ``None`` is rendered as the bare word ``null`` so that messages can tell
    it apart from the string ``"null"``.
    """
    if value is None:
        return "null"
    parts: list[str] = ['"']
    for char in value:
        escaped = _SIMPLE_ESCAPES.get(char)
        if escaped is not None:
            parts.append(escaped)
        elif char < " ":
            parts.append(f"\\u{ord(char):04X}")
        else:
            parts.append(char)
    parts.append('"')
    return "".join(parts)
