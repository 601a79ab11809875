"""Sanitizers for untrusted block attribute values.

``esc_attr`` makes text safe to interpolate into an HTML attribute or a CSS
declaration emitted inside a ``<style>`` element. Existing character
references are left alone so values that were escaped once are never escaped
twice. ``absint`` coerces loosely typed numbers (``"600"``, ``599.9``,
``"12px"``) into non-negative integers.

Examples
--------
>>> esc_attr('red" onload="x')
'red&quot; onload=&quot;x'
>>> esc_attr("a &amp; b & c")
'a &amp; b &amp; c'
>>> absint("-42px")
42
>>> absint("wide")
0
"""

from __future__ import annotations

import math
import re

_BARE_AMPERSAND = re.compile(r"&(?!(?:#\d+|#[xX][0-9a-fA-F]+|[A-Za-z][A-Za-z0-9]*);)")
_LEADING_INTEGER = re.compile(r"^\s*([+-]?\d+)")
_ATTRIBUTE_ENTITIES = {
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#039;",
}


def esc_attr(value: object) -> str:
    """Return ``value`` as text safe for attribute and style contexts."""
    if value is None:
        return ""
    text = _BARE_AMPERSAND.sub("&amp;", str(value))
    for char, entity in _ATTRIBUTE_ENTITIES.items():
        text = text.replace(char, entity)
    return text


def absint(value: object) -> int:
    """Coerce ``value`` to a non-negative integer, returning 0 when it is not numeric."""
    match value:
        case bool():
            return int(value)
        case int():
            return abs(value)
        case float():
            if not math.isfinite(value):
                return 0
            return abs(int(value))
        case str():
            found = _LEADING_INTEGER.match(value)
            return abs(int(found.group(1))) if found else 0
        case _:
            return 0


def is_empty(value: object) -> bool:
    """Report whether ``value`` counts as unset for a block attribute.

    Falsy values and the string ``"0"`` are treated as empty, matching how the
    block editor serializes cleared controls.
    """
    return not value or value == "0"


__all__ = ["absint", "esc_attr", "is_empty"]
