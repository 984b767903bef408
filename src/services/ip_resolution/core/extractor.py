"""
Flat JSON Field Extraction

Pulls string values out of a small, trusted JSON body without a full
parser. Only `"key": "value"` pairs are supported.
"""

from __future__ import annotations

_SEPARATORS = ":\t "


def extract_field(text: str, field_name: str) -> str:
    """
    Extract the string value of ``field_name`` from ``text``.

    The first occurrence of the quoted key wins, wherever it is nested.
    Escaped quotes are not handled: the value ends at the next double quote.

    Args:
        text: Raw JSON text
        field_name: Key to look up (without quotes)

    Returns:
        The value, or an empty string if the key is absent or its value
        is not a string literal
    """
    pattern = f'"{field_name}"'
    start = text.find(pattern)
    if start == -1:
        return ""

    pos = start + len(pattern)
    while pos < len(text) and text[pos] in _SEPARATORS:
        pos += 1

    # Numbers, booleans, objects and null are unsupported
    if pos >= len(text) or text[pos] != '"':
        return ""
    pos += 1

    end = text.find('"', pos)
    if end == -1:
        return ""

    return text[pos:end]
