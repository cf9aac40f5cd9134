"""Helpers coercing loosely-typed configuration values.

Project configuration and route dumps arrive as parsed JSON, so any field
may hold a string, a number, a list or nothing at all. These helpers turn
such values into strings and string lists with predictable fallbacks.

Usage:
    from docbot.core.values import string_list, string_or_fallback

    host = string_or_fallback(definition.get("host_value"), "https://example.com")
    include = string_list(definition.get("include_middleware"))
"""

from collections.abc import Iterable, Mapping
from typing import Any


def string_or_none(value: Any, fallback: str | None = None) -> str | None:
    """Return the string form of a scalar value, or the fallback.

    Args:
        value: Raw value. Strings are returned unchanged, booleans become
            "true"/"false" and numbers use str().
        fallback: Returned for None and non-scalar values.

    Returns:
        String representation or fallback.
    """
    if isinstance(value, str):
        return value

    if isinstance(value, bool):
        return "true" if value else "false"

    if isinstance(value, (int, float)):
        return str(value)

    return fallback


def string_or_fallback(value: Any, fallback: str) -> str:
    """Return the string form of a scalar value, or the fallback."""
    result = string_or_none(value, fallback)
    return fallback if result is None else result


def string_list(value: Any) -> list[str]:
    """Convert an iterable into a list of non-empty strings.

    Strings, bytes and mappings are not treated as lists. Items that are
    not scalars, or that convert to an empty string, are discarded.

    Args:
        value: Raw value (usually a JSON array).

    Returns:
        List of strings in original order (duplicates kept).
    """
    if value is None or isinstance(value, (str, bytes, Mapping)):
        return []

    if not isinstance(value, Iterable):
        return []

    strings: list[str] = []
    for item in value:
        string = string_or_none(item)
        if string:
            strings.append(string)

    return strings


def unique(values: Iterable[str]) -> list[str]:
    """De-duplicate strings keeping first-seen order."""
    return list(dict.fromkeys(values))
