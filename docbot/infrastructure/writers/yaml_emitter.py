"""Minimal block-style YAML emitter for generated OpenAPI documents.

Only the shapes the OpenAPI writer produces are supported: nested mappings,
sequences and scalars (str, int, float, bool, None). Output is deterministic
for a given input (mapping insertion order is kept).

Format:
    - Two-space indentation
    - Sequence items as ``- item``; mapping items start on the dash line
    - Empty mappings ``{}``, empty sequences ``[]``
    - Strings single-quoted when they contain YAML-significant characters,
      boundary whitespace, are empty or look like another scalar type;
      strings with line breaks or tabs are double-quoted with escapes

Usage:
    from docbot.infrastructure.writers.yaml_emitter import dump_yaml

    dump_yaml({"openapi": "3.0.0", "paths": {}})
    # "openapi: 3.0.0\\npaths: {}\\n"
"""

import json
import math
import re
from collections.abc import Mapping, Sequence
from typing import Any

INDENT = "  "

_SIGNIFICANT_CHARS = re.compile(r"[:{}\[\],&*#?|\-<>=!%@`'\"]")
_KEY_INDICATORS = tuple("-?:,[]{}#&*!|>'\"%@`")
_RESERVED_WORDS = frozenset(
    {
        "~", "null", "Null", "NULL",
        "true", "True", "TRUE", "false", "False", "FALSE",
        "yes", "Yes", "YES", "no", "No", "NO",
        "on", "On", "ON", "off", "Off", "OFF",
        "y", "Y", "n", "N",
    }
)  # fmt: skip
_PREFIXED_INTEGER = re.compile(r"^[-+]?0[xXoObB][0-9a-fA-F_]+$")


def dump_yaml(data: Any) -> str:
    """Serialize data as a YAML document ending with a newline."""
    if isinstance(data, Mapping):
        lines = _mapping_lines(data, 0) if data else ["{}"]
    elif _is_sequence(data):
        lines = _sequence_lines(data, 0) if data else ["[]"]
    else:
        lines = [format_scalar(data)]

    return "\n".join(lines) + "\n"


def format_scalar(value: Any) -> str:
    """Render a scalar value."""
    if value is None:
        return "null"

    if isinstance(value, bool):
        return "true" if value else "false"

    if isinstance(value, int):
        return str(value)

    if isinstance(value, float):
        if math.isnan(value):
            return ".nan"
        if math.isinf(value):
            return ".inf" if value > 0 else "-.inf"
        return repr(value)

    return _format_string(str(value))


def format_key(key: Any) -> str:
    """Render a mapping key, quoting only keys that would be misread."""
    text = key if isinstance(key, str) else str(key)

    if _needs_escapes(text):
        return json.dumps(text, ensure_ascii=False)

    if (
        not text
        or text.startswith(_KEY_INDICATORS)
        or ":" in text
        or " #" in text
        or text != text.strip()
        or _looks_like_other_scalar(text)
    ):
        return _single_quoted(text)

    return text


def _mapping_lines(mapping: Mapping[Any, Any], level: int) -> list[str]:
    prefix = INDENT * level
    lines: list[str] = []

    for key, value in mapping.items():
        head = f"{prefix}{format_key(key)}:"

        if isinstance(value, Mapping):
            if value:
                lines.append(head)
                lines.extend(_mapping_lines(value, level + 1))
            else:
                lines.append(f"{head} {{}}")
        elif _is_sequence(value):
            if value:
                lines.append(head)
                lines.extend(_sequence_lines(value, level + 1))
            else:
                lines.append(f"{head} []")
        else:
            lines.append(f"{head} {format_scalar(value)}")

    return lines


def _sequence_lines(sequence: Sequence[Any], level: int) -> list[str]:
    prefix = INDENT * level
    lines: list[str] = []

    for item in sequence:
        if isinstance(item, Mapping) and item:
            nested = _mapping_lines(item, level + 1)
        elif _is_sequence(item) and item:
            nested = _sequence_lines(item, level + 1)
        else:
            if isinstance(item, Mapping):
                rendered = "{}"
            elif _is_sequence(item):
                rendered = "[]"
            else:
                rendered = format_scalar(item)
            lines.append(f"{prefix}- {rendered}")
            continue

        # The dash takes the place of one indentation step on the first line.
        first = nested[0][len(INDENT) * (level + 1) :]
        lines.append(f"{prefix}- {first}")
        lines.extend(nested[1:])

    return lines


def _format_string(text: str) -> str:
    if _needs_escapes(text):
        return json.dumps(text, ensure_ascii=False)

    if (
        not text
        or _SIGNIFICANT_CHARS.search(text)
        or text != text.strip()
        or _looks_like_other_scalar(text)
    ):
        return _single_quoted(text)

    return text


def _single_quoted(text: str) -> str:
    return "'" + text.replace("'", "''") + "'"


def _needs_escapes(text: str) -> bool:
    return "\n" in text or "\r" in text or "\t" in text


def _looks_like_other_scalar(text: str) -> bool:
    if text in _RESERVED_WORDS or _PREFIXED_INTEGER.match(text):
        return True

    try:
        float(text)
    except ValueError:
        return text.lower() in {".inf", "-.inf", "+.inf", ".nan"}

    return True


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))
