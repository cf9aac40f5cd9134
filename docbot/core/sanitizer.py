"""Filename and Markdown cell sanitization.

Segment keys end up in filenames, so they are reduced to a conservative
character set. Markdown table cells must not break the table layout.

Usage:
    from docbot.core.sanitizer import sanitize_cell, sanitize_filename

    sanitize_filename("admin api")   # "admin-api"
    sanitize_filename("..")          # "unknown"
    sanitize_cell("a | b")           # "a \\| b"
"""

import re
from dataclasses import dataclass, field

from docbot.core.constants import (
    FILENAME_FALLBACK,
    FILENAME_PATTERN,
    FILENAME_REPLACEMENT,
)

_RESERVED_NAMES = frozenset({"", ".", ".."})


@dataclass(frozen=True, slots=True, kw_only=True)
class FilenameSanitizer:
    """Filename policy: disallowed-run pattern, replacement and fallback.

    Attributes:
        pattern: Regular expression matching runs of disallowed characters.
        replacement: Text substituted for each run; also trimmed from both
            ends of the result.
        fallback: Returned when the result is empty, "." or "..".
    """

    pattern: str = FILENAME_PATTERN
    replacement: str = FILENAME_REPLACEMENT
    fallback: str = FILENAME_FALLBACK
    _compiled: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_compiled", re.compile(self.pattern))

    def sanitize(self, raw: str | None, fallback: str | None = None) -> str:
        """Produce a filesystem-safe name from a raw key.

        Args:
            raw: Raw key (None is treated as empty).
            fallback: Overrides the policy fallback for this call.

        Returns:
            Sanitized filename component.
        """
        value = self._compiled.sub(self.replacement, raw or "")
        if self.replacement:
            value = value.strip(self.replacement)

        if value in _RESERVED_NAMES:
            return self.fallback if fallback is None else fallback

        return value


DEFAULT_FILENAME_SANITIZER = FilenameSanitizer()


def sanitize_filename(raw: str | None, fallback: str = FILENAME_FALLBACK) -> str:
    """Sanitize a filename with the default policy."""
    return DEFAULT_FILENAME_SANITIZER.sanitize(raw, fallback)


def sanitize_cell(text: str) -> str:
    """Sanitize text for a Markdown table cell.

    Collapses line breaks to spaces, escapes pipes and backticks and trims
    surrounding whitespace.
    """
    text = text.replace("\r\n", " ").replace("\r", " ").replace("\n", " ")
    text = text.replace("|", "\\|").replace("`", "\\`")
    return text.strip()
