"""Project documentation config (segments, writers, route defaults).

The project config is a JSON document, usually ``docbot.json`` at the
project root:

    {
        "output_dir": "doc",
        "route_defaults": {
            "host_variable": "HOST",
            "host_value": "https://api.example.com",
            "auth": {"type": "bearer", "header": "Authorization",
                     "token_variable": "API_TOKEN"}
        },
        "segments": [
            {"key": "api", "prefix": "api/", "host_variable": "API_HOST"}
        ],
        "writers": ["markdown", "postman", "openapi"],
        "sanitization": {"filename": {"pattern": "[^A-Za-z0-9._-]+",
                                      "replacement": "-",
                                      "fallback": "unknown"}}
    }

Segment definitions and route defaults stay loosely typed here; the segment
resolver validates them field by field. Only the shape that must hold for
the run to start (writer list, sanitization policy) is validated by
Pydantic.
"""

import re
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from docbot.core.constants import (
    DEFAULT_WRITERS,
    FILENAME_FALLBACK,
    FILENAME_PATTERN,
    FILENAME_REPLACEMENT,
)
from docbot.core.enums import ErrorCode
from docbot.core.errors import ConfigurationError
from docbot.core.sanitizer import FilenameSanitizer


class FilenamePolicyConfig(BaseModel):
    """Filename sanitization policy."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    pattern: str = FILENAME_PATTERN
    replacement: str = FILENAME_REPLACEMENT
    fallback: str = Field(default=FILENAME_FALLBACK, min_length=1)

    @field_validator("pattern")
    @classmethod
    def validate_pattern(cls, v: str) -> str:
        """Reject patterns that do not compile."""
        try:
            re.compile(v)
        except re.error as exc:
            raise ValueError(f"invalid filename pattern: {exc}") from exc
        return v

    def to_sanitizer(self) -> FilenameSanitizer:
        """Build the sanitizer for this policy."""
        return FilenameSanitizer(
            pattern=self.pattern,
            replacement=self.replacement,
            fallback=self.fallback,
        )


class SanitizationConfig(BaseModel):
    """Sanitization settings."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    filename: FilenamePolicyConfig = Field(default_factory=FilenamePolicyConfig)


class DocbotConfig(BaseModel):
    """Project documentation configuration.

    Attributes:
        output_dir: Output root (relative to the base path or absolute).
        route_defaults: Shared segment defaults (host_variable, host_value, auth).
        segments: Raw segment definitions, in evaluation order.
        writers: Writer references (registry names or ``module:factory``).
        sanitization: Filename sanitization policy.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    output_dir: str | None = None
    route_defaults: dict[str, Any] = Field(default_factory=dict)
    segments: list[Any] = Field(default_factory=list)
    writers: list[str] = Field(default_factory=lambda: list(DEFAULT_WRITERS))
    sanitization: SanitizationConfig = Field(default_factory=SanitizationConfig)

    def with_host_value(self, host_value: str | None) -> "DocbotConfig":
        """Return a copy whose route defaults use the given host value."""
        if host_value is None:
            return self
        defaults = {**self.route_defaults, "host_value": host_value}
        return self.model_copy(update={"route_defaults": defaults})


def load_project_config(path: Path | None) -> DocbotConfig:
    """Load the project config file.

    Args:
        path: JSON config file, or None for the built-in defaults.

    Returns:
        DocbotConfig: Validated configuration.

    Raises:
        ConfigurationError: If the file cannot be read or does not validate.
    """
    if path is None:
        return DocbotConfig()

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(
            f'Unable to read Docbot config file "{path}": {exc}',
            code=ErrorCode.CONFIG_FILE_INVALID,
            details={"path": str(path)},
        ) from exc

    try:
        return DocbotConfig.model_validate_json(raw)
    except ValidationError as exc:
        raise ConfigurationError(
            f'Invalid Docbot config file "{path}": {exc}',
            code=ErrorCode.CONFIG_FILE_INVALID,
            details={"path": str(path)},
        ) from exc
