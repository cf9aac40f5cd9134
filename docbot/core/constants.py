"""Centralized constants for internal implementation details.

These are fixed values of the documentation formats and of the segment
model, NOT environment-specific configuration. For environment-specific
settings, use `docbot/core/config.py` instead.

Example:
    >>> from docbot.core.constants import WEB_SEGMENT_KEY
    >>> WEB_SEGMENT_KEY
    'web'
"""

# =============================================================================
# Segments
# =============================================================================

WEB_SEGMENT_KEY: str = "web"
"""Key of the implicit catch-all segment."""

DEFAULT_HOST_VARIABLE: str = "HOST"
"""Template variable name used for the documented base URL."""

DEFAULT_HOST_VALUE: str = "https://example.com"
"""Base URL used when neither the segment nor the defaults define one."""

DEFAULT_AUTH_HEADER: str = "Authorization"
"""Header carrying the token when a segment does not name one."""

MISC_GROUP: str = "misc"
"""Group for routes without a usable dotted name."""

STRIPPED_NAME_PREFIXES: tuple[str, ...] = ("api",)
"""Leading name components skipped when grouping Postman/OpenAPI output."""

IGNORED_HTTP_METHODS: frozenset[str] = frozenset({"HEAD", "OPTIONS"})
"""Methods never documented (added implicitly by frameworks)."""


# =============================================================================
# Filenames and Output Layout
# =============================================================================

FILENAME_PATTERN: str = r"[^A-Za-z0-9._-]+"
"""Runs of characters replaced when building filenames."""

FILENAME_REPLACEMENT: str = "-"
"""Replacement for disallowed filename character runs."""

FILENAME_FALLBACK: str = "unknown"
"""Filename used when sanitization leaves nothing usable."""

DEFAULT_OUTPUT_DIR: str = "doc"
"""Output directory (relative to the base path) when none is configured."""

ROUTES_SUBDIRECTORY: str = "routes"
"""Subdirectory of the output root holding route documentation."""

DEFAULT_WRITERS: tuple[str, ...] = ("markdown", "postman", "openapi")
"""Writers enabled when the project config does not list any."""


# =============================================================================
# Output Formats
# =============================================================================

POSTMAN_SCHEMA_URL: str = (
    "https://schema.getpostman.com/json/collection/v2.1.0/collection.json"
)
"""Postman collection v2.1 schema identifier."""

POSTMAN_STATUS_TEST: str = (
    "pm.test('Status is 2xx', () => "
    "pm.response.code >= 200 && pm.response.code < 300);"
)
"""Test script attached to every generated Postman request."""

OPENAPI_VERSION: str = "3.0.0"
"""OpenAPI dialect emitted by the OpenAPI writer."""

OPENAPI_DOCUMENT_VERSION: str = "1.0.0"
"""`info.version` of generated OpenAPI documents."""

NO_DESCRIPTION: str = "No description available"
"""OpenAPI operation description when none can be extracted."""

BODY_METHODS: frozenset[str] = frozenset({"POST", "PUT", "PATCH"})
"""Methods documented with a JSON request body."""
