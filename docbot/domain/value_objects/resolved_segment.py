"""Resolved segment: validated documentation context for a group of routes.

Segments are resolved once per run from configuration and are immutable
afterwards. Every writer receives the same ResolvedSegment instance.

Usage:
    segment = ResolvedSegment(
        key="api",
        safe_key="api",
        prefix="api/",
        host_variable="API_HOST",
        host_value="https://api.example.com",
        auth=SegmentAuth(type=AuthType.BEARER, token_variable="API_TOKEN"),
    )
"""

from dataclasses import dataclass

from docbot.core.constants import (
    DEFAULT_AUTH_HEADER,
    DEFAULT_HOST_VALUE,
    DEFAULT_HOST_VARIABLE,
    WEB_SEGMENT_KEY,
)
from docbot.domain.enums import AuthType


@dataclass(frozen=True, slots=True, kw_only=True)
class SegmentAuth:
    """Authentication documented for a segment.

    Attributes:
        type: BEARER or HEADER.
        token_variable: Template variable holding the token.
        header: Header carrying the token.
    """

    type: AuthType
    token_variable: str
    header: str = DEFAULT_AUTH_HEADER


@dataclass(frozen=True, slots=True, kw_only=True)
class ResolvedSegment:
    """Validated segment descriptor.

    Attributes:
        key: Segment identifier.
        safe_key: Filesystem-safe key used for output filenames.
        prefix: URI prefix a route must start with.
        domain: Host constraint a route must match exactly.
        include_middleware: Middleware a route must all carry.
        exclude_middleware: Middleware a route must not carry.
        host_variable: Template variable for the base URL.
        host_value: Default base URL.
        auth: Authentication scheme, None when not required.
    """

    key: str
    safe_key: str
    prefix: str | None = None
    domain: str | None = None
    include_middleware: tuple[str, ...] = ()
    exclude_middleware: tuple[str, ...] = ()
    host_variable: str = DEFAULT_HOST_VARIABLE
    host_value: str = DEFAULT_HOST_VALUE
    auth: SegmentAuth | None = None

    @property
    def is_default(self) -> bool:
        """True for the implicit catch-all segment."""
        return self.key == WEB_SEGMENT_KEY
