"""Authentication schemes a documented segment can declare.

Segments configured with type "none" (or without usable auth) carry no
SegmentAuth at all, so NONE is only used while parsing configuration.
"""

from enum import Enum


class AuthType(str, Enum):
    """Authentication scheme of a segment.

    Attributes:
        BEARER: Token sent as ``Authorization: Bearer <token>``.
        HEADER: Token sent verbatim in a named header (API key style).
        NONE: No authentication.
    """

    BEARER = "bearer"
    HEADER = "header"
    NONE = "none"
