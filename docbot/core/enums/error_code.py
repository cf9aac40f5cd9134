"""Machine-readable error codes.

Error codes follow SUBJECT_REASON naming.

Categories:
- Configuration errors (fatal, abort the run before any write)
- Collection errors (route source unreadable)
- Write errors (per segment/format, recoverable)
"""

from enum import Enum


class ErrorCode(Enum):
    """Machine-readable error codes."""

    # Configuration errors
    SEGMENT_KEY_MISSING = "segment_key_missing"
    OUTPUT_PATH_OUTSIDE_BASE = "output_path_outside_base"
    WRITER_FORMAT_DUPLICATED = "writer_format_duplicated"
    WRITER_UNKNOWN = "writer_unknown"
    WRITER_INVALID = "writer_invalid"
    CONFIG_FILE_INVALID = "config_file_invalid"
    SETTINGS_INVALID = "settings_invalid"

    # Collection errors
    ROUTE_SOURCE_INVALID = "route_source_invalid"

    # Write errors
    WRITE_FAILED = "write_failed"
