"""Output path confinement.

The configured output directory is canonicalized like the base path
(symlinks resolved, nothing created) and must stay inside the project base
path. Anything else, such as
"../../tmp" or an absolute path elsewhere, is a configuration error raised
before any file is written.

Usage:
    root = PathGuard.resolve_output_root("storage/docs", base_path=project)
    target = PathGuard.join(root, "routes", "api.md")
"""

import os
from pathlib import Path, PurePosixPath, PureWindowsPath

from docbot.core.constants import DEFAULT_OUTPUT_DIR
from docbot.core.enums import ErrorCode
from docbot.core.errors import ConfigurationError
from docbot.core.values import string_or_none


class PathGuard:
    """Static helpers normalizing and confining output paths."""

    @staticmethod
    def resolve_output_root(
        configured: object,
        base_path: Path,
        context_key: str = "output_dir",
    ) -> Path:
        """Resolve the output root and enforce confinement to base_path.

        Args:
            configured: Raw configured value (None or blank means "<base>/doc").
            base_path: Project root.
            context_key: Configuration key named in error messages.

        Returns:
            Path: Canonical output root.

        Raises:
            ConfigurationError: If the path escapes base_path.
        """
        candidate = string_or_none(configured)
        raw = candidate.strip() if candidate is not None else ""
        base = PathGuard.canonicalize(base_path.resolve())

        if not raw:
            return base / DEFAULT_OUTPUT_DIR

        target = Path(raw) if PathGuard.is_absolute(raw) else base / raw
        # Symlinks are resolved so both sides compare in the same form.
        normalized = PathGuard.canonicalize(target).resolve()

        if normalized != base and not normalized.is_relative_to(base):
            raise ConfigurationError(
                f'Invalid {context_key} value "{normalized}". Paths must remain '
                f"within {base} to mitigate path traversal risks.",
                code=ErrorCode.OUTPUT_PATH_OUTSIDE_BASE,
                details={"key": context_key, "path": str(normalized), "base": str(base)},
            )

        return normalized

    @staticmethod
    def join(root: Path, *segments: str | None) -> Path:
        """Join segments onto root, normalizing separators.

        Backslashes are treated as separators; empty or whitespace-only
        segments are skipped.
        """
        path = PathGuard.canonicalize(root)

        for segment in segments:
            if segment is None:
                continue

            trimmed = segment.replace("\\", "/").strip().strip("/").strip()
            if not trimmed:
                continue

            path = path.joinpath(*(part for part in trimmed.split("/") if part))

        return path

    @staticmethod
    def canonicalize(path: Path) -> Path:
        """Collapse "." and ".." segments lexically (no symlink resolution)."""
        return Path(os.path.normpath(path))

    @staticmethod
    def is_absolute(raw: str) -> bool:
        """Absolute on this platform, or in POSIX/Windows notation."""
        return (
            Path(raw).is_absolute()
            or PurePosixPath(raw).is_absolute()
            or PureWindowsPath(raw).is_absolute()
            or raw.startswith("\\")
        )
