"""Route writer manager.

Turns the configured writer references into writer instances keyed by
format. Every reference is resolved and validated on first use, before any
documentation is written, so a broken writer list aborts the run early.

Reference forms:
    "markdown"                           registry name
    "my_package.writers:HtmlRouteWriter" import path of a factory

Usage:
    manager = RouteWriterManager(
        ["markdown", "openapi"],
        filesystem=WriterFilesystem(),
        descriptions=DocstringDescriptionExtractor(),
    )
    writers = manager.all()   # {"markdown": ..., "openapi": ...}
"""

import importlib
from collections.abc import Iterable, Mapping

from docbot.core.enums import ErrorCode
from docbot.core.errors import ConfigurationError
from docbot.domain.protocols import (
    DescriptionExtractorProtocol,
    FileWriterProtocol,
    RouteWriterProtocol,
)
from docbot.infrastructure.writers.registry import (
    ROUTE_WRITER_REGISTRY,
    WriterFactory,
    build_writer,
)


class RouteWriterManager:
    """Resolve and cache configured writers.

    Args:
        writer_refs: Writer references in configured order.
        filesystem: File writer injected into every writer.
        descriptions: Description lookup injected into every writer.
        registry: Name to factory mapping for built-in writers.
    """

    def __init__(
        self,
        writer_refs: Iterable[str],
        *,
        filesystem: FileWriterProtocol,
        descriptions: DescriptionExtractorProtocol,
        registry: Mapping[str, WriterFactory] = ROUTE_WRITER_REGISTRY,
    ) -> None:
        self._refs = list(writer_refs)
        self._filesystem = filesystem
        self._descriptions = descriptions
        self._registry = registry
        self._writers: dict[str, RouteWriterProtocol] | None = None

    def all(self) -> dict[str, RouteWriterProtocol]:
        """Return writers keyed by format, instantiating them once.

        Raises:
            ConfigurationError: On unknown references, objects that are not
                writers, or two writers reporting the same format.
        """
        if self._writers is None:
            self._writers = self._build()
        return dict(self._writers)

    def get(self, format_name: str) -> RouteWriterProtocol | None:
        """Return the writer registered for a format, if any."""
        return self.all().get(format_name)

    def formats(self) -> list[str]:
        """Registered format names in configured order."""
        return list(self.all())

    def _build(self) -> dict[str, RouteWriterProtocol]:
        writers: dict[str, RouteWriterProtocol] = {}

        for ref in self._refs:
            writer = self._instantiate(ref)
            format_name = writer.format()

            if not isinstance(format_name, str) or not format_name:
                raise ConfigurationError(
                    f'Writer "{ref}" must report a non-empty format name.',
                    code=ErrorCode.WRITER_INVALID,
                    details={"writer": ref},
                )

            if format_name in writers:
                raise ConfigurationError(
                    f'Duplicate route writer format "{format_name}" '
                    f'(declared again by "{ref}").',
                    code=ErrorCode.WRITER_FORMAT_DUPLICATED,
                    details={"writer": ref, "format": format_name},
                )

            writers[format_name] = writer

        return writers

    def _instantiate(self, ref: str) -> RouteWriterProtocol:
        factory = self._resolve_factory(ref)

        try:
            writer = build_writer(
                factory,
                filesystem=self._filesystem,
                descriptions=self._descriptions,
            )
        except TypeError as exc:
            raise ConfigurationError(
                f'Writer "{ref}" cannot be built with filesystem= and '
                f"descriptions= arguments: {exc}",
                code=ErrorCode.WRITER_INVALID,
                details={"writer": ref},
            ) from exc

        if not isinstance(writer, RouteWriterProtocol):
            raise ConfigurationError(
                f'Writer "{ref}" must provide format() and write() methods.',
                code=ErrorCode.WRITER_INVALID,
                details={"writer": ref},
            )

        return writer

    def _resolve_factory(self, ref: str) -> WriterFactory:
        if ref in self._registry:
            return self._registry[ref]

        module_name, sep, attribute = ref.partition(":")
        if not sep or not module_name or not attribute:
            raise ConfigurationError(
                f'Unknown route writer "{ref}". Use one of '
                f"{sorted(self._registry)} or a \"module:Factory\" import path.",
                code=ErrorCode.WRITER_UNKNOWN,
                details={"writer": ref},
            )

        try:
            target: object = importlib.import_module(module_name)
            for part in attribute.split("."):
                target = getattr(target, part)
        except Exception as exc:
            raise ConfigurationError(
                f'Unable to import route writer "{ref}": {exc}',
                code=ErrorCode.WRITER_UNKNOWN,
                details={"writer": ref},
            ) from exc

        if not callable(target):
            raise ConfigurationError(
                f'Route writer "{ref}" is not callable.',
                code=ErrorCode.WRITER_INVALID,
                details={"writer": ref},
            )

        return target
