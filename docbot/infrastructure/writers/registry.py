"""Built-in writer registry.

Maps the names accepted in the ``writers`` config list to writer factories.
Factories are called with ``filesystem=`` and ``descriptions=`` keyword
arguments.

Custom writers are referenced by import path instead
(``"my_package.writers:HtmlRouteWriter"``), see RouteWriterManager.
"""

from collections.abc import Callable, Mapping
from types import MappingProxyType

from docbot.domain.protocols import (
    DescriptionExtractorProtocol,
    FileWriterProtocol,
    RouteWriterProtocol,
)
from docbot.infrastructure.writers.markdown_writer import MarkdownRouteWriter
from docbot.infrastructure.writers.openapi_writer import OpenApiRouteWriter
from docbot.infrastructure.writers.postman_writer import PostmanRouteWriter

type WriterFactory = Callable[..., RouteWriterProtocol]
"""Callable accepting filesystem= and descriptions= keyword arguments."""


ROUTE_WRITER_REGISTRY: Mapping[str, WriterFactory] = MappingProxyType(
    {
        "markdown": MarkdownRouteWriter,
        "postman": PostmanRouteWriter,
        "openapi": OpenApiRouteWriter,
    }
)


def build_writer(
    factory: WriterFactory,
    *,
    filesystem: FileWriterProtocol,
    descriptions: DescriptionExtractorProtocol,
) -> RouteWriterProtocol:
    """Instantiate a writer through its factory."""
    return factory(filesystem=filesystem, descriptions=descriptions)
