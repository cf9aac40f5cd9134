"""Route writers (Markdown, Postman, OpenAPI) and their manager."""

from docbot.infrastructure.writers.manager import RouteWriterManager
from docbot.infrastructure.writers.markdown_writer import MarkdownRouteWriter
from docbot.infrastructure.writers.openapi_writer import OpenApiRouteWriter
from docbot.infrastructure.writers.postman_writer import PostmanRouteWriter
from docbot.infrastructure.writers.registry import ROUTE_WRITER_REGISTRY

__all__ = [
    "MarkdownRouteWriter",
    "OpenApiRouteWriter",
    "PostmanRouteWriter",
    "ROUTE_WRITER_REGISTRY",
    "RouteWriterManager",
]
