"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from docbot.core.container import get_logger, build_generate_route_docs_handler

The container is organized into modules:
- infrastructure: Logging, filesystem, description extraction
- routing: Project config, segment resolver, writers, command handler
"""

from docbot.core.container.infrastructure import (
    get_description_extractor,
    get_filesystem,
    get_logger,
)
from docbot.core.container.routing import (
    build_generate_route_docs_handler,
    build_route_collector,
    build_segment_resolver,
    build_writer_manager,
    get_project_config,
    resolve_output_root,
)

__all__ = [
    "build_generate_route_docs_handler",
    "build_route_collector",
    "build_segment_resolver",
    "build_writer_manager",
    "get_description_extractor",
    "get_filesystem",
    "get_logger",
    "get_project_config",
    "resolve_output_root",
]
