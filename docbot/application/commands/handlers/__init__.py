"""Command handlers."""

from docbot.application.commands.handlers.generate_route_docs_handler import (
    GenerateRouteDocsHandler,
)

__all__ = ["GenerateRouteDocsHandler"]
