"""Application commands (CQRS write side)."""

from docbot.application.commands.route_doc_commands import (
    GenerateRouteDocs,
    GenerateRouteDocsResult,
)

__all__ = ["GenerateRouteDocs", "GenerateRouteDocsResult"]
