"""Domain protocols (ports) implemented by infrastructure adapters."""

from docbot.domain.protocols.description_protocol import DescriptionExtractorProtocol
from docbot.domain.protocols.file_writer_protocol import FileWriterProtocol
from docbot.domain.protocols.logger_protocol import LoggerProtocol
from docbot.domain.protocols.route_collector_protocol import RouteCollectorProtocol
from docbot.domain.protocols.route_writer_protocol import RouteWriterProtocol

__all__ = [
    "DescriptionExtractorProtocol",
    "FileWriterProtocol",
    "LoggerProtocol",
    "RouteCollectorProtocol",
    "RouteWriterProtocol",
]
