"""Application services."""

from docbot.application.services.route_partitioner import RoutePartitioner
from docbot.application.services.segment_resolver import SegmentResolver

__all__ = ["RoutePartitioner", "SegmentResolver"]
