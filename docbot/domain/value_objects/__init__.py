"""Domain value objects."""

from docbot.domain.value_objects.resolved_segment import ResolvedSegment, SegmentAuth

__all__ = ["ResolvedSegment", "SegmentAuth"]
