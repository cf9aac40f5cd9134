"""Route partitioner: assign each route to exactly one segment.

Segments are scanned in resolution order and the first one whose active
predicates all hold wins (first match, not best match). The "web" segment is
never matched by predicate; it only receives routes no explicit segment
claimed. Without a "web" segment such routes are dropped.

Predicates (each only active when configured on the segment):
    1. prefix: route uri starts with the prefix
    2. domain: route domain equals the segment domain
    3. include_middleware: route carries every listed middleware
    4. exclude_middleware: route carries none of the listed middleware
"""

from collections.abc import Mapping, Sequence

from docbot.core.constants import WEB_SEGMENT_KEY
from docbot.domain.entities import RouteRecord
from docbot.domain.protocols import LoggerProtocol
from docbot.domain.value_objects import ResolvedSegment


class RoutePartitioner:
    """Partition routes into segments.

    Args:
        logger: Optional logger; dropped routes are reported at debug level.
    """

    def __init__(self, logger: LoggerProtocol | None = None) -> None:
        self._logger = logger

    def partition(
        self,
        routes: Sequence[RouteRecord],
        segments: Mapping[str, ResolvedSegment],
    ) -> dict[str, list[RouteRecord]]:
        """Group routes by segment key.

        Args:
            routes: Routes in collection order.
            segments: Resolved segments in evaluation order.

        Returns:
            Mapping with every segment key (possibly empty lists); route order
            within each list follows the input order.
        """
        partitioned: dict[str, list[RouteRecord]] = {key: [] for key in segments}

        for route in routes:
            key = self.match(route, segments)

            if key is None:
                if self._logger is not None:
                    self._logger.debug(
                        "Route matched no segment; dropped",
                        uri=route.uri,
                        name=route.name,
                    )
                continue

            partitioned[key].append(route)

        return partitioned

    def match(
        self,
        route: RouteRecord,
        segments: Mapping[str, ResolvedSegment],
    ) -> str | None:
        """Return the key of the segment a route belongs to, or None."""
        for key, segment in segments.items():
            if key == WEB_SEGMENT_KEY:
                continue

            if self.matches(route, segment):
                return key

        return WEB_SEGMENT_KEY if WEB_SEGMENT_KEY in segments else None

    @staticmethod
    def matches(route: RouteRecord, segment: ResolvedSegment) -> bool:
        """Check a route against every active predicate of a segment."""
        if segment.prefix is not None:
            if not isinstance(route.uri, str) or not route.uri.startswith(
                segment.prefix
            ):
                return False

        if segment.domain is not None and route.domain != segment.domain:
            return False

        middleware = set(route.middleware)

        if segment.include_middleware and not all(
            name in middleware for name in segment.include_middleware
        ):
            return False

        if segment.exclude_middleware and any(
            name in middleware for name in segment.exclude_middleware
        ):
            return False

        return True
