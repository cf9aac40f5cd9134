"""RouteCollectorProtocol - supplies the normalized route list."""

from typing import Protocol

from docbot.domain.entities import RouteRecord


class RouteCollectorProtocol(Protocol):
    """Source of route records (a live application, a route dump)."""

    def collect(self) -> list[RouteRecord]:
        """Return every documented route in registration order."""
        ...
