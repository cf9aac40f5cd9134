"""Domain entities."""

from docbot.domain.entities.route_record import RouteRecord

__all__ = ["RouteRecord"]
