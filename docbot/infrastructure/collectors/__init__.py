"""Route collectors."""

from docbot.infrastructure.collectors.fastapi_collector import FastAPIRouteCollector
from docbot.infrastructure.collectors.json_collector import JsonRouteCollector

__all__ = ["FastAPIRouteCollector", "JsonRouteCollector"]
