"""Logging adapters implementing LoggerProtocol."""

from docbot.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
