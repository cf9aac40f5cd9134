"""Core errors package.

Usage:
    from docbot.core.errors import ConfigurationError, DomainError
"""

from docbot.core.errors.configuration_error import ConfigurationError
from docbot.core.errors.domain_error import DomainError

__all__ = [
    "ConfigurationError",
    "DomainError",
]
