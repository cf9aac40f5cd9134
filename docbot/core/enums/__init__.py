"""Core enums package.

Usage:
    from docbot.core.enums import ErrorCode, Environment
"""

from docbot.core.enums.environment import Environment
from docbot.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
