"""Domain enums."""

from docbot.domain.enums.auth_type import AuthType

__all__ = ["AuthType"]
