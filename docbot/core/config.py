"""
Configuration management using Pydantic Settings.

Runtime settings come from environment variables (prefix ``DOCBOT_``) or an
optional ``.env`` file. Documentation content (segments, writers, route
defaults) lives in the project config file, see
`docbot/core/project_config.py`.

Architecture:
- Flat Settings structure (no nesting)
- Type validation via Pydantic
- Cached per process via get_settings()

Usage:
    from docbot.core.config import get_settings

    settings = get_settings()
    base = settings.base_path
    if settings.is_development:
        # Dev-specific behavior
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from docbot.core.enums import Environment

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """
    Runtime settings (flat structure).

    Configuration precedence:
        1. Environment variables (DOCBOT_*)
        2. ``.env`` file in the working directory
        3. Default values

    Returns:
        Settings: Runtime configuration loaded from environment.
    """

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment (development, testing, ci, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    base_path: Path = Field(
        default_factory=Path.cwd,
        description="Project root; the output directory must stay inside it",
    )
    output_dir: str | None = Field(
        default=None,
        description="Output directory (relative to base_path or absolute); "
        "overrides the project config value",
    )
    config_file: Path | None = Field(
        default=None,
        description="Project config file (JSON). Defaults to <base_path>/docbot.json "
        "when that file exists",
    )
    route_host: str | None = Field(
        default=None,
        description="Base URL overriding route_defaults.host_value",
    )

    model_config = SettingsConfigDict(
        env_prefix="DOCBOT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the log level name.

        Args:
            v: Log level name.

        Returns:
            str: Upper-cased log level.

        Raises:
            ValueError: If the level is not a standard logging level.
        """
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}")
        return level

    @field_validator("route_host")
    @classmethod
    def validate_route_host(cls, v: str | None) -> str | None:
        """Treat blank hosts as unset."""
        if v is None or not v.strip():
            return None
        return v.strip()

    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT, False otherwise.
        """
        return self.environment == Environment.DEVELOPMENT

    @property
    def uses_json_logs(self) -> bool:
        """
        Check whether logs should be rendered as JSON.

        Returns:
            bool: True outside development.
        """
        return self.environment != Environment.DEVELOPMENT

    def resolved_config_file(self) -> Path | None:
        """
        Locate the project config file.

        Returns:
            Path | None: Explicit config_file, else <base_path>/docbot.json when
            it exists, else None.
        """
        if self.config_file is not None:
            return (
                self.config_file
                if self.config_file.is_absolute()
                else self.base_path / self.config_file
            )

        candidate = self.base_path / "docbot.json"
        return candidate if candidate.is_file() else None


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache so settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()
