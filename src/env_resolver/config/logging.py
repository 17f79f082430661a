"""
Logging Configuration.
"""

from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogFormat(str, Enum):
    CONSOLE = "console"
    JSON = "json"


class LoggingSettings(BaseSettings):
    """How resolver notifications are rendered when logging is configured."""

    model_config = SettingsConfigDict(
        env_prefix="ENV_RESOLVER_LOG_",
        extra="ignore",
        frozen=True,
    )

    level: str = Field(default="INFO", description="Minimum level (DEBUG, INFO, WARNING, ...)")
    format: LogFormat = Field(default=LogFormat.CONSOLE, description="console or json")
