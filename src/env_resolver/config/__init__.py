"""
env-resolver Configuration Module.

Each sub-module owns one concern and its environment variables:
- environment: `NODE_ENV`, the active environment name
- logging: `ENV_RESOLVER_LOG_*`
"""

from .environment import DEFAULT_ENVIRONMENT, EnvironmentSettings, get_active_environment
from .logging import LogFormat, LoggingSettings

__all__ = [
    "DEFAULT_ENVIRONMENT",
    "EnvironmentSettings",
    "LogFormat",
    "LoggingSettings",
    "get_active_environment",
]
