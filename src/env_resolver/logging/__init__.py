"""
Logging Service for env-resolver.

Library: structlog, with orjson for the JSON renderer.
"""

from .core import configure_logging, get_logger
from .formatters import colorize

__all__ = ["colorize", "configure_logging", "get_logger"]
