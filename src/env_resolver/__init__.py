"""
env-resolver: pick the environment file to load at startup.
"""

from .exceptions import EnvResolverError, InvalidPattern, ResolutionFailure
from .notify import LoggerNotifier, Notifier, StyledNotifier
from .pattern import (
    DEFAULT_PATTERN,
    FALLBACK_FILENAME,
    FALLBACK_PATTERN,
    PartType,
    PatternPart,
    coerce_pattern,
    generate_combinations,
    normalize_part,
)
from .resolver import ResolutionResult, build_candidates, locate_env_file, resolve_env_path

__all__ = [
    "DEFAULT_PATTERN",
    "EnvResolverError",
    "FALLBACK_FILENAME",
    "FALLBACK_PATTERN",
    "InvalidPattern",
    "LoggerNotifier",
    "Notifier",
    "PartType",
    "PatternPart",
    "ResolutionFailure",
    "ResolutionResult",
    "StyledNotifier",
    "build_candidates",
    "coerce_pattern",
    "generate_combinations",
    "locate_env_file",
    "normalize_part",
    "resolve_env_path",
]
