"""
Environment file resolution.

Builds the ordered candidate list for a pattern, probes the target
directory and reports the first file found.

Usage:
    from env_resolver import resolve_env_path

    path = resolve_env_path("config")  # e.g. /srv/app/config/.env.production
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from .config import get_active_environment
from .exceptions import ResolutionFailure
from .notify import Notifier, default_notifier
from .pattern import DEFAULT_PATTERN, FALLBACK_FILENAME, FALLBACK_PATTERN, PatternLike, generate_combinations

EnvironmentProvider = Callable[[], str]
ExistsCheck = Callable[[str], bool]


@dataclass(frozen=True)
class ResolutionResult:
    """The file picked for a directory and the candidate that matched it."""

    filepath: str
    resolved_by: str
    tried: List[str] = field(default_factory=list)

    @property
    def is_fallback(self) -> bool:
        return self.resolved_by == FALLBACK_FILENAME


def build_candidates(pattern: PatternLike, env: str) -> List[str]:
    """Expansions of `pattern` followed by the bare `.env` fallback."""
    return [
        *generate_combinations(pattern, env),
        *generate_combinations(FALLBACK_PATTERN, env),
    ]


def locate_env_file(
    dest: str,
    pattern: PatternLike = DEFAULT_PATTERN,
    *,
    environment: Optional[EnvironmentProvider] = None,
    exists: Optional[ExistsCheck] = None,
) -> ResolutionResult:
    """Find the first existing candidate under `dest`.

    Raises:
        ResolutionFailure: none of the candidates exists.
    """
    env = (environment or get_active_environment)()
    exists = exists or os.path.exists
    candidates = build_candidates(pattern, env)

    for index, filename in enumerate(candidates):
        filepath = os.path.abspath(f"{dest}/{filename}")
        if exists(filepath):
            return ResolutionResult(filepath=filepath, resolved_by=filename, tried=candidates[: index + 1])

    raise ResolutionFailure(dest=dest, tried=candidates)


def resolve_env_path(
    dest: str,
    ignore_env_specific_warn: bool = False,
    pattern: PatternLike = DEFAULT_PATTERN,
    *,
    environment: Optional[EnvironmentProvider] = None,
    notifier: Optional[Notifier] = None,
    exists: Optional[ExistsCheck] = None,
) -> str:
    """
    Resolve the path of the environment file to load from `dest`.

    Args:
        dest: Directory to look in.
        ignore_env_specific_warn: Report a fallback to the bare `.env` at
            info level instead of warning level.
        pattern: Parts describing the accepted filenames, tried before the
            `.env` fallback. Defaults to `.env` plus an optional `.{env}`.
        environment: Returns the active environment name. Defaults to
            reading `NODE_ENV`.
        notifier: Receives the single "using file" notification.
        exists: Filesystem existence check.

    Returns:
        Absolute path of the first existing candidate.

    Raises:
        ResolutionFailure: none of the candidates exists.
    """
    result = locate_env_file(dest, pattern, environment=environment, exists=exists)
    notifier = notifier or default_notifier()

    if result.is_fallback:
        if not ignore_env_specific_warn:
            notifier.warn(f"Using fallback {FALLBACK_FILENAME} file")
        else:
            notifier.info(f"Using {FALLBACK_FILENAME} file")
    else:
        notifier.info(f"Using {result.resolved_by} file")

    return result.filepath
