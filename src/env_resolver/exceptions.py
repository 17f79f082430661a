"""
Unified exception hierarchy for env-resolver.

Every error carries a machine-readable `code` and a `details` mapping so
callers can branch on the failure without parsing messages.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence


class EnvResolverError(Exception):
    """Root of all env-resolver exceptions."""

    def __init__(
        self,
        message: str,
        *,
        code: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or {}


class ResolutionFailure(EnvResolverError, FileNotFoundError):
    """No candidate environment file exists in the target directory.

    `tried` keeps the candidates in the order they were tested.
    """

    def __init__(
        self,
        *,
        dest: str,
        tried: Sequence[str],
    ) -> None:
        self.dest = dest
        self.tried = list(tried)
        listing = "\n".join(f"  - {name}" for name in self.tried)
        message = f"Couldn't load environment file from any sources in '{dest}':\nTried:\n{listing}"
        details = {"dest": dest, "tried": self.tried}
        super().__init__(message, code="ENV_FILE_NOT_FOUND", details=details)


class InvalidPattern(EnvResolverError):
    """A pattern part could not be validated."""

    def __init__(
        self,
        *,
        index: int,
        reason: str,
    ) -> None:
        message = f"Invalid pattern part at index {index}: {reason}"
        details = {"index": index, "reason": reason}
        self.index = index
        super().__init__(message, code="INVALID_PATTERN", details=details)
