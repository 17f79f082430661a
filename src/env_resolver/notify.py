"""
Notification sinks used by the resolver to report which file it picked.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, runtime_checkable

from .logging import colorize, get_logger

LOGGER_NAME = "EnvResolver"


@runtime_checkable
class Notifier(Protocol):
    """Anything accepting info- and warning-level messages."""

    def info(self, msg: str) -> None: ...

    def warn(self, msg: str) -> None: ...


class LoggerNotifier:
    """Forwards notifications to a structlog logger named `EnvResolver`."""

    def __init__(self, logger: Optional[Any] = None) -> None:
        self._logger = logger if logger is not None else get_logger(LOGGER_NAME)

    def info(self, msg: str) -> None:
        self._logger.info(msg)

    def warn(self, msg: str) -> None:
        self._logger.warning(msg)


class StyledNotifier:
    """Colors messages before handing them to another notifier.

    Purely cosmetic; the severity chosen by the caller is passed through
    untouched.
    """

    def __init__(self, inner: Notifier, *, info_color: str = "green", warn_color: str = "yellow") -> None:
        self._inner = inner
        self._info_color = info_color
        self._warn_color = warn_color

    def info(self, msg: str) -> None:
        self._inner.info(colorize(msg, self._info_color))

    def warn(self, msg: str) -> None:
        self._inner.warn(colorize(msg, self._warn_color))


def default_notifier() -> Notifier:
    return LoggerNotifier()
