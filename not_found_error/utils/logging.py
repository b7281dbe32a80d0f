from __future__ import annotations
"""Library logger with an opt-in Rich handler.

The package logs nothing unless the application configures a handler, so
importing it never touches the root logger. Call :func:`enable_rich_logging`
to get the same Rich output the rest of the toolchain uses.
"""
from logging import Logger, NullHandler, getLogger, INFO, DEBUG, WARNING, ERROR

from rich.console import Console
from rich.logging import RichHandler

console = Console(stderr=True)

__all__ = [
    "get",
    "log",
    "enable_rich_logging",
]

_LEVEL_MAP = {
    "info": INFO,
    "debug": DEBUG,
    "warning": WARNING,
    "error": ERROR,
}

log: Logger = getLogger("not_found_error")
log.addHandler(NullHandler())


def get(level: str = "info") -> Logger:  # noqa: D401
    """Return the package logger with *level* (str)."""
    lvl = _LEVEL_MAP.get(level.lower(), INFO)
    lg = getLogger("not_found_error")
    lg.setLevel(lvl)
    return lg


def enable_rich_logging(level: str = "info") -> Logger:
    """Attach a single RichHandler to the package logger and return it."""
    lg = get(level)
    if not any(isinstance(h, RichHandler) for h in lg.handlers):
        lg.addHandler(
            RichHandler(console=console, rich_tracebacks=True, markup=False, show_path=False)
        )
    return lg
