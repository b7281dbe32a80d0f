"""not_found_error utilities."""

from .logging import get, log, enable_rich_logging

__all__ = [
    "get",
    "log",
    "enable_rich_logging",
]
