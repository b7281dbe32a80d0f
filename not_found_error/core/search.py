from __future__ import annotations
"""Linear search returning a typed not-found error instead of None."""
from typing import Any, Callable, Iterable, TypeVar

from not_found_error.core.error import NotFoundError
from not_found_error.core.result import Result
from not_found_error.utils.logging import log

T = TypeVar("T")

__all__ = ["locate"]


def locate(items: Iterable[T], predicate: Callable[[T], bool], kind: Any = None) -> Result[T]:  # noqa: D401
    """Return the first element of *items* satisfying *predicate*.

    Iteration stops at the first match, so lazy and unbounded iterables are
    fine as long as something matches. When nothing does, the result holds
    ``NotFoundError.of(kind)``.
    """
    for item in items:
        if predicate(item):
            return Result.success(item)
    log.debug("locate: no element matched %s", getattr(predicate, "__name__", predicate))
    return Result.failure(NotFoundError.of(kind))
