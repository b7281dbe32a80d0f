from __future__ import annotations
"""Optional -> Result conversions.

``require`` reports the value's own kind, ``not_found`` reports a kind chosen
by the caller (e.g. ``Account`` while unwrapping an account's field).
"""
from typing import Any, Optional, TypeVar

from not_found_error.core.error import NotFoundError
from not_found_error.core.result import Result

T = TypeVar("T")

__all__ = ["require", "not_found"]


def require(option: Optional[T], kind: Any = None) -> Result[T]:
    """Return *option* as a success, or ``NotFoundError[kind]`` when it is None.

    *kind* names the type of the value itself; omit it to get an
    unspecified ``NotFoundError()``.
    """
    if option is None:
        return Result.failure(NotFoundError.of(kind))
    return Result.success(option)


def not_found(option: Optional[T], kind: Any) -> Result[T]:
    """Like :func:`require` but the error reports *kind*, not the value's type."""
    if option is None:
        return Result.failure(NotFoundError[kind]())
    return Result.success(option)
