from __future__ import annotations
"""Method-style wrappers around the conversion functions.

``None`` cannot grow methods, so the fluent form goes through a thin wrapper::

    account = opt(accounts.get(key), Account).require()
    root = opt(find_root(path)).ok_or_not_found("WorkspaceRoot")

Both calls return exactly what :func:`require` / :func:`not_found` would.
"""
from typing import Any, Generic, Optional, Protocol, TypeVar, runtime_checkable

from not_found_error.core.convert import not_found, require
from not_found_error.core.result import Result

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)

__all__ = ["Require", "OkOrNotFound", "Opt", "opt"]


@runtime_checkable
class Require(Protocol[T_co]):
    """Anything offering ``.require()``."""

    def require(self) -> Result[T_co]: ...


@runtime_checkable
class OkOrNotFound(Protocol[T_co]):
    """Anything offering ``.ok_or_not_found(kind)``."""

    def ok_or_not_found(self, kind: Any) -> Result[T_co]: ...


class Opt(Generic[T]):  # noqa: D401 – tiny wrapper
    """Optional value with ``require`` / ``ok_or_not_found`` methods."""

    __slots__ = ("value", "kind")

    def __init__(self, value: Optional[T], kind: Any = None):
        self.value = value
        self.kind = kind

    def require(self) -> Result[T]:
        return require(self.value, self.kind)

    def ok_or_not_found(self, kind: Any) -> Result[T]:
        return not_found(self.value, kind)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Opt):
            return NotImplemented
        return self.value == other.value and self.kind == other.kind

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Opt({self.value!r}, kind={self.kind!r})"


# public constructor --------------------------------------------------------- #

def opt(value: Optional[T], kind: Any = None) -> Opt[T]:  # noqa: D401
    """Return a method-style wrapper around *value*."""
    return Opt(value, kind)
