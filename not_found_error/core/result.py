from __future__ import annotations
"""Minimal Result dataclass capturing success or failure.

Every conversion in this package returns a :class:`Result` instead of
raising, so callers choose whether to propagate, default or raise.
"""
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

from not_found_error.utils.logging import log

T = TypeVar("T")
U = TypeVar("U")

__all__ = ["Result"]


@dataclass(slots=True)
class Result(Generic[T]):  # noqa: D101
    value: Optional[T] = None
    error: Optional[Exception] = None

    # ------------------------------------------------------------------ #
    @property
    def ok(self) -> bool:  # noqa: D401
        """Return True when *error* is None."""
        return self.error is None

    # Convenience constructors ----------------------------------------- #
    @staticmethod
    def success(val: T) -> "Result[T]":  # noqa: D401
        return Result(value=val)

    @staticmethod
    def failure(err: Exception) -> "Result[T]":  # noqa: D401
        return Result(error=err)

    # ------------------------------------------------------------------ #
    def unwrap(self) -> T:  # noqa: D401
        """Return *value* or raise *error* if present (Rust-like)."""
        if self.error is not None:
            log.debug("unwrap on failed result: %r", self.error)
            raise self.error
        return self.value  # type: ignore[return-value]

    def unwrap_or(self, default: T) -> T:  # noqa: D401
        return self.value if self.error is None else default  # type: ignore[return-value]

    def unwrap_err(self) -> Exception:
        """Return *error*; a successful result raises ``ValueError``."""
        if self.error is None:
            raise ValueError(f"unwrap_err called on a successful result: {self.value!r}")
        return self.error

    # Combinators ------------------------------------------------------- #
    def map(self, fn: Callable[[T], U]) -> "Result[U]":
        if self.error is not None:
            return Result(error=self.error)
        return Result(value=fn(self.value))  # type: ignore[arg-type]

    def and_then(self, fn: Callable[[T], "Result[U]"]) -> "Result[U]":
        if self.error is not None:
            return Result(error=self.error)
        return fn(self.value)  # type: ignore[arg-type]

    def or_else(self, fn: Callable[[Exception], "Result[T]"]) -> "Result[T]":
        if self.error is None:
            return self
        return fn(self.error)
