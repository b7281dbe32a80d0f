from __future__ import annotations

"""Typed "not found" error.

``NotFoundError[T]`` carries no data. The kind ``T`` is baked into a cached
subclass, so the class alone identifies what was missing::

    >>> NotFoundError[int]() == NotFoundError[int]()
    True
    >>> str(NotFoundError[int]())
    'int not found'
    >>> NotFoundError[int]() == NotFoundError[str]()
    False

Bare ``NotFoundError()`` is the error for an unspecified kind.
"""

import types
from typing import Any, ClassVar, Dict, Generic, TypeVar

from pydantic import BaseModel

from not_found_error.core.result import Result

__all__ = ["NotFoundError", "ErrorDetail", "type_label"]

T = TypeVar("T")

# kind -> specialised subclass
_SPECIALIZED: Dict[Any, type] = {}


class ErrorDetail(BaseModel):
    """Serialisable view of a not-found error."""

    code: str = "not_found"
    kind: str
    message: str


def type_label(kind: Any) -> str:
    """Return a readable name for *kind* (class, typing construct or str)."""
    if kind is None:
        return "value"
    if isinstance(kind, str):
        return kind
    if isinstance(kind, type) and not isinstance(kind, types.GenericAlias):
        return kind.__qualname__
    return repr(kind).replace("typing.", "")


def _rebuild(kind: Any) -> "NotFoundError":
    return NotFoundError.of(kind)


class NotFoundError(LookupError, Generic[T]):
    """Error signalling that no value of kind ``T`` was found."""

    kind: ClassVar[Any] = None

    def __init__(self) -> None:
        super().__init__(self.describe())

    def __class_getitem__(cls, kind: Any):  # type: ignore[override]
        if isinstance(kind, TypeVar):
            # annotations such as ``NotFoundError[T]`` stay plain generic aliases
            return super().__class_getitem__(kind)  # type: ignore[misc]
        if cls is not NotFoundError:
            raise TypeError(f"{cls.__name__} is already specialised")
        if kind is None:
            kind = type(None)
        try:
            cached = _SPECIALIZED.get(kind)
        except TypeError as e:
            raise TypeError(f"NotFoundError kind must be hashable, got {kind!r}") from e
        if cached is not None:
            return cached
        name = f"{cls.__name__}[{type_label(kind)}]"
        sub = type(cls)(name, (cls,), {"kind": kind, "__module__": cls.__module__, "__qualname__": name})
        return _SPECIALIZED.setdefault(kind, sub)

    # Constructors ------------------------------------------------------ #
    @classmethod
    def new(cls) -> "NotFoundError[T]":
        return cls()

    default = new

    @classmethod
    def of(cls, kind: Any = None) -> "NotFoundError":
        """Build an error for a runtime *kind*; ``None`` leaves it unspecified."""
        if kind is None:
            return NotFoundError()
        return NotFoundError[kind]()

    @classmethod
    def result(cls) -> Result[T]:
        """Return ``Result.failure`` wrapping a fresh error of this kind."""
        return Result.failure(cls())

    # ------------------------------------------------------------------ #
    def describe(self) -> str:
        return f"{type_label(self.kind)} not found"

    def detail(self) -> ErrorDetail:
        return ErrorDetail(kind=type_label(self.kind), message=self.describe())

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, NotFoundError):
            return type(self) is type(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(type(self))

    def __reduce__(self):
        return _rebuild, (self.kind,)
