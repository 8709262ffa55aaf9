"""
Dispatch errors.

Raised before any invocation. Failures raised by a resolved implementation
are never wrapped: they reach the caller unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum, auto
from typing import ClassVar

from vstatic._types import Signature


class DispatchErrorKind(Enum):
    """Dispatch error kinds."""

    INVALID_HIERARCHY = auto()  # start type is not the ceiling or below it
    MISSING_SIGNATURE = auto()  # no signature source given
    NO_SUCH_OPERATION = auto()  # ascent finished without an accepted match


@dataclass(frozen=True, slots=True)
class DispatchError(Exception):
    """Base dispatch error."""

    kind: ClassVar[DispatchErrorKind]

    message: str

    def __str__(self) -> str:
        return self.message

    def __reduce__(self) -> tuple[type[DispatchError], tuple[object, ...]]:
        # Exception.args stays empty; rebuild from the fields instead.
        return (type(self), tuple(getattr(self, f.name) for f in fields(self)))


@dataclass(frozen=True, slots=True)
class InvalidHierarchy(DispatchError):
    """`sub` is absent, or is neither the ceiling type nor a descendant of it."""

    kind: ClassVar[DispatchErrorKind] = DispatchErrorKind.INVALID_HIERARCHY

    sub: object
    ceiling: object


@dataclass(frozen=True, slots=True)
class MissingSignature(DispatchError):
    """Signature source is absent."""

    kind: ClassVar[DispatchErrorKind] = DispatchErrorKind.MISSING_SIGNATURE


@dataclass(frozen=True, slots=True)
class NoSuchOperation(DispatchError):
    """No type in [start .. ceiling] declares an accepted match."""

    kind: ClassVar[DispatchErrorKind] = DispatchErrorKind.NO_SUCH_OPERATION

    signature: Signature
    start: object
    ceiling: object


__all__ = (
    "DispatchErrorKind",
    "DispatchError",
    "InvalidHierarchy",
    "MissingSignature",
    "NoSuchOperation",
)
