"""
Core types for vstatic.

Re-exports from kungfu + signature / operation values.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Any

# Re-export from kungfu
from kungfu import Result, Ok, Error, LazyCoroResult

# ═══════════════════════════════════════════════════════════════════════════════
# Type Tags
# ═══════════════════════════════════════════════════════════════════════════════

type TypeKey = Hashable
"""Tag identifying a parameter or return type: a class, typing construct or string."""

type OpKey = tuple[str, tuple[TypeKey, ...]]
"""Lookup key inside a type's table: (name, parameter tags)."""


def type_name(t: object) -> str:
    """Readable name for a type descriptor or a type tag."""
    name = getattr(t, "__qualname__", None) or getattr(t, "name", None)
    return name if isinstance(name, str) else repr(t)


# ═══════════════════════════════════════════════════════════════════════════════
# Signature — Tagged Operation Identity
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Signature:
    """
    Operation identity: name, ordered parameter tags, return tag.

    Equality is structural. Parameters compare pairwise, order sensitive.

    Example:
        Signature("greet", (str,), str)
        Signature("area", ("shape",), "float")
    """

    name: str
    params: tuple[TypeKey, ...] = ()
    returns: TypeKey = Any

    @property
    def key(self) -> OpKey:
        """Table lookup key (return type not included)."""
        return (self.name, self.params)

    def __str__(self) -> str:
        params = ", ".join(type_name(p) for p in self.params)
        return f"{self.name}({params}) -> {type_name(self.returns)}"


# ═══════════════════════════════════════════════════════════════════════════════
# Operation — Declared Implementation
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Operation:
    """A type-scoped implementation declared directly on `owner`."""

    signature: Signature
    implementation: Callable[..., Any]
    owner: object

    def __call__(self, *args: Any) -> Any:
        # No implicit receiver: the operation belongs to the type, not an instance.
        return self.implementation(*args)


# ═══════════════════════════════════════════════════════════════════════════════
# Resolution — Search Result
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Resolution:
    """Successful search with metadata."""

    requested: Signature
    operation: Operation
    start: object
    ceiling: object
    visited: tuple[object, ...]

    @property
    def owner(self) -> object:
        return self.operation.owner

    @property
    def depth(self) -> int:
        """Parent links followed from `start` to the owner."""
        return len(self.visited) - 1


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    # Re-exports from kungfu
    "Result",
    "Ok",
    "Error",
    "LazyCoroResult",
    # Tags
    "TypeKey",
    "OpKey",
    "type_name",
    # Values
    "Signature",
    "Operation",
    "Resolution",
)
