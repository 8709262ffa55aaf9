"""
Hierarchy protocol — the read-only type-metadata oracle.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Protocol

from vstatic._types import OpKey, Operation

# ═══════════════════════════════════════════════════════════════════════════════
# Hierarchy Protocol — Users Implement This
# ═══════════════════════════════════════════════════════════════════════════════


class Hierarchy[T](Protocol):
    """
    Type hierarchy protocol.

    Implement this to dispatch over custom type metadata (schemas,
    plugin registries, ...). Descriptors the oracle does not understand
    must have no parent and no operations.

    Example:
        class SchemaHierarchy:
            def __init__(self, schemas: dict[str, Schema]) -> None:
                self.schemas = schemas

            def parent_of(self, t: str) -> str | None:
                schema = self.schemas.get(t)
                return schema.extends if schema else None

            def declared_operations(self, t: str) -> Mapping[OpKey, Operation]:
                schema = self.schemas.get(t)
                return schema.operations if schema else {}
    """

    def parent_of(self, t: T) -> T | None:
        """Parent descriptor, or None at the root."""
        ...

    def declared_operations(self, t: T) -> Mapping[OpKey, Operation]:
        """Operations declared directly on `t`, keyed by (name, params)."""
        ...


# ═══════════════════════════════════════════════════════════════════════════════
# Traversal Helpers
# ═══════════════════════════════════════════════════════════════════════════════


def ascent[T](h: Hierarchy[T], start: T, ceiling: T) -> Iterator[T]:
    """
    Yield `start`, then its ancestors, up to and including `ceiling`.

    Stops early at the root when `ceiling` is never reached.
    """
    current: T | None = start
    while current is not None:
        yield current
        if current == ceiling:
            return
        current = h.parent_of(current)


def is_within[T](h: Hierarchy[T], sub: T | None, ceiling: T) -> bool:
    """Check that `sub` is `ceiling` or one of its descendants."""
    if sub is None:
        return False
    for t in ascent(h, sub, ceiling):
        if t == ceiling:
            return True
    return False


__all__ = ("Hierarchy", "ascent", "is_within")
