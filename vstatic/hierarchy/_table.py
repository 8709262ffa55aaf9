"""
Explicit type nodes — per-type dispatch tables with explicit parent links.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from vstatic._signature import signature_of
from vstatic._types import OpKey, Operation, Signature, TypeKey

# ═══════════════════════════════════════════════════════════════════════════════
# TypeNode — Type Descriptor With Its Own Table
# ═══════════════════════════════════════════════════════════════════════════════


class TypeNode:
    """
    Type descriptor owning a table of type-scoped operations.

    Identity is the node itself: two nodes with the same name are
    different types.

    Example:
        shape = TypeNode("Shape")
        circle = TypeNode("Circle", parent=shape)

        @shape.operation
        def describe(label: str) -> str:
            return f"shape {label}"

        circle.register("describe", (str,), str, lambda label: f"circle {label}")
    """

    __slots__ = ("_name", "_parent", "_operations")

    def __init__(self, name: str, parent: TypeNode | None = None) -> None:
        self._name = name
        self._parent = parent
        self._operations: dict[OpKey, Operation] = {}

    @property
    def name(self) -> str:
        return self._name

    @property
    def parent(self) -> TypeNode | None:
        return self._parent

    @property
    def operations(self) -> Mapping[OpKey, Operation]:
        """Read-only view of the local table."""
        return MappingProxyType(self._operations)

    def child(self, name: str) -> TypeNode:
        """Create a node whose parent is this one."""
        return TypeNode(name, parent=self)

    def declare(self, signature: Signature, implementation: Callable[..., Any]) -> Operation:
        """Add an operation under an already computed signature."""
        if signature.key in self._operations:
            raise ValueError(f"{self._name} already declares {signature}")
        op = Operation(signature=signature, implementation=implementation, owner=self)
        self._operations[signature.key] = op
        return op

    def register(
        self,
        name: str,
        params: tuple[TypeKey, ...],
        returns: TypeKey,
        implementation: Callable[..., Any],
    ) -> Operation:
        """Add an operation with explicit tags."""
        return self.declare(Signature(name, tuple(params), returns), implementation)

    def operation[F: Callable[..., Any]](self, fn: F) -> F:
        """
        Decorator: add `fn` under the signature of its annotations.

        Returns `fn` unchanged.
        """
        self.declare(signature_of(fn), fn)
        return fn

    def __repr__(self) -> str:
        return f"TypeNode({self._name!r})"


# ═══════════════════════════════════════════════════════════════════════════════
# TableHierarchy — Oracle Over TypeNodes
# ═══════════════════════════════════════════════════════════════════════════════


class TableHierarchy:
    """Hierarchy over `TypeNode` descriptors."""

    def parent_of(self, t: object) -> TypeNode | None:
        return t.parent if isinstance(t, TypeNode) else None

    def declared_operations(self, t: object) -> Mapping[OpKey, Operation]:
        return t.operations if isinstance(t, TypeNode) else {}


__all__ = ("TypeNode", "TableHierarchy")
