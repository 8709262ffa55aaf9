"""
Dispatcher — fluent API over resolution.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from kungfu import LazyCoroResult, Result, Ok, Error

from vstatic._errors import DispatchError
from vstatic._policy import Policy
from vstatic._resolve import find
from vstatic._types import Resolution, type_name
from vstatic.lift import lazy
from vstatic.hierarchy import Hierarchy, TypeNode, TableHierarchy, ClassHierarchy

logger = logging.getLogger(__name__)


def hierarchy_for(ceiling: object) -> Hierarchy[Any]:
    """Pick the oracle matching the kind of ceiling descriptor."""
    if isinstance(ceiling, TypeNode):
        return TableHierarchy()
    if isinstance(ceiling, type):
        return ClassHierarchy()
    raise ValueError(
        f"No default hierarchy for {ceiling!r}; pass one with .hierarchy()"
    )


# ═══════════════════════════════════════════════════════════════════════════════
# Virtual Builder
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(slots=True, frozen=True)
class Virtual[T]:
    """
    Fluent dispatcher builder.

    Type parameters:
        T: Type descriptor (class, TypeNode, custom)

    Example:
        shapes = (
            V.virtual(Shape)
            .policy(V.Policy().with_returns(V.IGNORE))
            .build()
        )
    """

    _ceiling: T
    _hierarchy: Hierarchy[T] | None
    _policy: Policy

    def hierarchy(self, h: Hierarchy[T]) -> Virtual[T]:
        """Set type-metadata oracle."""
        return Virtual(
            _ceiling=self._ceiling,
            _hierarchy=h,
            _policy=self._policy,
        )

    def policy(self, p: Policy) -> Virtual[T]:
        """Set dispatch policy."""
        return Virtual(
            _ceiling=self._ceiling,
            _hierarchy=self._hierarchy,
            _policy=p,
        )

    def build(self) -> Dispatcher[T]:
        """Build dispatcher."""
        h = self._hierarchy if self._hierarchy is not None else hierarchy_for(self._ceiling)
        return Dispatcher(ceiling=self._ceiling, hierarchy=h, policy=self._policy)


# ═══════════════════════════════════════════════════════════════════════════════
# Dispatcher
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(slots=True, frozen=True)
class Dispatcher[T]:
    """
    Dispatcher bound to a ceiling type.

    Stateless between calls; safe to share.
    """

    ceiling: T
    hierarchy: Hierarchy[T]
    policy: Policy

    def find(self, sub: T | None, source: object) -> Resolution:
        """Resolve without invoking. Raises DispatchError subclasses."""
        return find(self.hierarchy, self.ceiling, sub, source, self.policy)

    def resolve(self, sub: T | None, source: object) -> Result[Resolution, DispatchError]:
        """Resolve without invoking or raising."""
        try:
            return Ok(self.find(sub, source))
        except DispatchError as e:
            return Error(e)

    def call(self, sub: T | None, source: object, *args: Any) -> Any:
        """
        Resolve and invoke the most-derived implementation.

        Whatever the implementation raises propagates unchanged.

        Example:
            shapes.call(Circle, Shape.describe, "unit")
        """
        resolution = self.find(sub, source)
        logger.debug(
            "invoking %s on %s for %s",
            resolution.requested.name,
            type_name(resolution.owner),
            type_name(sub),
        )
        return resolution.operation(*args)

    def lazy(self, sub: T | None, source: object, *args: Any) -> LazyCoroResult[Any, DispatchError]:
        """Deferred call; see `vstatic.lift.lazy`."""
        return lazy(self, sub, source, *args)

    def __call__(self, sub: T | None, source: object, *args: Any) -> Any:
        return self.call(sub, source, *args)


# ═══════════════════════════════════════════════════════════════════════════════
# Entry Points
# ═══════════════════════════════════════════════════════════════════════════════


def virtual[T](ceiling: T) -> Virtual[T]:
    """
    Create dispatcher builder for a ceiling type.

    Example:
        from vstatic import virtual

        shapes = virtual(Shape).build()
        shapes.call(Circle, Shape.describe, "unit")
    """
    return Virtual(_ceiling=ceiling, _hierarchy=None, _policy=Policy())


def call_virtual(
    ceiling: Any,
    sub: Any,
    source: object,
    *args: Any,
    hierarchy: Hierarchy[Any] | None = None,
    policy: Policy | None = None,
) -> Any:
    """
    One-shot dispatch: resolve `source` from `sub` up to `ceiling`, invoke it.

    Example:
        call_virtual(Shape, Circle, Shape.describe, "unit")
    """
    builder = virtual(ceiling)
    if hierarchy is not None:
        builder = builder.hierarchy(hierarchy)
    if policy is not None:
        builder = builder.policy(policy)
    return builder.build().call(sub, source, *args)


__all__ = (
    "Virtual",
    "Dispatcher",
    "virtual",
    "call_virtual",
    "hierarchy_for",
)
