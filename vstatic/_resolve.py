"""
Resolution — validate, extract signature, ascend, match.

No invocation happens here.
"""

from __future__ import annotations

import logging

from vstatic._errors import InvalidHierarchy, MissingSignature, NoSuchOperation
from vstatic._policy import Policy
from vstatic._signature import signature_of
from vstatic._types import Resolution, type_name
from vstatic.hierarchy import Hierarchy, ascent, is_within

logger = logging.getLogger(__name__)


def find[T](
    h: Hierarchy[T],
    ceiling: T,
    sub: T | None,
    source: object,
    policy: Policy,
) -> Resolution:
    """
    Find the most-derived operation matching `source` in [sub .. ceiling].

    Raises:
        InvalidHierarchy: `sub` is None or not the ceiling / a descendant.
        MissingSignature: `source` is None.
        NoSuchOperation: nothing in the range declares an accepted match.
    """
    if sub is None or not is_within(h, sub, ceiling):
        raise InvalidHierarchy(
            f"sub must be or inherit from {type_name(ceiling)}, got {sub!r}",
            sub=sub,
            ceiling=ceiling,
        )
    if source is None:
        raise MissingSignature("signature source must not be None")

    requested = signature_of(source)
    visited: list[T] = []

    for current in ascent(h, sub, ceiling):
        visited.append(current)
        candidate = h.declared_operations(current).get(requested.key)
        if candidate is None:
            logger.debug("%s: no %s", type_name(current), requested.name)
            continue
        if not policy.returns.accepts(requested, candidate.signature):
            logger.debug(
                "%s: %s rejected by return check %s",
                type_name(current),
                candidate.signature,
                policy.returns.name,
            )
            continue
        logger.debug("%s: matched %s", type_name(current), candidate.signature)
        return Resolution(
            requested=requested,
            operation=candidate,
            start=sub,
            ceiling=ceiling,
            visited=tuple(visited),
        )

    logger.debug(
        "no %s between %s and %s", requested, type_name(sub), type_name(ceiling)
    )
    raise NoSuchOperation(
        f"The operation {requested.name} with the provided parameter types and "
        f"return type does not exist between {type_name(sub)} and {type_name(ceiling)}",
        signature=requested,
        start=sub,
        ceiling=ceiling,
    )


__all__ = ("find",)
