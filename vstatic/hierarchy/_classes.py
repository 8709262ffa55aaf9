"""
Class hierarchy — reflective oracle over ordinary Python classes.

The chain follows each class's primary base (`__bases__[0]`); mixins after
it are not searched. Declared operations are the `staticmethod` entries of
the class body. Class methods already dispatch through `cls` and are left
out, and so are staticmethods whose signature cannot be introspected
(partials, some builtins).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from vstatic._signature import signature_of
from vstatic._types import OpKey, Operation

logger = logging.getLogger(__name__)


class ClassHierarchy:
    """Hierarchy over Python classes."""

    def parent_of(self, t: object) -> type | None:
        if not isinstance(t, type) or not t.__bases__:
            return None
        return t.__bases__[0]

    def declared_operations(self, t: object) -> Mapping[OpKey, Operation]:
        if not isinstance(t, type):
            return {}
        table: dict[OpKey, Operation] = {}
        for attr_name, attr in vars(t).items():
            if not isinstance(attr, staticmethod):
                continue
            fn = attr.__func__
            try:
                sig = signature_of(fn, name=attr_name)
            except (TypeError, ValueError) as e:
                logger.debug("%s.%s skipped: %s", t.__qualname__, attr_name, e)
                continue
            table[sig.key] = Operation(signature=sig, implementation=fn, owner=t)
        return table


__all__ = ("ClassHierarchy",)
