"""
vstatic — virtual dispatch for type-scoped operations.

    import vstatic as V

    class Shape:
        @staticmethod
        def describe(label: str) -> str:
            return f"shape {label}"

    class Circle(Shape):
        @staticmethod
        def describe(label: str) -> str:
            return f"circle {label}"

    shapes = V.virtual(Shape).build()
    shapes.call(Circle, Shape.describe, "unit")   # "circle unit"

    from vstatic import hierarchy as H   # Type-metadata oracles
    from vstatic import lift as L        # LazyCoroResult variants
"""

from vstatic import hierarchy
from vstatic import lift
from vstatic._types import (
    Result,
    Ok,
    Error,
    LazyCoroResult,
    Signature,
    Operation,
    Resolution,
)
from vstatic._errors import (
    DispatchErrorKind,
    DispatchError,
    InvalidHierarchy,
    MissingSignature,
    NoSuchOperation,
)
from vstatic._signature import signature_of
from vstatic._policy import Policy, ReturnCheck, EXACT, INVERTED, IGNORE
from vstatic.hierarchy import Hierarchy, TypeNode, TableHierarchy, ClassHierarchy
from vstatic._dispatch import Virtual, Dispatcher, virtual, call_virtual

__version__ = "0.1.0"

__all__ = (
    "hierarchy",
    "lift",
    "Result",
    "Ok",
    "Error",
    "LazyCoroResult",
    "Signature",
    "Operation",
    "Resolution",
    "DispatchErrorKind",
    "DispatchError",
    "InvalidHierarchy",
    "MissingSignature",
    "NoSuchOperation",
    "signature_of",
    "Policy",
    "ReturnCheck",
    "EXACT",
    "INVERTED",
    "IGNORE",
    "Hierarchy",
    "TypeNode",
    "TableHierarchy",
    "ClassHierarchy",
    "Virtual",
    "Dispatcher",
    "virtual",
    "call_virtual",
)
