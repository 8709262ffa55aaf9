"""
Hierarchy — type-metadata oracles.

    from vstatic import hierarchy as H

    H.ClassHierarchy()   # Python classes, staticmethods
    H.TableHierarchy()   # explicit TypeNode tables
"""

from vstatic.hierarchy._protocol import Hierarchy, ascent, is_within
from vstatic.hierarchy._table import TypeNode, TableHierarchy
from vstatic.hierarchy._classes import ClassHierarchy

__all__ = (
    "Hierarchy",
    "ascent",
    "is_within",
    "TypeNode",
    "TableHierarchy",
    "ClassHierarchy",
)
