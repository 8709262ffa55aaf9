"""
Dispatch policy — behavior configuration.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from vstatic._types import Signature


# ═══════════════════════════════════════════════════════════════════════════════
# Return Check — Return-Type Acceptance
# ═══════════════════════════════════════════════════════════════════════════════


class ReturnCheck(Enum):
    """
    How a name/parameter match is judged on its return type.

    EXACT: Accept only when the return tags are equal.
           The conventional virtual-dispatch contract. Default.

    INVERTED: Reject when the return tags are equal, accept when they differ.
              Reproduces the legacy CallVirt behaviour, for compatibility only.

    IGNORE: Accept on name and parameters alone.
            Use when implementations carry no (or looser) return annotations.
    """

    EXACT = auto()
    INVERTED = auto()
    IGNORE = auto()

    def accepts(self, requested: Signature, candidate: Signature) -> bool:
        """Check the candidate's return tag against the requested one."""
        same = requested.returns == candidate.returns
        match self:
            case ReturnCheck.EXACT:
                return same
            case ReturnCheck.INVERTED:
                return not same
            case ReturnCheck.IGNORE:
                return True


# Singleton instances for convenience
EXACT = ReturnCheck.EXACT
INVERTED = ReturnCheck.INVERTED
IGNORE = ReturnCheck.IGNORE


# ═══════════════════════════════════════════════════════════════════════════════
# Policy — Full Configuration
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Policy:
    """
    Dispatch policy configuration.

    Example:
        policy = Policy().with_returns(IGNORE)

    Note: Immutable — each method returns new Policy.
    """

    returns: ReturnCheck = ReturnCheck.EXACT

    def with_returns(self, check: ReturnCheck) -> Policy:
        """Set return-type acceptance."""
        return Policy(returns=check)


__all__ = (
    "ReturnCheck",
    "EXACT",
    "INVERTED",
    "IGNORE",
    "Policy",
)
