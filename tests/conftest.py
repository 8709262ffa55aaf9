"""Shared pytest fixtures for vstatic tests."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from vstatic import TypeNode


@dataclass(frozen=True)
class NodeChain:
    """A <- B <- C explicit nodes, plus an unrelated D and a Top above A."""

    top: TypeNode
    a: TypeNode
    b: TypeNode
    c: TypeNode
    d: TypeNode


@pytest.fixture
def nodes() -> NodeChain:
    top = TypeNode("Top")
    a = top.child("A")
    b = a.child("B")
    c = b.child("C")
    d = TypeNode("D")

    top.register("wave", (int,), str, lambda times: "Top.wave" * times)
    a.register("greet", (str,), str, lambda name: f"A.greet({name})")
    c.register("greet", (str,), str, lambda name: f"C.greet({name})")
    d.register("greet", (str,), str, lambda name: f"D.greet({name})")
    return NodeChain(top=top, a=a, b=b, c=c, d=d)
