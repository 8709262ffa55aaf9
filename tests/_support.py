"""Shared hierarchies and Result helpers for vstatic tests."""

import pytest

from vstatic import Ok, Error


class Boom(Exception):
    """Raised by implementations under test."""


SENTINEL = object()


# A <- B <- C, C overrides greet, B declares nothing.
class A:
    @staticmethod
    def greet(name: str) -> str:
        return f"A.greet({name})"

    @staticmethod
    def size() -> int:
        return 1


class B(A):
    pass


class C(B):
    @staticmethod
    def greet(name: str) -> str:
        return f"C.greet({name})"


# Not related to A.
class D:
    @staticmethod
    def greet(name: str) -> str:
        return f"D.greet({name})"


# Top <- Root <- Mid <- Leaf, Top sits above the ceiling Root.
class Top:
    @staticmethod
    def wave(times: int) -> str:
        return "Top.wave" * times


class Root(Top):
    @staticmethod
    def fail(reason: str) -> object:
        raise Boom(reason)

    @staticmethod
    def echo(value: object) -> object:
        return value

    @classmethod
    def build(cls) -> str:
        return cls.__name__


class Mid(Root):
    pass


class Leaf(Mid):
    @staticmethod
    def sentinel() -> object:
        return SENTINEL


def farewell(name: str) -> str:
    raise AssertionError("signature source only")


def unwrap_ok(result):
    match result:
        case Ok(value):
            return value
        case _:
            pytest.fail(f"expected Ok, got {result!r}")


def unwrap_error(result):
    match result:
        case Error(e):
            return e
        case _:
            pytest.fail(f"expected Error, got {result!r}")
