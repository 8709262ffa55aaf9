"""Tests for signature extraction."""

from typing import Any

import pytest

from vstatic import Signature, signature_of
from tests._support import A, Root


def test_annotated_function():
    def greet(name: str) -> str:
        return name

    assert signature_of(greet) == Signature("greet", (str,), str)


def test_staticmethod_accessed_through_class_and_raw_object():
    assert signature_of(A.greet) == Signature("greet", (str,), str)
    assert signature_of(vars(A)["greet"]) == Signature("greet", (str,), str)


def test_classmethod_object_is_unwrapped():
    sig = signature_of(vars(Root)["build"])
    assert sig.name == "build"
    assert sig.returns is str


def test_missing_annotations_are_any():
    def ping(x, y: int):
        return x

    assert signature_of(ping) == Signature("ping", (Any, int), Any)


def test_none_return_is_nonetype():
    def reset() -> None:
        return None

    assert signature_of(reset).returns is type(None)


def test_var_arguments_are_skipped():
    def log(level: int, *parts: str, **extra: object) -> None:
        return None

    assert signature_of(log).params == (int,)


def test_keyword_only_parameters_keep_order():
    def scale(value: float, *, factor: int) -> float:
        return value * factor

    assert signature_of(scale).params == (float, int)


def test_unresolvable_forward_reference_keeps_annotation_text():
    def load(path: "Nope") -> "Nope":  # noqa: F821
        return path

    assert signature_of(load) == Signature("load", ("Nope",), "Nope")


def test_forward_references_resolve_one_at_a_time():
    def load(path: "str", mode: "Nope") -> "str":  # noqa: F821
        return path

    assert signature_of(load) == Signature("load", (str, "Nope"), str)


def test_signature_passes_through():
    sig = Signature("area", ("shape",), "float")
    assert signature_of(sig) is sig


def test_name_override():
    def impl(x: int) -> int:
        return x

    assert signature_of(impl, name="double").name == "double"


def test_non_callable_raises_type_error():
    with pytest.raises(TypeError):
        signature_of(42)


def test_equality_is_order_sensitive():
    assert Signature("f", (int, str), int) != Signature("f", (str, int), int)
    assert Signature("f", (int, str), int) == Signature("f", (int, str), int)


def test_key_excludes_return():
    assert Signature("f", (int,), int).key == Signature("f", (int,), str).key == ("f", (int,))


def test_str_is_readable():
    assert str(Signature("greet", (str,), str)) == "greet(str) -> str"
