"""
Signature extraction — callable → Signature.
"""

from __future__ import annotations

import inspect
import typing
from collections.abc import Callable
from typing import Any

from vstatic._types import Signature, TypeKey

_SKIPPED_KINDS = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


def _resolve_one(annotation: object, globalns: dict[str, Any]) -> object:
    if not isinstance(annotation, str):
        return annotation
    try:
        return eval(annotation, globalns)
    except NameError:
        # Unresolvable forward reference: compare by the annotation text instead.
        return annotation


def _hints(fn: Callable[..., Any]) -> dict[str, Any]:
    try:
        return typing.get_type_hints(fn)
    except NameError:
        globalns = getattr(fn, "__globals__", {})
        return {
            key: _resolve_one(annotation, globalns)
            for key, annotation in getattr(fn, "__annotations__", {}).items()
        }


def _tag(annotation: object) -> TypeKey:
    if annotation is inspect.Parameter.empty:
        return Any
    if annotation is None:
        return type(None)
    return annotation  # type: ignore[return-value]


def signature_of(source: object, *, name: str | None = None) -> Signature:
    """
    Extract the signature searched for by a dispatch.

    Accepts a `Signature` (returned as is), a `staticmethod` / `classmethod`
    object, or any callable. Parameters are taken in declaration order,
    `*args` / `**kwargs` excluded. Missing annotations are tagged `Any`;
    an unresolvable forward reference keeps its text, the others resolve.

    Example:
        def greet(name: str) -> str: ...

        signature_of(greet)  # Signature("greet", (str,), str)
    """
    if isinstance(source, Signature):
        return source
    if isinstance(source, (staticmethod, classmethod)):
        source = source.__func__
    if not callable(source):
        raise TypeError(f"Cannot extract a signature from {source!r}")

    fn = typing.cast(Callable[..., Any], source)
    hints = _hints(fn)
    params = tuple(
        _tag(hints.get(p.name, p.annotation))
        for p in inspect.signature(fn).parameters.values()
        if p.kind not in _SKIPPED_KINDS
    )
    returns = _tag(hints.get("return", inspect.Parameter.empty))

    op_name = name if name is not None else getattr(fn, "__name__", None)
    if not op_name:
        raise TypeError(f"Cannot name an operation from {source!r}")
    return Signature(op_name, params, returns)


__all__ = ("signature_of",)
