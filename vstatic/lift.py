"""
Lift — lazy / async dispatch into kungfu monads.

Builds on combinators.lift for the catching variant.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from kungfu import LazyCoroResult, Result, Ok, Error
from combinators.lift import catching_async

from vstatic._errors import DispatchError
from vstatic._types import Resolution

if TYPE_CHECKING:
    from vstatic._dispatch import Dispatcher


async def _invoke(resolution: Resolution, args: tuple[Any, ...]) -> Any:
    value = resolution.operation(*args)
    if inspect.isawaitable(value):
        value = await value
    return value


# ═══════════════════════════════════════════════════════════════════════════════
# lazy() — Deferred Dispatch
# ═══════════════════════════════════════════════════════════════════════════════


def lazy(
    dispatcher: Dispatcher[Any],
    sub: Any,
    source: object,
    *args: Any,
) -> LazyCoroResult[Any, DispatchError]:
    """
    Resolve and invoke when awaited.

    Dispatch failures become Error(DispatchError). Awaitable results are
    awaited. Failures raised by the implementation propagate.

    Example:
        result = await V.lift.lazy(loaders, CsvLoader, Loader.load, path)
    """

    async def execute() -> Result[Any, DispatchError]:
        match dispatcher.resolve(sub, source):
            case Ok(resolution):
                return Ok(await _invoke(resolution, args))
            case Error(e):
                return Error(e)

    return LazyCoroResult(execute)


# ═══════════════════════════════════════════════════════════════════════════════
# lazy_catching() — Deferred Dispatch, All Failures Mapped
# ═══════════════════════════════════════════════════════════════════════════════


def lazy_catching[E](
    dispatcher: Dispatcher[Any],
    sub: Any,
    source: object,
    *args: Any,
    on_error: Callable[[Exception], E],
) -> LazyCoroResult[Any, E]:
    """
    Like lazy(), but implementation failures are caught too.

    Both dispatch errors and implementation failures go through `on_error`.

    Example:
        result = await V.lift.lazy_catching(
            loaders, CsvLoader, Loader.load, path,
            on_error=lambda e: LoadFailed(str(e)),
        )
    """

    async def do_call() -> Any:
        return await _invoke(dispatcher.find(sub, source), args)

    return catching_async(do_call, on_error=on_error)


# ═══════════════════════════════════════════════════════════════════════════════
# from_resolution() — Lift A Found Operation
# ═══════════════════════════════════════════════════════════════════════════════


def from_resolution(resolution: Resolution, *args: Any) -> LazyCoroResult[Any, DispatchError]:
    """Lift an already resolved operation into LazyCoroResult."""

    async def execute() -> Result[Any, DispatchError]:
        return Ok(await _invoke(resolution, args))

    return LazyCoroResult(execute)


__all__ = (
    "lazy",
    "lazy_catching",
    "from_resolution",
)
