"""Tests for lazy / async dispatch."""

import asyncio

import pytest

import vstatic as V
from vstatic import InvalidHierarchy, NoSuchOperation
from vstatic import lift as L
from tests._support import A, C, D, Boom, Leaf, Root, farewell, unwrap_error, unwrap_ok


class Loader:
    @staticmethod
    async def load(path: str) -> str:
        await asyncio.sleep(0)
        return f"raw:{path}"


class CsvLoader(Loader):
    @staticmethod
    async def load(path: str) -> str:
        await asyncio.sleep(0)
        return f"csv:{path}"


class BrokenLoader(Loader):
    @staticmethod
    async def load(path: str) -> str:
        raise Boom(path)


def run(awaitable):
    async def main():
        return await awaitable

    return asyncio.run(main())


def test_lazy_sync_implementation():
    result = run(L.lazy(V.virtual(A).build(), C, A.greet, "x"))
    assert unwrap_ok(result) == "C.greet(x)"


def test_lazy_awaits_async_implementation():
    loaders = V.virtual(Loader).build()
    assert unwrap_ok(run(loaders.lazy(CsvLoader, Loader.load, "a.csv"))) == "csv:a.csv"


def test_lazy_is_deferred_until_awaited():
    calls = []

    class Probe:
        @staticmethod
        def touch(tag: str) -> str:
            calls.append(tag)
            return tag

    pending = L.lazy(V.virtual(Probe).build(), Probe, Probe.touch, "t")
    assert calls == []
    assert unwrap_ok(run(pending)) == "t"
    assert calls == ["t"]


def test_lazy_dispatch_errors_become_error():
    greeters = V.virtual(A).build()
    assert isinstance(unwrap_error(run(greeters.lazy(D, A.greet, "x"))), InvalidHierarchy)
    assert isinstance(unwrap_error(run(greeters.lazy(C, farewell, "x"))), NoSuchOperation)


def test_lazy_implementation_failure_propagates():
    loaders = V.virtual(Loader).build()
    with pytest.raises(Boom):
        run(loaders.lazy(BrokenLoader, Loader.load, "x"))


def test_lazy_catching_maps_every_failure():
    loaders = V.virtual(Loader).build()

    def on_error(e: Exception) -> str:
        return type(e).__name__

    broken = run(L.lazy_catching(loaders, BrokenLoader, Loader.load, "x", on_error=on_error))
    assert unwrap_error(broken) == "Boom"

    invalid = run(L.lazy_catching(loaders, Root, Loader.load, "x", on_error=on_error))
    assert unwrap_error(invalid) == "InvalidHierarchy"

    ok = run(L.lazy_catching(loaders, CsvLoader, Loader.load, "y", on_error=on_error))
    assert unwrap_ok(ok) == "csv:y"


def test_from_resolution():
    resolution = V.virtual(Root).build().find(Leaf, Root.echo)
    assert unwrap_ok(run(L.from_resolution(resolution, 5))) == 5
