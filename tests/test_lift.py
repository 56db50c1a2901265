"""Lift helpers: kungfu interop and deferred calls."""

from __future__ import annotations

import pytest
from kungfu import Error, LazyCoroResult, Ok, Some
from kungfu import Nothing as KNothing

from monads import Effect, Fail, Just, MonadError, Nothing, Success
from monads import lift as L

from tests.helpers import Boom, Spy, explode


class TestUp:
    def test_from_result(self) -> None:
        assert L.up.from_result(Ok(1)) == Success(1)
        assert L.up.from_result(Error("no")) == Fail("no")

    @pytest.mark.parametrize("bad", [1, None, Some(1), Success.of(1)])
    def test_from_result_rejects_other_values(self, bad: object) -> None:
        with pytest.raises(MonadError, match="lift.up.from_result - expected kungfu Result"):
            L.up.from_result(bad)

    @pytest.mark.parametrize("bad", [5, None, Ok(1), Just.of(1)])
    def test_from_option_rejects_other_values(self, bad: object) -> None:
        with pytest.raises(MonadError, match="lift.up.from_option - expected kungfu Option"):
            L.up.from_option(bad)

    def test_from_option(self) -> None:
        assert L.up.from_option(Some(3)) == Just(3)
        assert L.up.from_option(KNothing()) == Nothing()

    def test_optional(self) -> None:
        assert L.optional(None) == Nothing()
        assert L.optional("", is_empty=lambda s: not s) == Nothing()
        assert L.optional(0) == Just(0)

    def test_catching(self) -> None:
        assert L.catching(lambda: 2) == Success(2)
        assert L.catching(explode).is_fail()

    def test_pure_and_fail(self) -> None:
        assert L.pure(5).run() == 5
        assert L.fail("e") == Fail("e")

    @pytest.mark.asyncio
    async def test_from_lazy_coro_result(self) -> None:
        effect = L.up.from_lazy_coro_result(LazyCoroResult.pure(5))
        assert await effect.run_async() == Success(5)
        assert await effect.map_async(lambda x: x + 1).run_async() == 6


class TestDown:
    def test_to_result(self) -> None:
        ok = L.down.to_result(Success.of(1))
        assert isinstance(ok, Ok)
        assert ok.unwrap() == 1

        match L.down.to_result(Nothing()):
            case Error(err):
                assert err is None
            case other:
                pytest.fail(f"expected Error, got {other!r}")

    def test_to_option(self) -> None:
        some = L.down.to_option(Just.of("x"))
        assert isinstance(some, Some)
        assert some.unwrap() == "x"
        assert isinstance(L.down.to_option(Fail.of("e")), KNothing)

    def test_unsafe_and_or_else(self) -> None:
        assert L.unsafe(Success.of(1)) == 1
        assert L.or_else(Nothing(), 0) == 0
        with pytest.raises(MonadError):
            L.unsafe(Fail.of("e"))

    def test_requires_simple_container(self) -> None:
        with pytest.raises(MonadError):
            L.down.to_result(Effect.pure(1))

    @pytest.mark.asyncio
    async def test_to_lazy_coro_result(self) -> None:
        ok = await L.down.to_lazy_coro_result(Effect.pure(Success.of(1)))
        assert isinstance(ok, Ok)
        assert ok.unwrap() == 1

        plain = await L.down.to_lazy_coro_result(Effect.pure(2))
        assert plain.unwrap() == 2

        match await L.down.to_lazy_coro_result(Effect.pure(Fail.of("e"))):
            case Error(err):
                assert err == "e"
            case other:
                pytest.fail(f"expected Error, got {other!r}")


class TestCall:
    def test_call_is_deferred(self, spy: Spy) -> None:
        spy.returns = 3
        effect = L.call(spy, "arg")
        assert not spy.called
        assert effect.map(lambda x: x * 2).run() == 6
        assert spy.calls == ["arg"]

    def test_lifted_decorator(self) -> None:
        @L.lifted
        def total(*numbers: int) -> int:
            return sum(numbers)

        assert total.__name__ == "total"
        assert isinstance(total(1, 2), Effect)
        assert total(1, 2).run() == 3

    def test_lifted_exceptions_surface_on_run(self) -> None:
        @L.lifted
        def broken() -> int:
            raise Boom("down")

        effect = broken()
        with pytest.raises(Boom):
            effect.run()
        assert effect.catch(lambda _: 0).run() == 0

    @pytest.mark.asyncio
    async def test_call_coroutine_function(self) -> None:
        async def fetch(x: int) -> int:
            return x + 1

        assert await L.call(fetch, 1).run_async() == 2

    def test_wrap(self) -> None:
        assert L.wrap(lambda: "v").run() == "v"
