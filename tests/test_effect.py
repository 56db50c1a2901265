"""Effect: sync track."""

from __future__ import annotations

import pytest

from monads import Effect, Fail, Just, MonadError, Nothing, State, Success

from tests.helpers import Boom, Spy, explode


def test_unwrap_pipeline() -> None:
    effect = (
        Effect.of(lambda: Success.of(5))
        .map(lambda x: Just.of(x + 3))
        .chain(lambda x: Effect.of(lambda: x * 2))
    )
    assert effect.run() == 16


def test_nothing_runs_before_run(spy: Spy) -> None:
    spy.returns = 1
    effect = Effect.of(spy).map(lambda x: x + 1)
    assert not spy.called
    assert effect.run() == 2
    assert spy.calls == [None]


def test_each_run_re_executes(spy: Spy) -> None:
    spy.returns = 1
    effect = Effect.of(spy)
    effect.run()
    effect.run()
    assert len(spy.calls) == 2


def test_derived_effects_are_independent() -> None:
    base = Effect.pure(10)
    plus = base.map(lambda x: x + 1)
    times = base.map(lambda x: x * 2)
    assert (base.run(), plus.run(), times.run()) == (10, 11, 20)


def test_pure() -> None:
    assert Effect.pure(Success.of(1)).run() == Success(1)


@pytest.mark.parametrize("bad", [5, None, Success.of(1)])
def test_requires_callable(bad: object) -> None:
    with pytest.raises(MonadError, match="requires a function inside"):
        Effect.of(bad)
    with pytest.raises(MonadError):
        Effect(bad)


class TestShortCircuit:
    def test_halting_source_skips_steps(self, spy: Spy) -> None:
        effect = Effect.of(lambda: Fail.of("e")).map(spy).chain(spy)
        assert effect.run() == Fail("e")
        assert not spy.called

    def test_halting_step_result_is_kept(self, spy: Spy) -> None:
        effect = Effect.pure(1).map(lambda _: Nothing()).map(spy)
        assert effect.run() == Nothing()
        assert not spy.called

    def test_halting_from_inner_effect(self, spy: Spy) -> None:
        effect = Effect.pure(1).chain(lambda _: Effect.of(lambda: Fail.of("bad"))).map(spy)
        assert effect.run() == Fail("bad")
        assert not spy.called


class TestMap:
    def test_plain_result(self) -> None:
        assert Effect.pure(2).map(lambda x: x * 5).run() == 10

    def test_continuing_result_is_unwrapped(self) -> None:
        assert Effect.pure(2).map(lambda x: Success.of(x)).run() == 2

    def test_lazy_result_is_rejected(self) -> None:
        effect = Effect.pure(1).map(lambda x: Effect.pure(x))
        with pytest.raises(MonadError, match="must NOT be a lazy container"):
            effect.run()

    def test_async_function_is_rejected(self) -> None:
        async def step(x: int) -> int:
            return x

        with pytest.raises(MonadError, match="async analog"):
            Effect.pure(1).map(step).run()


class TestChain:
    def test_requires_effect(self) -> None:
        with pytest.raises(MonadError, match="same type of lazy container"):
            Effect.pure(1).chain(lambda x: x).run()

    def test_rejects_state(self) -> None:
        with pytest.raises(MonadError):
            Effect.pure(1).chain(lambda x: State.pure(x)).run()

    def test_rejects_simple_container(self) -> None:
        with pytest.raises(MonadError):
            Effect.pure(1).chain(lambda x: Success.of(x)).run()

    def test_inner_continuing_result_is_unwrapped(self) -> None:
        assert Effect.pure(1).chain(lambda x: Effect.pure(Just.of(x + 1))).run() == 2


class TestCatch:
    def test_plain_recovery(self) -> None:
        assert Effect.of(explode).catch(lambda exc: str(exc)).run() == "boom"

    def test_handler_gets_exception(self, spy: Spy) -> None:
        Effect.of(explode).catch(spy).run()
        assert isinstance(spy.calls[0], Boom)

    def test_no_exception_skips_handler(self, spy: Spy) -> None:
        assert Effect.pure(3).catch(spy).run() == 3
        assert not spy.called

    def test_simple_container_recovery_is_unwrapped(self) -> None:
        assert Effect.of(explode).catch(lambda _: Success.of(7)).run() == 7
        assert Effect.of(explode).catch(lambda _: Fail.of("x")).run() == Fail("x")

    def test_effect_recovery_is_run(self) -> None:
        assert Effect.of(explode).catch(lambda _: Effect.pure(9)).run() == 9

    def test_foreign_lazy_recovery_is_rejected(self) -> None:
        with pytest.raises(MonadError):
            Effect.of(explode).catch(lambda _: State.pure(1)).run()

    def test_monad_error_is_never_caught(self, spy: Spy) -> None:
        effect = Effect.pure(1).map(lambda x: Effect.pure(x)).catch(spy)
        with pytest.raises(MonadError):
            effect.run()
        assert not spy.called

    def test_recovery_continues_pipeline(self) -> None:
        effect = Effect.of(explode).catch(lambda _: 1).map(lambda x: x + 1)
        assert effect.run() == 2


class TestFold:
    def test_plain_value(self) -> None:
        assert Effect.pure(2).fold(on_value=lambda x: x * 10) == 20

    def test_continuing(self) -> None:
        assert Effect.pure(Success.of(2)).fold(on_right=lambda x: x + 1, on_value=lambda x: "plain") == 3

    def test_halting(self) -> None:
        assert Effect.pure(Fail.of("e")).fold(on_halt=lambda e: f"err:{e}") == "err:e"

    def test_defaults_to_identity(self) -> None:
        assert Effect.pure(Just.of(4)).fold() == 4
        assert Effect.pure(Nothing()).fold() is None
        assert Effect.pure("v").fold() == "v"

    def test_lazy_result_is_rejected(self) -> None:
        with pytest.raises(MonadError):
            Effect.pure(Effect.pure(1)).fold()


class TestSyncOnAsync:
    def test_run_rejects_coroutine_thunk(self) -> None:
        async def fetch() -> int:
            return 1

        with pytest.raises(MonadError, match="Effect.run"):
            Effect.of(fetch).run()

    def test_fold_rejects_coroutine_thunk(self) -> None:
        async def fetch() -> int:
            return 1

        with pytest.raises(MonadError):
            Effect.of(fetch).fold()

    def test_catch_does_not_hide_track_mixing(self, spy: Spy) -> None:
        async def fetch() -> int:
            return 1

        with pytest.raises(MonadError):
            Effect.of(fetch).catch(spy).run()
        assert not spy.called


def test_repr() -> None:
    assert repr(Effect.pure(1)).startswith("Effect(")
