"""Effect Monad

Deferred computation (IO) with two execution tracks:

- sync:  map / chain / catch / fold / run
- async: map_async / chain_async / catch_async / fold_async / run_async

Works with computations returning plain values as well as simple containers.
Before every step the unwrap rule applies:

- halting container (Fail / Nothing) -> propagated, next step never runs
- continuing container (Success / Just) -> its payload feeds the next step
- plain value -> feeds the next step as-is

Example:
    Effect.of(lambda: Success.of(5)).map(lambda x: Just.of(x + 3)).run()  # 8
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Awaitable, Callable

from .._errors import MonadError
from .._helpers import (
    identity,
    is_halt,
    is_simple,
    panic_if_not_callable,
    panic_on_awaitable,
    panic_on_foreign_lazy,
    panic_on_lazy,
    panic_unless_same_kind,
    resolve,
    unwrap,
)
from .._types import Handler, Thunk
from ..base import LazyMonad

log = logging.getLogger(__name__)


class Effect[T](LazyMonad[typing.Any]):
    """
    Lazy effect over a zero-argument computation.

    Every map/chain/catch builds a new Effect around a newly composed
    computation; the receiver is never mutated. Nothing runs before
    ``run()`` / ``run_async()`` / ``await``.

    Mixing tracks: a sync-track operation that meets an awaitable raises
    ``MonadError`` instead of leaking a pending value. The async track
    awaits whatever is awaitable and accepts plain values too.
    """

    __slots__ = ()

    def __init__(self, effect: Thunk[T], /) -> None:
        panic_if_not_callable(effect, "Effect.__init__")
        super().__init__(effect)

    @classmethod
    def of[V](cls, effect: Thunk[V], /) -> Effect[V]:
        panic_if_not_callable(effect, "Effect.of")
        return cls(effect)

    @classmethod
    def pure[V](cls, value: V, /) -> Effect[V]:
        """Lift a value: the computation simply returns it."""
        return cls(lambda: value)

    def _pull(self, method: str) -> typing.Any:
        out = self._value()
        panic_on_awaitable(out, method)
        return out

    # Functor operations

    def map[U](self, f: Callable[[typing.Any], U], /) -> Effect[U]:
        """
        Apply ``f`` to the unwrapped result.

        ``f`` may return a plain value or a simple container (a continuing
        one is unwrapped once more, a halting one is kept for the next step).

        Raises (on run):
            MonadError: ``f`` returned a lazy container or an awaitable
        """

        def effect() -> typing.Any:
            out = self._pull("Effect.map")
            if is_halt(out):
                return out
            res = f(unwrap(out))
            panic_on_awaitable(res, "Effect.map")
            panic_on_lazy(res, "Effect.map")
            return unwrap(res)

        return type(self)(effect)

    def map_async[U](self, f: Callable[[typing.Any], U | Awaitable[U]], /) -> Effect[U]:
        """Async map: awaits the current computation and ``f``'s result."""

        async def effect() -> typing.Any:
            out = await resolve(self._value())
            if is_halt(out):
                return out
            res = await resolve(f(unwrap(out)))
            panic_on_lazy(res, "Effect.map_async")
            return unwrap(res)

        return type(self)(effect)

    # Monad operations

    def chain[U](self, f: Callable[[typing.Any], Effect[U]], /) -> Effect[U]:
        """
        Monadic bind (>>=).

        ``f`` must return an Effect of the same kind. Its computation runs
        right away and a continuing container result is unwrapped.
        """
        kind = type(self)

        def effect() -> typing.Any:
            out = self._pull("Effect.chain")
            if is_halt(out):
                return out
            nxt = f(unwrap(out))
            panic_on_awaitable(nxt, "Effect.chain")
            panic_unless_same_kind(nxt, kind, "Effect.chain")
            return unwrap(nxt._pull("Effect.chain"))

        return kind(effect)

    def chain_async[U](self, f: Callable[[typing.Any], Effect[U] | Awaitable[Effect[U]]], /) -> Effect[U]:
        """Async bind: ``f`` may be a coroutine function resolving to an Effect."""
        kind = type(self)

        async def effect() -> typing.Any:
            out = await resolve(self._value())
            if is_halt(out):
                return out
            nxt = await resolve(f(unwrap(out)))
            panic_unless_same_kind(nxt, kind, "Effect.chain_async")
            return unwrap(await resolve(nxt._value()))

        return kind(effect)

    # Recovery

    def catch(self, f: Callable[[Exception], typing.Any], /) -> Effect[typing.Any]:
        """
        Recover from an ordinary exception raised by the computation (SYNC).

        ``f(exc)`` may return a plain value, a simple container (continuing
        ones are unwrapped) or an Effect of the same kind, whose computation
        is run and used. ``MonadError`` is never handed to ``f``.
        """
        kind = type(self)

        def effect() -> typing.Any:
            try:
                return self._pull("Effect.catch")
            except MonadError:
                raise
            except Exception as exc:
                log.debug("Effect.catch recovering from %r", exc)
                res = f(exc)
                panic_on_awaitable(res, "Effect.catch")
                panic_on_foreign_lazy(res, kind, "Effect.catch")
                if isinstance(res, kind):
                    return res._pull("Effect.catch")
                return unwrap(res)

        return kind(effect)

    def catch_async(self, f: Callable[[Exception], typing.Any], /) -> Effect[typing.Any]:
        """Recover from an ordinary exception (ASYNC). ``f`` may be a coroutine function."""
        kind = type(self)

        async def effect() -> typing.Any:
            try:
                return await resolve(self._value())
            except MonadError:
                raise
            except Exception as exc:
                log.debug("Effect.catch_async recovering from %r", exc)
                res = await resolve(f(exc))
                panic_on_foreign_lazy(res, kind, "Effect.catch_async")
                if isinstance(res, kind):
                    return await resolve(res._value())
                return unwrap(res)

        return kind(effect)

    # Elimination

    def fold[R](
        self,
        *,
        on_right: Callable[[typing.Any], R] = identity,
        on_halt: Callable[[typing.Any], R] = identity,
        on_value: Callable[[typing.Any], R] = identity,
    ) -> R:
        """
        Run and dispatch on the shape of the result.

        - on_right: continuing simple container, gets its payload
        - on_halt: halting simple container, gets its payload
        - on_value: plain value

        Missing handlers default to identity.
        """
        res = self._pull("Effect.fold")
        panic_on_lazy(res, "Effect.fold")
        if is_simple(res):
            out = res.fold(on_right, on_halt)
        else:
            out = on_value(res)
        panic_on_awaitable(out, "Effect.fold")
        return out

    async def fold_async[R](
        self,
        *,
        on_right: Handler[typing.Any, R] = identity,
        on_halt: Handler[typing.Any, R] = identity,
        on_value: Handler[typing.Any, R] = identity,
    ) -> R:
        """Async fold: handlers may be coroutine functions."""
        res = await resolve(self._value())
        panic_on_lazy(res, "Effect.fold_async")
        if is_simple(res):
            return await resolve(res.fold(on_right, on_halt))
        return await resolve(on_value(res))

    def run(self) -> typing.Any:
        """Execute and return the raw result.

        Raises:
            MonadError: if the computation is actually asynchronous
        """
        return self._pull("Effect.run")

    async def run_async(self) -> typing.Any:
        """Execute, awaiting the computation if needed."""
        return await resolve(self._value())

    # Protocol methods

    def __await__(self) -> typing.Generator[typing.Any, None, typing.Any]:
        """Allow direct await on the effect."""
        return self.run_async().__await__()

    def __repr__(self) -> str:
        return f"Effect({self._value!r})"


__all__ = ("Effect",)
