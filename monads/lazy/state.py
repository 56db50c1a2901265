"""State Monad

Threads a state through transitions ``state -> (value, next_state)``.
Sync and async transitions are both possible, mirrored the same way as in
Effect (map / map_async, chain / chain_async, ...).

Unlike Effect, State never unwraps simple containers: values flowing
through a state thread are always plain.

Example:
    counter = State.get().chain(lambda n: State.put(n + 1)).map(lambda _: "ticked")
    counter.run(41)  # ("ticked", 42)
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Awaitable, Callable
from typing import Literal

from .._errors import MonadError
from .._helpers import (
    panic_if_not_callable,
    panic_on_awaitable,
    panic_on_container,
    panic_on_foreign_lazy,
    panic_unless_pair,
    panic_unless_same_kind,
    resolve,
)
from .._types import Pair, Transition
from ..base import LazyMonad

log = logging.getLogger(__name__)

# Queued step kind for chain_iter / map_iter
type IterKind = Literal["chain", "map"]


class State[V, S](LazyMonad[typing.Any]):
    """
    Lazy state transition.

    map/chain/catch return a brand-new State. The one sanctioned mutation is
    the private queue filled by ``chain_iter`` / ``map_iter``: it belongs to
    this instance only and is never seen by States derived from it.
    """

    __slots__ = ("_iter_store",)

    def __init__(self, run_state: Transition[V, S], /) -> None:
        panic_if_not_callable(run_state, "State.__init__")
        super().__init__(run_state)
        self._iter_store: list[tuple[Callable[[typing.Any], typing.Any], IterKind]] = []

    @classmethod
    def of[A, B](cls, run_state: Transition[A, B], /) -> State[A, B]:
        panic_if_not_callable(run_state, "State.of")
        return cls(run_state)

    @classmethod
    def pure[A](cls, value: A, /) -> State[A, typing.Any]:
        """Transition returning ``(value, state)`` with the state unchanged."""
        return cls(lambda state: (value, state))

    @classmethod
    def get(cls) -> State[typing.Any, typing.Any]:
        """Transition exposing the state as the value: ``(state, state)``."""
        return cls(lambda state: (state, state))

    @classmethod
    def put[B](cls, new_state: B, /) -> State[None, B]:
        """Transition replacing the state regardless of input: ``(None, new_state)``."""
        return cls(lambda _: (None, new_state))

    def _transit(self, state: typing.Any, method: str) -> Pair[typing.Any, typing.Any]:
        pair = self._value(state)
        panic_on_awaitable(pair, method)
        return panic_unless_pair(pair, method)

    async def _transit_async(self, state: typing.Any, method: str) -> Pair[typing.Any, typing.Any]:
        pair = await resolve(self._value(state))
        return panic_unless_pair(pair, method)

    # Functor operations

    def map[U](self, f: Callable[[V], U], /) -> State[U, S]:
        """Apply ``f`` to the value only; the next state is kept. ``f`` must NOT return a container."""

        def run_state(state: S) -> Pair[U, S]:
            value, next_state = self._transit(state, "State.map")
            res = f(value)
            panic_on_awaitable(res, "State.map")
            panic_on_container(res, "State.map")
            return res, next_state

        return type(self)(run_state)

    def map_async[U](self, f: Callable[[V], U | Awaitable[U]], /) -> State[U, S]:
        async def run_state(state: S) -> Pair[U, S]:
            value, next_state = await self._transit_async(state, "State.map_async")
            res = await resolve(f(value))
            panic_on_container(res, "State.map_async")
            return res, next_state

        return type(self)(run_state)

    # Monad operations

    def chain[U](self, f: Callable[[V], State[U, S]], /) -> State[U, S]:
        """
        Monadic bind (>>=).

        ``f(value)`` must return a State; its transition runs on the next
        state and that pair is the result.
        """
        kind = type(self)

        def run_state(state: S) -> Pair[U, S]:
            value, next_state = self._transit(state, "State.chain")
            nxt = f(value)
            panic_on_awaitable(nxt, "State.chain")
            panic_unless_same_kind(nxt, kind, "State.chain")
            return nxt._transit(next_state, "State.chain")

        return kind(run_state)

    def chain_async[U](self, f: Callable[[V], State[U, S] | Awaitable[State[U, S]]], /) -> State[U, S]:
        kind = type(self)

        async def run_state(state: S) -> Pair[U, S]:
            value, next_state = await self._transit_async(state, "State.chain_async")
            nxt = await resolve(f(value))
            panic_unless_same_kind(nxt, kind, "State.chain_async")
            return await nxt._transit_async(next_state, "State.chain_async")

        return kind(run_state)

    # Recovery

    def catch(self, f: Callable[[S], typing.Any], /) -> State[typing.Any, S]:
        """
        Recover from an ordinary exception (SYNC).

        ``f`` gets the ORIGINAL input state and returns either a
        ``(value, state)`` pair or a State of the same kind, which is run on
        that original state. ``MonadError`` is re-raised untouched.
        """
        kind = type(self)

        def run_state(state: S) -> Pair[typing.Any, typing.Any]:
            try:
                return self._transit(state, "State.catch")
            except MonadError:
                raise
            except Exception as exc:
                log.debug("State.catch recovering from %r", exc)
                res = f(state)
                panic_on_awaitable(res, "State.catch")
                panic_on_foreign_lazy(res, kind, "State.catch")
                if isinstance(res, kind):
                    return res._transit(state, "State.catch")
                return panic_unless_pair(res, "State.catch")

        return kind(run_state)

    def catch_async(self, f: Callable[[S], typing.Any], /) -> State[typing.Any, S]:
        """Recover from an ordinary exception (ASYNC). ``f`` may be a coroutine function."""
        kind = type(self)

        async def run_state(state: S) -> Pair[typing.Any, typing.Any]:
            try:
                return await self._transit_async(state, "State.catch_async")
            except MonadError:
                raise
            except Exception as exc:
                log.debug("State.catch_async recovering from %r", exc)
                res = await resolve(f(state))
                panic_on_foreign_lazy(res, kind, "State.catch_async")
                if isinstance(res, kind):
                    return await res._transit_async(state, "State.catch_async")
                return panic_unless_pair(res, "State.catch_async")

        return kind(run_state)

    # Elimination

    def run(self, state: S, /) -> Pair[V, S]:
        """Run the transition once on ``state``.

        Raises:
            MonadError: if the transition is actually asynchronous
        """
        return self._transit(state, "State.run")

    async def run_async(self, state: S, /) -> Pair[V, S]:
        return await self._transit_async(state, "State.run_async")

    def fold(self, state: S, /) -> Pair[V, S]:
        """Same as ``run``. Kept for interface parity with Effect."""
        return self._transit(state, "State.fold")

    async def fold_async(self, state: S, /) -> Pair[V, S]:
        """Same as ``run_async``. Kept for interface parity with Effect."""
        return await self._transit_async(state, "State.fold_async")

    # Iterative batch mode

    def chain_iter(self, f: Callable[[typing.Any], State[typing.Any, typing.Any]], /) -> typing.Self:
        """
        Queue ``f`` with chain semantics for ``run_iter``.

        NOTE: returns the SAME instance; the step is folded into its private
        queue instead of building a new State. Sync functions only.
        """
        self._iter_store.append((f, "chain"))
        return self

    def map_iter(self, f: Callable[[typing.Any], typing.Any], /) -> typing.Self:
        """Queue ``f`` with map semantics for ``run_iter``. Returns the SAME instance."""
        self._iter_store.append((f, "map"))
        return self

    def run_iter(self, state: S, /, clear: bool = True) -> Pair[typing.Any, typing.Any]:
        """
        Run the transition, then the queued steps in a flat loop.

        Long pipelines built this way do not grow the call stack the way
        nested chain/map closures do. With ``clear=True`` (default) the
        queue is emptied afterwards, even when a step raises; pass
        ``clear=False`` to run the same queue again later.
        """
        kind = type(self)
        try:
            value, next_state = self._transit(state, "State.run_iter")
            for f, step in self._iter_store:
                match step:
                    case "chain":
                        nxt = f(value)
                        panic_on_awaitable(nxt, "State.run_iter")
                        panic_unless_same_kind(nxt, kind, "State.run_iter")
                        value, next_state = nxt._transit(next_state, "State.run_iter")
                    case "map":
                        value = f(value)
                        panic_on_awaitable(value, "State.run_iter")
                        panic_on_container(value, "State.run_iter")
            log.debug("State.run_iter ran %d queued steps", len(self._iter_store))
            return value, next_state
        finally:
            if clear:
                self._iter_store = []

    # Protocol methods

    def __copy__(self) -> State[V, S]:
        """Copies share the transition, never the iteration queue."""
        return type(self)(self._value)

    def __repr__(self) -> str:
        return f"State({self._value!r})"


__all__ = ("State", "IterKind")
