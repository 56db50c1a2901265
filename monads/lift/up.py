"""
Lifting values into containers.

Bridges kungfu types (Result, Option, LazyCoroResult), plain Optional
values and exception-based code into this library's containers.
"""

from __future__ import annotations

from collections.abc import Callable

from kungfu import Error, LazyCoroResult, Ok, Option, Result, Some
from kungfu import Nothing as Absent

from .._helpers import unexpected
from .._types import Predicate
from ..lazy import Effect
from ..simple import Either, Fail, Just, Maybe, Nothing, Success


def pure[T](value: T) -> Effect[T]:
    """
    Lift pure value into an Effect. Short alias for ``Effect.pure``.

    Example:
        from monads import lift as L

        user = L.up.pure(User(id=42))
        user.run()  # User(id=42)
    """
    return Effect.pure(value)


def fail[E](error: E) -> Fail[E]:
    """Halting Either. Dual of pure()."""
    return Fail(error)


def from_result[T, E](value: Result[T, E]) -> Success[T] | Fail[E]:
    """
    Lift a kungfu Result into Either: Ok -> Success, Error -> Fail.

    Example:
        from monads import lift as L

        L.up.from_result(Ok(1))        # Success(1)
        L.up.from_result(Error("no"))  # Fail('no')
    """
    match value:
        case Ok(v):
            return Success(v)
        case Error(e):
            return Fail(e)
        case _:
            raise unexpected(value, "kungfu Result", "lift.up.from_result")


def from_option[T](value: Option[T]) -> Just[T] | Nothing:
    """Lift a kungfu Option into Maybe: Some -> Just, Nothing -> Nothing.

    Raises:
        MonadError: if ``value`` is not a kungfu Option
    """
    if isinstance(value, Some):
        return Just(value.unwrap())
    if isinstance(value, Absent):
        return Nothing()
    raise unexpected(value, "kungfu Option", "lift.up.from_option")


def from_lazy_coro_result[T, E](lazy: LazyCoroResult[T, E]) -> Effect[Success[T] | Fail[E]]:
    """
    Convert a kungfu LazyCoroResult into an async Effect.

    The Effect resolves to Success / Fail, so it keeps composing with
    ``map_async`` / ``chain_async`` (a Fail short-circuits the chain).

    NOTE: async track only, ``run()`` on it raises MonadError.
    """

    async def effect() -> Success[T] | Fail[E]:
        result = await lazy
        return from_result(result)

    return Effect(effect)


def optional[T](value: T | None, *, is_empty: Predicate[T] | None = None) -> Just[T] | Nothing:
    """Alias for ``Maybe.from_nullable``: None (or ``is_empty``) becomes Nothing."""
    return Maybe.from_nullable(value, is_empty=is_empty)


def catching[T](thunk: Callable[[], T]) -> Success[T] | Fail[Exception]:
    """
    Execute sync thunk, catch exceptions and convert to Fail.

    Alias for ``Either.try_``.

    Example:
        from monads import lift as L
        import json

        L.up.catching(lambda: json.loads(raw)).on_fail_map(lambda exc: {})
    """
    return Either.try_(thunk)


__all__ = (
    "pure",
    "fail",
    "from_result",
    "from_option",
    "from_lazy_coro_result",
    "optional",
    "catching",
)