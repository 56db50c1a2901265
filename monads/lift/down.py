"""
Lowering containers into values.

Simple containers become kungfu Result / Option or plain values; an
Effect becomes a kungfu LazyCoroResult.
"""

from __future__ import annotations

import typing

from kungfu import Error, LazyCoroResult, Nothing, Ok, Option, Result, Some

from .._helpers import identity, is_simple, panic_unless_simple
from ..base import SimpleMonad
from ..lazy import Effect


def to_result(container: SimpleMonad[typing.Any]) -> Result[typing.Any, typing.Any]:
    """
    Success / Just -> Ok(payload), Fail / Nothing -> Error(payload).

    Example:
        from monads import lift as L

        L.down.to_result(Success.of(1))  # Ok(1)
        L.down.to_result(Nothing())      # Error(None)
    """
    panic_unless_simple(container, "lift.down.to_result")
    payload = container.fold(identity, identity)
    if container.is_right():
        return Ok(payload)
    return Error(payload)


def to_option(container: SimpleMonad[typing.Any]) -> Option[typing.Any]:
    """Success / Just -> Some(payload), Fail / Nothing -> Nothing. The error payload is dropped."""
    panic_unless_simple(container, "lift.down.to_option")
    if container.is_right():
        return Some(container.result())
    return Nothing()


def to_lazy_coro_result(effect: Effect[typing.Any]) -> LazyCoroResult[typing.Any, typing.Any]:
    """
    Convert an Effect (sync or async) into a kungfu LazyCoroResult.

    A simple container result goes through ``to_result``; a plain value
    becomes Ok. Exceptions raised by the computation propagate.
    """

    async def run() -> Result[typing.Any, typing.Any]:
        out = await effect.run_async()
        if is_simple(out):
            return to_result(out)
        return Ok(out)

    return LazyCoroResult(run)


def unsafe[T](container: SimpleMonad[T]) -> T:
    """
    Extract the payload, raises MonadError on a halting container.

    Alias for ``container.result()``.
    """
    panic_unless_simple(container, "lift.down.unsafe")
    return container.result()


def or_else[T, D](container: SimpleMonad[T], default: D) -> T | D:
    """Payload or default. Alias for ``container.get_or_else(default)``."""
    panic_unless_simple(container, "lift.down.or_else")
    return container.get_or_else(default)


__all__ = (
    "to_result",
    "to_option",
    "to_lazy_coro_result",
    "unsafe",
    "or_else",
)
