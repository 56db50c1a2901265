"""Internal helpers for monads.

Classification predicates, the unwrap rule and the contract guards shared
by the simple and lazy families. Classification reads the family marker
set on the container class, never the concrete variant type, so any
container that carries the marker takes part in the interop rules.

Guards raise ``MonadError`` and log the violation at debug level."""

from __future__ import annotations

import inspect
import logging
import typing
from collections.abc import Awaitable

from ._errors import MonadError
from .base import Family, LazyMonad, Monad, SimpleMonad

log = logging.getLogger(__name__)


# Identity function
def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x


# Classification

def family_of(value: object) -> Family | None:
    """Family marker of a container, ``None`` for plain values."""
    return getattr(type(value), "__monad_family__", None)


def is_monad(value: object) -> typing.TypeGuard[Monad[typing.Any]]:
    return family_of(value) is not None


def is_simple(value: object) -> typing.TypeGuard[SimpleMonad[typing.Any]]:
    return family_of(value) is Family.SIMPLE


def is_lazy(value: object) -> typing.TypeGuard[LazyMonad[typing.Any]]:
    return family_of(value) is Family.LAZY


def is_right(value: object) -> bool:
    """Continuing simple container (Success / Just)."""
    return is_simple(value) and value.is_right()


def is_halt(value: object) -> bool:
    """Halting simple container (Fail / Nothing)."""
    return is_simple(value) and value.is_halt()


def unwrap(value: typing.Any) -> typing.Any:
    """
    Unwrap rule: a continuing simple container gives up its payload,
    anything else passes through unchanged.

    Halting containers are NOT unwrapped; callers check ``is_halt`` first
    and short-circuit.
    """
    if is_right(value):
        return value.result()
    return value


def is_pending(value: object) -> bool:
    """Awaitable that is not a container. Effect supports ``await`` but is a value here."""
    return inspect.isawaitable(value) and not is_monad(value)


async def resolve[T](value: T | Awaitable[T]) -> T:
    """Await ``value`` if it is pending, return it as-is otherwise."""
    if is_pending(value):
        return await value
    return value


# Contract guards

def _violation(message: str, method: str) -> MonadError:
    log.debug("contract violation in %s: %s", method, message)
    return MonadError(message, method=method)


def panic_if_not_callable(value: object, method: str) -> None:
    if not callable(value):
        raise _violation("requires a function inside", method)


def panic_on_awaitable(value: object, method: str) -> None:
    """Synchronous track met a pending value: use the async analog instead."""
    if is_pending(value):
        if inspect.iscoroutine(value):
            value.close()
        raise _violation(
            "inner or outer function must NOT return an awaitable, use the async analog instead",
            method,
        )


def panic_unless_simple(value: object, method: str) -> None:
    if not is_simple(value):
        raise _violation("improper use, applicable value must be a simple container", method)


def panic_on_container(value: object, method: str) -> None:
    if is_monad(value):
        raise _violation("improper use, applicable value must NOT be a container", method)


def panic_on_lazy(value: object, method: str) -> None:
    if is_lazy(value):
        raise _violation("improper use, applicable value must NOT be a lazy container", method)


def panic_unless_same_kind(value: object, kind: type, method: str) -> None:
    if not isinstance(value, kind):
        raise _violation(
            f"improper use, applicable value must be the same type of lazy container ({kind.__name__})",
            method,
        )


def panic_on_foreign_lazy(value: object, kind: type, method: str) -> None:
    if is_lazy(value) and not isinstance(value, kind):
        raise _violation(
            f"improper use, applicable value must be the SAME type of lazy container ({kind.__name__}) or NOT lazy",
            method,
        )


def unexpected(value: object, expected: str, method: str) -> MonadError:
    """Violation for a value of the wrong type at a conversion boundary. The caller raises it."""
    return _violation(f"expected {expected}, got {value!r}", method)


def panic_unless_pair(value: object, method: str) -> tuple[typing.Any, typing.Any]:
    """State transitions produce ``(value, next_state)``."""
    if not isinstance(value, (tuple, list)) or len(value) != 2:
        raise _violation(f"transition must return a (value, state) pair, got {value!r}", method)
    return value[0], value[1]


__all__ = (
    # Identity
    "identity",
    # Classification
    "family_of",
    "is_monad",
    "is_simple",
    "is_lazy",
    "is_right",
    "is_halt",
    "unwrap",
    "is_pending",
    "resolve",
    # Guards
    "panic_if_not_callable",
    "panic_on_awaitable",
    "panic_unless_simple",
    "panic_on_container",
    "panic_on_lazy",
    "panic_unless_same_kind",
    "panic_on_foreign_lazy",
    "panic_unless_pair",
    "unexpected",
)
