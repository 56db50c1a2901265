"""Base container abstractions.

Every container carries its family as a class-level marker
(``__monad_family__``), so interop code can classify a value in O(1)
without knowing which concrete variant it is:

- ``SimpleMonad``: Either / Maybe, immutable value wrappers
- ``LazyMonad``: Effect / State, deferred computations

Operations that a concrete variant does not override refuse loudly with
``MonadError`` instead of silently doing nothing.
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from enum import Enum

from ._errors import MonadError


class Family(Enum):
    """Container family tag."""

    SIMPLE = "simple"
    LAZY = "lazy"


def _undefined(owner: str, operation: str) -> MonadError:
    return MonadError(f"{owner}.{operation} must be defined in subclass")


class Monad[T]:
    """Wraps exactly one opaque payload."""

    __slots__ = ("_value",)

    __monad_family__: typing.ClassVar[Family | None] = None

    def __init__(self, value: T, /) -> None:
        self._value = value

    @classmethod
    def of(cls, value: typing.Any, /) -> Monad[typing.Any]:
        raise _undefined("Monad", "of")

    def chain(self, f: Callable[[T], typing.Any], /) -> typing.Any:
        raise _undefined("Monad", "chain")

    def map(self, f: Callable[[T], typing.Any], /) -> typing.Any:
        raise _undefined("Monad", "map")

    def fold(self, *args: typing.Any, **kwargs: typing.Any) -> typing.Any:
        raise _undefined("Monad", "fold")

    def __repr__(self) -> str:
        raise _undefined("Monad", "__repr__")


class SimpleMonad[T](Monad[T]):
    """
    Simple monads: Either (Success / Fail) and Maybe (Just / Nothing).

    Every simple container answers the recovery hooks of BOTH families.
    The defaults here are no-ops returning ``self``; a halting variant
    overrides only the hooks of its own family. That is what lets Either
    and Maybe be mixed freely in one chain.
    """

    __slots__ = ()

    __monad_family__ = Family.SIMPLE

    def ap(self, container: SimpleMonad[typing.Any], /) -> SimpleMonad[typing.Any]:
        raise _undefined("SimpleMonad", "ap")

    def is_right(self) -> bool:
        raise _undefined("SimpleMonad", "is_right")

    def is_halt(self) -> bool:
        raise _undefined("SimpleMonad", "is_halt")

    def get_or_else(self, default: typing.Any, /) -> typing.Any:
        raise _undefined("SimpleMonad", "get_or_else")

    def result(self) -> T:
        raise _undefined("SimpleMonad", "result")

    # Recovery hooks

    def on_fail_chain(self, f: Callable[[typing.Any], SimpleMonad[typing.Any]], /) -> SimpleMonad[typing.Any]:
        return self

    def on_fail_map(self, f: Callable[[typing.Any], typing.Any], /) -> SimpleMonad[typing.Any]:
        return self

    def on_nothing_chain(self, f: Callable[[None], SimpleMonad[typing.Any]], /) -> SimpleMonad[typing.Any]:
        return self

    def on_nothing_map(self, f: Callable[[None], typing.Any], /) -> SimpleMonad[typing.Any]:
        return self

    # Point-by-point introspection

    def is_success(self) -> bool:
        return False

    def is_fail(self) -> bool:
        return False

    def is_just(self) -> bool:
        return False

    def is_nothing(self) -> bool:
        return False

    # Value semantics: variant + payload

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SimpleMonad):
            return NotImplemented
        return type(self) is type(other) and self._value == other._value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))


class LazyMonad[T](Monad[T]):
    """
    Lazy monads: Effect (deferred computation) and State (state transition).

    The payload is always callable; invoking it is the only way to observe
    the effect, and nothing is invoked before an explicit run.
    """

    __slots__ = ()

    __monad_family__ = Family.LAZY

    @classmethod
    def pure(cls, value: typing.Any, /) -> LazyMonad[typing.Any]:
        raise _undefined("LazyMonad", "pure")

    def run(self, *args: typing.Any) -> typing.Any:
        raise _undefined("LazyMonad", "run")


__all__ = (
    "Family",
    "Monad",
    "SimpleMonad",
    "LazyMonad",
)
