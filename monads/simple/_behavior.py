"""
Shared behaviour of simple containers.

Success/Just follow one operational pattern (continuing), Fail/Nothing the
other (halting). Each concrete variant combines one of these mixins with its
family base (Either or Maybe), which contributes the family's recovery
vocabulary.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from .._errors import MonadError
from .._helpers import panic_if_not_callable, panic_on_container, panic_unless_simple
from ..base import SimpleMonad


class Continuing[T](SimpleMonad[T]):
    """Carries a usable payload and propagates it through map/chain."""

    __slots__ = ()

    @classmethod
    def of(cls, value: T, /) -> typing.Self:
        return cls(value)

    def map[U](self, f: Callable[[T], U], /) -> Continuing[U]:
        """Apply ``f`` and wrap the result in the same variant.

        Raises:
            MonadError: if ``f`` returns a container
        """
        res = f(self._value)
        panic_on_container(res, f"{type(self).__name__}.map")
        return type(self).of(res)

    def chain(self, f: Callable[[T], SimpleMonad[typing.Any]], /) -> SimpleMonad[typing.Any]:
        """Return ``f(payload)`` directly.

        Raises:
            MonadError: if ``f`` does not return a simple container
        """
        res = f(self._value)
        panic_unless_simple(res, f"{type(self).__name__}.chain")
        return res

    def fold[R](self, on_right: Callable[[T], R], on_halt: Callable[[typing.Any], typing.Any], /) -> R:
        return on_right(self._value)

    def ap(self, container: SimpleMonad[typing.Any], /) -> SimpleMonad[typing.Any]:
        """
        Apply the function held in this container to the value held in ``container``.

        The ARGUMENT decides the variant of the result, so Either and Maybe
        can be mixed:

            Success.of(lambda x: x + 1).ap(Just.of(5))  # Just(6)
        """
        method = f"{type(self).__name__}.ap"
        panic_if_not_callable(self._value, method)
        panic_unless_simple(container, method)
        if container.is_halt():
            return container
        fn = typing.cast(Callable[[typing.Any], typing.Any], self._value)
        return type(container).of(fn(container.result()))

    def is_right(self) -> bool:
        return True

    def is_halt(self) -> bool:
        return False

    def get_or_else(self, default: typing.Any, /) -> T:
        return self._value

    def result(self) -> T:
        return self._value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"


class Halting[T](SimpleMonad[T]):
    """Short-circuits map/chain; the payload is reachable only through recovery hooks and fold."""

    __slots__ = ()

    def map(self, f: Callable[[typing.Any], typing.Any], /) -> typing.Self:
        return self

    def chain(self, f: Callable[[typing.Any], typing.Any], /) -> typing.Self:
        return self

    def ap(self, container: SimpleMonad[typing.Any], /) -> typing.Self:
        return self

    def fold[R](self, on_right: Callable[[typing.Any], typing.Any], on_halt: Callable[[T], R], /) -> R:
        return on_halt(self._value)

    def is_right(self) -> bool:
        return False

    def is_halt(self) -> bool:
        return True

    def get_or_else[D](self, default: D, /) -> D:
        return default

    def result(self) -> typing.NoReturn:
        raise MonadError(
            f"Cannot extract result from the {type(self).__name__} container",
            method=f"{type(self).__name__}.result",
        )

    def _continue(self, value: typing.Any, /) -> SimpleMonad[typing.Any]:
        """Continuing counterpart of the same family."""
        raise MonadError(f"{type(self).__name__}._continue must be defined in subclass")

    def _recover_chain(self, f: Callable[[T], SimpleMonad[typing.Any]], method: str) -> SimpleMonad[typing.Any]:
        res = f(self._value)
        panic_unless_simple(res, method)
        return res

    def _recover_map(self, f: Callable[[T], typing.Any], method: str) -> SimpleMonad[typing.Any]:
        res = f(self._value)
        panic_on_container(res, method)
        return self._continue(res)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"


__all__ = ("Continuing", "Halting")
