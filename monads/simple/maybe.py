"""Maybe: optional values.

- Just: continuing variant
- Nothing: halting variant, recovered with ``on_nothing_map`` / ``on_nothing_chain``
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from .._types import Predicate
from ..base import SimpleMonad
from ._behavior import Continuing, Halting


class Maybe[T](SimpleMonad[T]):
    """Abstract family base. Use for introspection and ``from_nullable`` only."""

    __slots__ = ()

    @staticmethod
    def from_nullable[V](value: V | None, /, *, is_empty: Predicate[V] | None = None) -> Just[V] | Nothing:
        """
        ``None`` becomes Nothing; ``is_empty`` can classify more values as empty.

        Falsy values are present values:

            Maybe.from_nullable(0)                          # Just(0)
            Maybe.from_nullable("")                         # Just('')
            Maybe.from_nullable("", is_empty=lambda s: not s)  # Nothing()
        """
        if value is None:
            return Nothing()
        if is_empty is not None and is_empty(value):
            return Nothing()
        return Just(value)


class Just[T](Continuing[T], Maybe[T]):
    """Present value."""

    __slots__ = ()

    def is_just(self) -> bool:
        return True


class Nothing(Halting[None], Maybe[None]):
    """Absent value. The payload is always ``None``."""

    __slots__ = ()

    def __init__(self, value: typing.Any = None, /) -> None:
        _ = value
        super().__init__(None)

    @classmethod
    def of(cls, value: typing.Any = None, /) -> Nothing:
        _ = value
        return cls()

    def on_nothing_chain(self, f: Callable[[None], SimpleMonad[typing.Any]], /) -> SimpleMonad[typing.Any]:
        """Recover with ``f(None)``; ``f`` must return a simple container."""
        return self._recover_chain(f, "Nothing.on_nothing_chain")

    def on_nothing_map(self, f: Callable[[None], typing.Any], /) -> SimpleMonad[typing.Any]:
        """Recover into ``Just(f(None))``; ``f`` must NOT return a container."""
        return self._recover_map(f, "Nothing.on_nothing_map")

    def is_nothing(self) -> bool:
        return True

    def _continue(self, value: typing.Any, /) -> Just[typing.Any]:
        return Just(value)

    def __repr__(self) -> str:
        return "Nothing()"


__all__ = ("Maybe", "Just", "Nothing")
