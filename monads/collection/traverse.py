"""Traverse

Monadic map over plain items with a function returning simple containers."""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable

from .._helpers import panic_unless_simple
from ..base import SimpleMonad
from ..simple import Success

type Wrap = Callable[[list[typing.Any]], SimpleMonad[list[typing.Any]]]


def traverse[A](
    items: Iterable[A],
    handler: Callable[[A], SimpleMonad[typing.Any]],
    *,
    of: Wrap = Success.of,
) -> SimpleMonad[typing.Any]:
    """
    Monadic map: A -> container, short-circuiting on the first halting result.

    Example:
        traverse(["1", "2"], lambda s: Either.try_(lambda: int(s)))  # Success([1, 2])
        traverse(["1", "x"], lambda s: Either.try_(lambda: int(s)))  # Fail(ValueError(...))

    ``of`` wraps the collected payloads; pass ``Just.of`` to stay in Maybe.

    Raises:
        MonadError: if ``handler`` does not return a simple container
    """
    values: list[typing.Any] = []
    for item in items:
        container = handler(item)
        panic_unless_simple(container, "traverse")
        if container.is_halt():
            return container
        values.append(container.result())
    return of(values)


__all__ = ("traverse",)
