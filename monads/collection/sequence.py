"""Sequence

Structure flipping: [container] -> container[list]."""

from __future__ import annotations

import typing
from collections.abc import Iterable

from ..base import SimpleMonad
from ..simple import Success
from .traverse import Wrap, traverse


def sequence(
    containers: Iterable[SimpleMonad[typing.Any]],
    *,
    of: Wrap = Success.of,
) -> SimpleMonad[typing.Any]:
    """
    Flip structure: [Success(1), Just(2)] -> Success([1, 2]).

    The first halting container is returned as-is. Implemented as traverse(id).
    """
    return traverse(containers, lambda c: c, of=of)


__all__ = ("sequence",)
