"""Partition and validate

Inspect every container instead of stopping at the first halting one."""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable

from .._helpers import panic_unless_simple
from ..base import SimpleMonad
from ..simple import Fail, Success
from .traverse import Wrap


def partition(
    containers: Iterable[SimpleMonad[typing.Any]],
) -> tuple[list[typing.Any], list[SimpleMonad[typing.Any]]]:
    """Separate into (payloads of continuing containers, halting containers). Never fails."""
    values: list[typing.Any] = []
    halted: list[SimpleMonad[typing.Any]] = []
    for container in containers:
        panic_unless_simple(container, "partition")
        if container.is_halt():
            halted.append(container)
        else:
            values.append(container.result())
    return values, halted


def validate(
    containers: Iterable[SimpleMonad[typing.Any]],
    *,
    of: Wrap = Success.of,
    on_halted: Callable[[list[SimpleMonad[typing.Any]]], SimpleMonad[typing.Any]] = Fail.of,
) -> SimpleMonad[typing.Any]:
    """
    Collect ALL halting containers instead of short-circuiting.

    Example:
        validate([Success.of(1), Fail.of("a"), Nothing()])
        # Fail([Fail('a'), Nothing()])
    """
    values, halted = partition(containers)
    if halted:
        return on_halted(halted)
    return of(values)


__all__ = ("partition", "validate")
