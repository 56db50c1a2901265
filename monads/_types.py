"""
Core type definitions for monads.

Aliases shared by the simple and lazy container families.
"""

from __future__ import annotations

import typing
from collections.abc import Awaitable, Callable

# ============================================================================
# Type aliases
# ============================================================================

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# Thunk = zero-argument computation wrapped by Effect
type Thunk[T] = Callable[[], T | Awaitable[T]]

# Pair = (value, next_state) produced by a State transition
type Pair[V, S] = tuple[V, S]

# Transition = one-argument computation wrapped by State
type Transition[V, S] = Callable[[S], Pair[V, S] | Awaitable[Pair[V, S]]]

# Handler = fold/recovery callback, may be async on the async track
type Handler[A, R] = Callable[[A], R | Awaitable[R]]

# Anything at all: payloads are opaque to the containers
type Payload = typing.Any

__all__ = (
    "Predicate",
    "Thunk",
    "Pair",
    "Transition",
    "Handler",
    "Payload",
)
