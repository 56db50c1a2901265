"""
Monads for working with effects, state, errors and missing values.

Containers for building declarative pipelines without branching on
errors/absence by hand and without threading effects or state manually.

Architecture:
- Simple containers (Either: Success / Fail, Maybe: Just / Nothing) are
  immutable values that mix freely in one chain
- Lazy containers (Effect, State) wrap computations and run only on an
  explicit run; Effect absorbs simple containers returned inside it
- MonadError reports API misuse and is never treated as data
"""

import logging

# Errors
from ._errors import MonadError

# Core types
from ._types import Handler, Pair, Payload, Predicate, Thunk, Transition

# Base abstractions
from .base import Family, LazyMonad, Monad, SimpleMonad

# Interop glue
from ._helpers import identity, is_halt, is_lazy, is_monad, is_right, is_simple, unwrap

# Simple containers
from . import simple
from .simple import Either, Fail, Just, Maybe, Nothing, Success

# Lazy containers
from . import lazy
from .lazy import Effect, State

# Collection operations
from .collection import partition, sequence, traverse, validate

# Lift helpers (kungfu interop, deferred calls)
from . import lift
from .lift import call, lifted

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = (
    # Errors
    "MonadError",
    # Types
    "Handler",
    "Pair",
    "Payload",
    "Predicate",
    "Thunk",
    "Transition",
    # Base
    "Family",
    "Monad",
    "SimpleMonad",
    "LazyMonad",
    # Interop glue
    "identity",
    "is_monad",
    "is_simple",
    "is_lazy",
    "is_right",
    "is_halt",
    "unwrap",
    # Simple containers
    "simple",
    "Either",
    "Success",
    "Fail",
    "Maybe",
    "Just",
    "Nothing",
    # Lazy containers
    "lazy",
    "Effect",
    "State",
    # Collection
    "partition",
    "sequence",
    "traverse",
    "validate",
    # Lift module (namespace import - preferred)
    "lift",
    "call",
    "lifted",
)
