"""
Lazy containers
===============

Deferred computations, executed only by an explicit run:

- Effect: zero-argument computation, absorbs simple containers
- State: state transition ``state -> (value, next_state)``
"""

from .effect import Effect
from .state import State

__all__ = (
    "Effect",
    "State",
)
