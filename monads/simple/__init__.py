"""
Simple containers
=================

Immutable value wrappers that can be mixed freely in one chain:

- Either: Success / Fail
- Maybe: Just / Nothing
"""

from .either import Either, Fail, Success
from .maybe import Just, Maybe, Nothing

__all__ = (
    "Either",
    "Success",
    "Fail",
    "Maybe",
    "Just",
    "Nothing",
)
