"""Test doubles shared across container tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Spy:
    """Callable test double recording every argument it was called with."""

    returns: Any = None
    calls: list[Any] = field(default_factory=list)

    def __call__(self, value: Any = None) -> Any:
        self.calls.append(value)
        return self.returns

    @property
    def called(self) -> bool:
        return bool(self.calls)


class Boom(Exception):
    """Ordinary domain error raised by test computations."""


def explode(*_: Any) -> Any:
    raise Boom("boom")
