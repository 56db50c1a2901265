"""Either: recoverable failure.

- Success: continuing variant
- Fail: halting variant, recovered with ``on_fail_map`` / ``on_fail_chain``

Example:
    from monads import Either, Success

    price = (
        Either.try_(lambda: int(raw))
        .map(lambda cents: cents / 100)
        .on_fail_map(lambda exc: 0.0)
        .result()
    )
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Callable

from .._errors import MonadError
from .._helpers import panic_on_awaitable
from ..base import SimpleMonad
from ._behavior import Continuing, Halting

log = logging.getLogger(__name__)


class Either[T](SimpleMonad[T]):
    """Abstract family base. Use for introspection and ``try_`` only."""

    __slots__ = ()

    @staticmethod
    def try_[V](f: Callable[[], V], /) -> Success[V] | Fail[Exception]:
        """
        Execute a SYNC function, catching every ordinary exception.

        Example:
            Either.try_(lambda: 5)                  # Success(5)
            Either.try_(lambda: int("x"))           # Fail(ValueError(...))

        Raises:
            MonadError: if ``f`` returns an awaitable, or re-raised from ``f``
        """
        try:
            res = f()
            panic_on_awaitable(res, "Either.try_")
        except MonadError:
            raise
        except Exception as exc:
            log.debug("Either.try_ captured %r", exc)
            return Fail(exc)
        return Success(res)


class Success[T](Continuing[T], Either[T]):
    """Successful outcome."""

    __slots__ = ()

    def is_success(self) -> bool:
        return True


class Fail[E](Halting[E], Either[E]):
    """Failed outcome carrying the error."""

    __slots__ = ()

    @classmethod
    def of(cls, value: E, /) -> typing.Self:
        return cls(value)

    def on_fail_chain(self, f: Callable[[E], SimpleMonad[typing.Any]], /) -> SimpleMonad[typing.Any]:
        """Recover by handing the error to ``f``; ``f`` must return a simple container."""
        return self._recover_chain(f, "Fail.on_fail_chain")

    def on_fail_map(self, f: Callable[[E], typing.Any], /) -> SimpleMonad[typing.Any]:
        """Recover into ``Success(f(error))``; ``f`` must NOT return a container."""
        return self._recover_map(f, "Fail.on_fail_map")

    def is_fail(self) -> bool:
        return True

    def _continue(self, value: typing.Any, /) -> Success[typing.Any]:
        return Success(value)


__all__ = ("Either", "Success", "Fail")
