"""
Calling functions with automatic lifting into Effect.

The call is deferred: nothing runs until the Effect is run.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps

from .._types import Thunk
from ..lazy import Effect


def wrap[T](thunk: Thunk[T]) -> Effect[T]:
    """
    Wrap a zero-argument callable (sync or async) into an Effect.

    **Prefer `call()` for locality:**
        L.call(load_user, user_id)
        L.wrap(lambda: load_user(user_id))  # same thing, more noise
    """
    return Effect(thunk)


def lifted[T, **P](func: Callable[P, T]) -> Callable[P, Effect[T]]:
    """
    Decorator: calling the function builds an Effect instead of running it.

    Example:
        from monads import lift as L

        @L.lifted
        def read_config(path: str) -> Success[dict] | Fail[Exception]:
            return Either.try_(lambda: json.loads(Path(path).read_text()))

        read_config("app.json").map(lambda cfg: cfg["name"]).run()
    """

    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Effect[T]:
        return wrap(lambda: func(*args, **kwargs))

    return wrapper


def call[T, **P](
    func: Callable[P, T],
    *args: P.args,
    **kwargs: P.kwargs,
) -> Effect[T]:
    """
    Call function with arguments, deferred inside an Effect.

    Works for coroutine functions too; run those with ``run_async()``.

    Example:
        from monads import lift as L

        total = L.call(sum, [1, 2, 3]).map(lambda n: n * 2).run()  # 12
    """
    return wrap(lambda: func(*args, **kwargs))


__all__ = (
    "call",
    "lifted",
    "wrap",
)
