from __future__ import annotations


class MonadError(Exception):
    """Container API was used incorrectly.

    Raised for contract violations only: a user function returned the wrong
    shape, an accessor was called on a variant that cannot satisfy it, an
    abstract operation was not overridden, or a synchronous operation met an
    awaitable. Never treated as recoverable data: every ``catch`` re-raises it.
    """

    method: str | None

    def __init__(self, message: str, *, method: str | None = None) -> None:
        self.method = method
        if method is not None:
            message = f"{method} - {message}"
        super().__init__(message)


__all__ = ("MonadError",)
