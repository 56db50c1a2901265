"""
Lift helpers with semantic namespaces.

Supports three import styles:
    from monads import lift as L   # Recommended (balance)
    from monads import lift as _   # Minimal
    from monads import lift        # Explicit

Architecture:
- L.up.*    - values, kungfu Result/Option/LazyCoroResult -> containers
- L.down.*  - containers -> kungfu Result/Option/LazyCoroResult, values
- L.call()  - deferred function calls as Effect

Examples:
    from monads import lift as L

    # Lifting
    user = L.up.from_result(repo.find(42))          # Success / Fail
    name = L.up.optional(row.get("name"))           # Just / Nothing

    # Deferred calls
    report = L.call(build_report, 42).map(render)

    # Lowering
    result = L.down.to_result(user)                 # Ok / Error
    lazy = L.down.to_lazy_coro_result(report)       # LazyCoroResult

    # Decorators
    @L.lifted
    def load(): ...
"""

from __future__ import annotations

# Import namespaces
from . import down as down_ns
from . import up as up_ns

# From up namespace - lifting
from .up import catching, fail, from_lazy_coro_result, from_option, from_result, optional, pure

# From call namespace - deferred calls
from .call import call, lifted, wrap

# From down namespace - lowering
from .down import or_else, to_lazy_coro_result, to_option, to_result, unsafe

# Namespace aliases: L.up.*, L.down.*
up = up_ns
down = down_ns

__all__ = (
    # Namespaces (L.up.*, L.down.*)
    "up",
    "down",
    # Up
    "pure",
    "fail",
    "from_result",
    "from_option",
    "from_lazy_coro_result",
    "optional",
    "catching",
    # Call
    "call",
    "lifted",
    "wrap",
    # Down
    "to_result",
    "to_option",
    "to_lazy_coro_result",
    "unsafe",
    "or_else",
)
