from __future__ import annotations

import asyncio
import logging
import sys
from collections.abc import Callable, Coroutine
from dataclasses import dataclass, field
from pathlib import Path

from kungfu import Error, Ok, Result

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@dataclass(frozen=True, slots=True)
class Failure(Exception):
    message: str
    transient: bool = False

    def __str__(self) -> str:  # pragma: no cover (examples only)
        return self.message


@dataclass(frozen=True, slots=True)
class User:
    id: int
    name: str
    email: str | None = None


def _seed_users() -> dict[int, User]:
    return {
        1: User(id=1, name="ada", email="ada@example.com"),
        2: User(id=2, name="bob"),
    }


@dataclass(slots=True)
class FakeRepo:
    """In-memory user store with a kungfu-based async API."""

    users: dict[int, User] = field(default_factory=_seed_users)
    delay_seconds: float = 0.0

    def find(self, user_id: int) -> User | None:
        return self.users.get(user_id)

    async def fetch(self, user_id: int) -> Result[User, Failure]:
        await asyncio.sleep(self.delay_seconds)
        user = self.users.get(user_id)
        if user is None:
            return Error(Failure(f"user {user_id}: not found"))
        return Ok(user)


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:  # pragma: no cover (examples only)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    asyncio.run(main())
