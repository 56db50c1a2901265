from __future__ import annotations

from _infra import Failure, FakeRepo, User, banner, run

from kungfu import Error, Ok

from monads import Effect, Fail, Success
from monads import lift as L


def greet(user: User) -> str:
    return f"hello, {user.name}"


async def main() -> None:
    banner("02_effect_pipeline: async Effect over kungfu results")

    repo = FakeRepo(delay_seconds=0.01)

    for user_id in (1, 42):
        greeting = (
            L.call(repo.fetch, user_id)
            .map_async(L.up.from_result)
            .map_async(greet)
            .catch_async(lambda exc: Fail.of(Failure(str(exc))))
        )
        text = await greeting.fold_async(
            on_value=lambda msg: msg,
            on_halt=lambda err: f"error: {err}",
        )
        print(text)

    # Sync track, lowered back into kungfu
    doubled = Effect.of(lambda: Success.of(21)).map(lambda n: n * 2)
    match await L.down.to_lazy_coro_result(doubled):
        case Ok(value):
            print("ok:", value)
        case Error(err):
            print("error:", err)


if __name__ == "__main__":
    run(main)
