from __future__ import annotations

from _infra import FakeRepo, banner, run

from monads import Either, Maybe, Success


def email_domain(repo: FakeRepo, user_id: int) -> str:
    # Maybe for absence, Either for failure, one chain for both.
    return (
        Maybe.from_nullable(repo.find(user_id))
        .chain(lambda user: Maybe.from_nullable(user.email))
        .chain(lambda email: Either.try_(lambda: email.split("@")[1]))
        .on_nothing_map(lambda _: "<no email>")
        .on_fail_map(lambda exc: f"<bad email: {exc}>")
        .result()
    )


async def main() -> None:
    banner("01_quickstart: Maybe + Either in one chain")

    repo = FakeRepo()
    for user_id in (1, 2, 3):
        print(user_id, email_domain(repo, user_id))

    add = Success.of(lambda x: x + 1)
    print("ap:", add.ap(Maybe.from_nullable(41)))


if __name__ == "__main__":
    run(main)
