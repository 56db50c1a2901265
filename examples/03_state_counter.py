from __future__ import annotations

from _infra import banner, run

from monads import State


def tick(label: str) -> State[str, int]:
    return State.of(lambda count: (f"{label}#{count}", count + 1))


async def main() -> None:
    banner("03_state_counter: threading state without globals")

    labels = tick("a").chain(lambda first: tick("b").map(lambda second: [first, second]))
    print(labels.run(0))

    # Long pipelines: queue steps and run them in a flat loop.
    counter = State.get()
    for _ in range(10_000):
        counter.chain_iter(lambda _: State.of(lambda n: (n + 1, n + 1)))
    print(counter.run_iter(0))


if __name__ == "__main__":
    run(main)
