from __future__ import annotations

import pytest

from monads import Either, Fail, Just, MonadError, Nothing, Success, partition, sequence, traverse, validate

from tests.helpers import Spy


def parse(raw: str) -> Success[int] | Fail[Exception]:
    return Either.try_(lambda: int(raw))


class TestSequence:
    def test_all_continuing(self) -> None:
        assert sequence([Success.of(1), Just.of(2), Success.of(3)]) == Success([1, 2, 3])

    def test_first_halting_is_returned(self) -> None:
        first = Fail.of("a")
        assert sequence([Success.of(1), first, Fail.of("b")]) is first

    def test_empty(self) -> None:
        assert sequence([]) == Success([])

    def test_custom_wrapper(self) -> None:
        assert sequence([Just.of(1)], of=Just.of) == Just([1])

    def test_requires_simple_containers(self) -> None:
        with pytest.raises(MonadError):
            sequence([Success.of(1), 2])


class TestTraverse:
    def test_all_parse(self) -> None:
        assert traverse(["1", "2"], parse) == Success([1, 2])

    def test_short_circuits(self, spy: Spy) -> None:
        spy.returns = Success.of(0)

        def handler(raw: str) -> Success[int] | Fail[Exception]:
            if raw == "x":
                return parse(raw)
            return spy(raw)

        res = traverse(["1", "x", "3"], handler)
        assert res.is_fail()
        assert spy.calls == ["1"]

    def test_handler_must_return_container(self) -> None:
        with pytest.raises(MonadError):
            traverse([1], lambda x: x)


class TestPartition:
    def test_splits(self) -> None:
        values, halted = partition([Success.of(1), Nothing(), Just.of(2), Fail.of("e")])
        assert values == [1, 2]
        assert halted == [Nothing(), Fail("e")]

    def test_empty(self) -> None:
        assert partition([]) == ([], [])


class TestValidate:
    def test_collects_all_halting(self) -> None:
        assert validate([Success.of(1), Fail.of("a"), Nothing()]) == Fail([Fail("a"), Nothing()])

    def test_all_continuing(self) -> None:
        assert validate([Success.of(1), Just.of(2)]) == Success([1, 2])

    def test_custom_halted_wrapper(self) -> None:
        res = validate([Fail.of("a")], on_halted=lambda halted: Nothing())
        assert res == Nothing()

    def test_halting_result_renders(self) -> None:
        assert repr(validate([Success.of(1), Fail.of("a"), Nothing()])) == "Fail([Fail('a'), Nothing()])"
