import random

import pytest

from foldgen.datatypes import EMPTY, Prepend, from_iterable, to_list
from foldgen.fold_combinators import fold
from foldgen.reverse import REVERSE, append_to_end, reverse, reverse_acc, reverse_builtin


def random_sequences(seed: int, count: int = 40, max_len: int = 60):
    rng = random.Random(seed)
    for _ in range(count):
        yield from_iterable(rng.randrange(1000) for _ in range(rng.randrange(max_len)))


def test_reverse_of_empty() -> None:
    assert reverse(EMPTY) == EMPTY


def test_reverse_fixture() -> None:
    assert to_list(reverse(from_iterable([0, 1, 2, 3]))) == [3, 2, 1, 0]


def test_fold_with_reverse_handlers_matches_builtin_reversal() -> None:
    xs = from_iterable([0, 1, 2, 3])
    assert fold(REVERSE)(xs) == reverse_builtin(xs) == from_iterable([3, 2, 1, 0])


def test_append_to_end() -> None:
    assert append_to_end(EMPTY, 1) == Prepend(1, EMPTY)
    assert to_list(append_to_end(from_iterable("ab"), "c")) == ["a", "b", "c"]


def test_involution() -> None:
    for xs in random_sequences(seed=99):
        assert reverse(reverse(xs)) == xs


@pytest.mark.parametrize("impl", [reverse, reverse_acc])
def test_observationally_equal_to_builtin_reversal(impl) -> None:
    for xs in random_sequences(seed=17):
        assert impl(xs) == reverse_builtin(xs)


def test_accumulator_form_matches_fold_form() -> None:
    for xs in random_sequences(seed=4):
        assert reverse_acc(xs) == reverse(xs)
