import pytest

from foldgen.splits import NegativeSizeError, check_natural, compositions, splits


def test_splits_of_three() -> None:
    assert splits(3) == [(0, 3), (1, 2), (2, 1), (3, 0)]


def test_splits_of_zero() -> None:
    assert splits(0) == [(0, 0)]


@pytest.mark.parametrize("n", range(0, 25))
def test_splits_exactness(n: int) -> None:
    pairs = splits(n)
    assert len(pairs) == n + 1
    assert all(m + p == n and m >= 0 and p >= 0 for m, p in pairs)
    assert [m for m, _ in pairs] == list(range(n + 1))


def test_negative_size_is_rejected() -> None:
    with pytest.raises(NegativeSizeError):
        splits(-1)
    with pytest.raises(ValueError):
        splits(-10)


@pytest.mark.parametrize("bad", [1.5, "3", None, True])
def test_non_integer_size_is_rejected(bad) -> None:
    with pytest.raises(TypeError):
        check_natural(bad)


@pytest.mark.parametrize("n", range(0, 8))
def test_binary_compositions_are_splits(n: int) -> None:
    assert list(compositions(n, 2)) == splits(n)


def test_ternary_compositions() -> None:
    assert list(compositions(2, 3)) == [
        (0, 0, 2), (0, 1, 1), (0, 2, 0),
        (1, 0, 1), (1, 1, 0),
        (2, 0, 0),
    ]


@pytest.mark.parametrize("n, parts", [(0, 1), (4, 1), (5, 3), (6, 4)])
def test_composition_counts(n: int, parts: int) -> None:
    from math import comb

    result = list(compositions(n, parts))
    assert len(result) == comb(n + parts - 1, parts - 1)
    assert len(set(result)) == len(result)
    assert all(sum(c) == n and len(c) == parts for c in result)
    assert result == sorted(result)


def test_compositions_validate_eagerly() -> None:
    with pytest.raises(NegativeSizeError):
        compositions(-1, 2)
    with pytest.raises(ValueError):
        compositions(3, 0)
