"""Tests for shuffle and sample."""

import random
from collections import Counter
from collections.abc import MutableSequence
from typing import Any

import pytest

import vecselect as vs


class _Reverser:
    """Deterministic provider that reverses instead of shuffling."""

    def __init__(self) -> None:
        self.calls = 0

    def shuffle(self, x: MutableSequence[Any], /) -> None:
        self.calls += 1
        x.reverse()


@pytest.mark.parametrize("k", [0, 1, 4, 10, 25])
def test_sample_length(k: int) -> None:
    """Test that sample returns min(k, len) elements."""
    data = list(range(10))
    assert len(vs.sample(data, k)) == min(k, len(data))


def test_sample_elements_come_from_input() -> None:
    """Test that a sample never invents or duplicates elements."""
    data = [1, 1, 2, 3, 5, 8]
    result = vs.sample(data, 4, random.Random(7))
    assert not Counter(result) - Counter(data)


def test_sample_larger_than_input_is_a_permutation() -> None:
    """Test that oversized samples return every element."""
    data = ["a", "b", "c", "d"]
    result = vs.sample(data, 100, random.Random(3))
    assert sorted(result) == data


def test_sample_negative_raises_before_shuffling() -> None:
    """Test that a negative size is rejected without drawing randomness."""
    rng = _Reverser()
    with pytest.raises(vs.InvalidArgument, match="sample size"):
        vs.sample([1, 2, 3], -1, rng)
    assert rng.calls == 0


def test_sample_shuffles_whole_input() -> None:
    """Test that sample takes the head of a full permutation."""
    assert list(vs.sample([1, 2, 3, 4], 2, _Reverser())) == [4, 3]


def test_shuffle_does_not_mutate_input() -> None:
    """Test that shuffle works on a copy."""
    data = [1, 2, 3]
    assert list(vs.shuffle(data, _Reverser())) == [3, 2, 1]
    assert data == [1, 2, 3]


def test_seeded_is_deterministic() -> None:
    """Test that the same seed yields the same sample."""
    with vs.seeded(123):
        first = vs.sample(range(50), 10)
    with vs.seeded(123):
        second = vs.sample(range(50), 10)
    assert first == second


def test_using_rng_is_scoped() -> None:
    """Test that the scoped provider is restored on exit."""
    rng = _Reverser()
    with vs.using_rng(rng):
        assert list(vs.shuffle([1, 2])) == [2, 1]
    vs.shuffle([1, 2])
    assert rng.calls == 1


def test_explicit_rng_wins_over_scoped() -> None:
    """Test that an explicit provider overrides the scoped one."""
    scoped = _Reverser()
    explicit = _Reverser()
    with vs.using_rng(scoped):
        vs.shuffle([1, 2, 3], explicit)
    assert (scoped.calls, explicit.calls) == (0, 1)


def test_sample_is_roughly_uniform() -> None:
    """Test that each element is drawn with similar frequency."""
    rng = random.Random(2024)
    counts = Counter(
        value for _ in range(3000) for value in vs.sample(range(5), 2, rng)
    )
    assert set(counts) == set(range(5))
    expected = 3000 * 2 / 5
    assert all(abs(count - expected) < expected * 0.15 for count in counts.values())
