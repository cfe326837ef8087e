"""Tests for diff, diff_by, intersect, unique and unique_by."""

from collections.abc import Iterator

import vecselect as vs


def _never_iterated() -> Iterator[int]:
    msg = "second argument should not be consumed"
    raise AssertionError(msg)
    yield 0


def test_diff_removes_values_of_all_others() -> None:
    """Test diff against several iterables."""
    assert list(vs.diff([1, 2, 3, 4, 5], [2], [4, 9], [5])) == [1, 3]


def test_diff_preserves_duplicates_of_first() -> None:
    """Test that repeated values of the first iterable survive."""
    assert list(vs.diff([1, 1, 2, 3, 3], [2])) == [1, 1, 3, 3]


def test_diff_with_itself_is_empty() -> None:
    """Test that a sequence minus itself is empty."""
    data = [4, 2, 2, 7]
    assert list(vs.diff(data, data)) == []


def test_diff_empty_first_does_not_consume_others() -> None:
    """Test that an empty first iterable short-circuits."""
    assert list(vs.diff([], _never_iterated())) == []


def test_diff_empty_second_returns_copy() -> None:
    """Test that diff with nothing to remove returns an equal, new sequence."""
    data = [3, 1, 3]
    result = vs.diff(data, [])
    assert list(result) == data
    assert result.inner() is not data


def test_diff_empty_second_with_rest() -> None:
    """Test that rest iterables are used even when second is empty."""
    assert list(vs.diff([1, 2, 3], [], [2])) == [1, 3]


def test_diff_by_uses_extracted_keys() -> None:
    """Test diff_by with dictionaries keyed by id."""
    first = [{"id": 1, "v": "a"}, {"id": 2, "v": "b"}, {"id": 1, "v": "c"}]
    second = [{"id": 2, "v": "other"}]
    result = vs.diff_by(first, second, lambda d: d["id"])
    assert list(result) == [{"id": 1, "v": "a"}, {"id": 1, "v": "c"}]


def test_diff_by_empty_cases() -> None:
    """Test the short-circuits of diff_by."""
    assert list(vs.diff_by([], [[1]], len)) == []
    assert list(vs.diff_by([[1], [2, 3]], [], len)) == [[1], [2, 3]]


def test_diff_by_constant_key_removes_everything() -> None:
    """Test diff_by when the extractor always returns the same key."""
    assert list(vs.diff_by(["a", "b"], ["z"], lambda _: 0)) == []


def test_intersect_preserves_duplicates() -> None:
    """Test that intersect keeps repeated values of the first iterable."""
    assert list(vs.intersect([1, 1, 2], [1, 2])) == [1, 1, 2]


def test_intersect_with_itself() -> None:
    """Test that a sequence intersected with itself is unchanged."""
    data = [5, 3, 5, 1]
    assert list(vs.intersect(data, data)) == data


def test_intersect_many_keeps_order_of_first() -> None:
    """Test intersect across several iterables."""
    assert list(vs.intersect([4, 3, 2, 1, 3], [1, 2, 3], [3, 2, 9])) == [3, 2, 3]


def test_intersect_disjoint_is_empty() -> None:
    """Test intersect of disjoint iterables."""
    assert list(vs.intersect([1, 2], [3, 4])) == []


def test_intersect_accepts_generators() -> None:
    """Test that a one-shot first iterable is read once."""
    assert list(vs.intersect((x for x in [1, 2, 2, 3]), [2, 3])) == [2, 2, 3]


def test_unique_keeps_first_occurrence_order() -> None:
    """Test unique keeps the first occurrence of each value."""
    assert list(vs.unique([3, 1, 3, 2, 1])) == [3, 1, 2]


def test_unique_strings() -> None:
    """Test unique on text values."""
    assert list(vs.unique("mississippi")) == ["m", "i", "s", "p"]


def test_unique_by_first_position_last_value() -> None:
    """Test that unique_by keeps the first position but the last value."""
    data = [("a", 1), ("b", 2), ("a", 3)]
    assert list(vs.unique_by(data, lambda pair: pair[0])) == [("a", 3), ("b", 2)]


def test_unique_by_differs_from_first_wins_dedup() -> None:
    """Test that unique_by is not a first-wins deduplication."""
    words = ["apple", "bean", "avocado", "berry", "cherry"]
    assert list(vs.unique_by(words, lambda w: w[0])) == ["avocado", "berry", "cherry"]


def test_unique_by_constant_key() -> None:
    """Test unique_by when every element shares the same key."""
    assert list(vs.unique_by([1, 2, 3], lambda _: "k")) == [3]
