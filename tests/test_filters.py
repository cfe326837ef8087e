"""Tests for the predicate filters."""

import vecselect as vs


def _is_even(x: int) -> bool:
    return x % 2 == 0


def test_filter_keeps_matching_in_order() -> None:
    """Test that filter keeps matching values in their original order."""
    assert list(vs.filter([5, 4, 3, 2, 1, 0], _is_even)) == [4, 2, 0]


def test_filter_default_predicate_is_truthiness() -> None:
    """Test filter without predicate drops falsy values."""
    assert list(vs.filter([0, 1, "", "a", None, False, [], [0]])) == [1, "a", [0]]


def test_filter_is_idempotent() -> None:
    """Test that filtering twice with the same predicate changes nothing."""
    data = [3, 8, 1, 6, 6, 9, 2]
    once = vs.filter(data, _is_even)
    assert vs.filter(once, _is_even) == once


def test_filter_empty_input() -> None:
    """Test filter on an empty input."""
    assert list(vs.filter([], _is_even)) == []


def test_filter_calls_predicate_once_per_element_in_order() -> None:
    """Test that the predicate sees each element once, in order."""
    seen: list[int] = []

    def _record(x: int) -> bool:
        seen.append(x)
        return True

    vs.filter([3, 1, 2], _record)
    assert seen == [3, 1, 2]


def test_filter_returns_new_seq_and_leaves_input_untouched() -> None:
    """Test that filter does not modify its input."""
    data = [1, 2, 3, 4]
    result = vs.filter(data, _is_even)
    assert data == [1, 2, 3, 4]
    assert isinstance(result, vs.Seq)


def test_filter_accepts_generators() -> None:
    """Test filter on a one-shot iterator."""
    assert list(vs.filter((x for x in range(6)), _is_even)) == [0, 2, 4]


def test_filter_nulls_keeps_falsy_values() -> None:
    """Test that filter_nulls only removes None."""
    assert list(vs.filter_nulls([0, None, "", False, None, 7])) == [0, "", False, 7]


def test_filter_nulls_all_none() -> None:
    """Test filter_nulls when every value is None."""
    assert list(vs.filter_nulls([None, None])) == []


def test_filter_with_key_receives_key_and_value() -> None:
    """Test that filter_with_key passes both key and value."""
    data = {"a": 1, "b": 2, "c": 3, "d": 4}
    result = vs.filter_with_key(data, lambda k, v: k in {"a", "d"} or v == 2)
    assert list(result) == [1, 2, 4]


def test_filter_with_key_on_dict_wrapper() -> None:
    """Test filter_with_key on a Dict keeps insertion order."""
    data = vs.Dict.from_([("z", 1), ("y", 2), ("x", 3)])
    assert list(vs.filter_with_key(data, lambda _k, v: v != 2)) == [1, 3]


def test_keys_preserves_iteration_order() -> None:
    """Test that keys projects every key, in order."""
    assert list(vs.keys({"b": 1, "a": 2, "c": 3})) == ["b", "a", "c"]


def test_keys_empty_mapping() -> None:
    """Test keys on an empty mapping."""
    assert list(vs.keys({})) == []
