"""Set-style selections keyed by a scalar identity.

Every operation here that must keep the duplicates of its first argument builds a `Keyset`
from the other arguments, then delegates to `filter` with a membership predicate.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable

from ._dict import Dict
from ._filters import filter  # noqa: A004
from ._keyset import Keyset
from ._seq import Seq


def diff[T: Hashable](
    first: Iterable[T], second: Iterable[T], *rest: Iterable[T]
) -> Seq[T]:
    """Return the elements of **first** that appear in none of the other iterables.

    Duplicates in **first** are kept. For non-hashable elements, see `diff_by`.

    Args:
        first (Iterable[T]): Values to select from.
        second (Iterable[T]): Values to remove.
        *rest (Iterable[T]): More values to remove.

    Returns:
        Seq[T]: The remaining elements of **first**, in order.

    Example:
    ```python
    >>> import vecselect as vs
    >>> vs.diff([1, 2, 2, 3, 4], [2], [4, 5])
    Seq(1, 3)
    >>> vs.diff([1, 1, 2], [])
    Seq(1, 1, 2)

    ```
    """
    values = tuple(first)
    if not values:
        return Seq(())
    union = Keyset.union(second, *rest)
    if not union:
        return Seq(values)
    return filter(values, lambda value: value not in union)


def diff_by[T, S: Hashable](
    first: Iterable[T], second: Iterable[T], key_fn: Callable[[T], S]
) -> Seq[T]:
    """Return the elements of **first** whose identity does not appear in **second**.

    The identity of an element is the scalar returned by **key_fn**. For hashable elements, see `diff`.

    Args:
        first (Iterable[T]): Values to select from.
        second (Iterable[T]): Values to remove.
        key_fn (Callable[[T], S]): Scalar key extractor, applied to both iterables.

    Returns:
        Seq[T]: The remaining elements of **first**, in order.

    Example:
    ```python
    >>> import vecselect as vs
    >>> users = [{"id": 1}, {"id": 2}, {"id": 3}]
    >>> vs.diff_by(users, [{"id": 2}], lambda u: u["id"])
    Seq({'id': 1}, {'id': 3})

    ```
    """
    values = tuple(first)
    if not values:
        return Seq(())
    removed = Keyset.map(second, key_fn)
    if not removed:
        return Seq(values)
    return filter(values, lambda value: key_fn(value) not in removed)


def intersect[T: Hashable](
    first: Iterable[T], second: Iterable[T], *rest: Iterable[T]
) -> Seq[T]:
    """Return the elements of **first** that appear in every other iterable.

    Duplicates in **first** are kept.

    Args:
        first (Iterable[T]): Values to select from.
        second (Iterable[T]): Values to intersect with.
        *rest (Iterable[T]): More values to intersect with.

    Returns:
        Seq[T]: The common elements, in the order of **first**.

    Example:
    ```python
    >>> import vecselect as vs
    >>> vs.intersect([1, 1, 2, 3], [1, 2], [2, 1, 5])
    Seq(1, 1, 2)

    ```
    """
    values = tuple(first)
    intersection = Keyset.intersect(values, second, *rest)
    if not intersection:
        return Seq(())
    return filter(values, lambda value: value in intersection)


def unique[T: Hashable](data: Iterable[T]) -> Seq[T]:
    """Return each element of **data** exactly once, in order of first occurrence.

    For non-hashable elements, see `unique_by`.

    Example:
    ```python
    >>> import vecselect as vs
    >>> vs.unique([3, 1, 3, 2, 1])
    Seq(3, 1, 2)

    ```
    """
    return Seq(tuple(Keyset.from_(data)))


def unique_by[T, S: Hashable](data: Iterable[T], key_fn: Callable[[T], S]) -> Seq[T]:
    """Return one element per identity, where identity is the scalar returned by **key_fn**.

    In case of duplicate keys, later values overwrite previous ones: each key keeps the
    position of its first occurrence, but holds the value of its last one.

    Args:
        data (Iterable[T]): Values to deduplicate.
        key_fn (Callable[[T], S]): Scalar key extractor.

    Returns:
        Seq[T]: One element per key.

    Example:
    ```python
    >>> import vecselect as vs
    >>> vs.unique_by([("a", 1), ("b", 2), ("a", 3)], lambda pair: pair[0])
    Seq(('a', 3), ('b', 2))

    ```
    """
    return Dict.from_values(data, key_fn).values_seq()
