"""Single-pass predicate filters, the primitive behind every set-algebra operation."""

from __future__ import annotations

import builtins
from collections.abc import Callable, Iterable, Mapping

from ._seq import Seq


def filter[T](data: Iterable[T], predicate: Callable[[T], object] | None = None) -> Seq[T]:  # noqa: A001
    """Return a new `Seq` holding only the values for which **predicate** returns `True`.

    The default predicate is the truthiness of the value.

    Args:
        data (Iterable[T]): Values to filter.
        predicate (Callable[[T], object] | None): Function to evaluate each item. Defaults to `bool`.

    Returns:
        Seq[T]: The kept values, in their original order.

    Example:
    ```python
    >>> import vecselect as vs
    >>> vs.filter([0, 1, 2, 3, 4], lambda x: x % 2 == 0)
    Seq(0, 2, 4)
    >>> vs.filter([0, 1, "", "a", None, False])
    Seq(1, 'a')

    ```
    """
    return Seq(tuple(builtins.filter(predicate, data)))


def filter_nulls[T](data: Iterable[T | None]) -> Seq[T]:
    """Return a new `Seq` holding only the values that are not `None`.

    Unlike `filter`, falsy values such as `0` or `""` are kept.

    Args:
        data (Iterable[T | None]): Values to filter.

    Returns:
        Seq[T]: The non-null values.

    Example:
    ```python
    >>> import vecselect as vs
    >>> vs.filter_nulls([0, None, "", None, 3])
    Seq(0, '', 3)

    ```
    """
    return Seq(tuple(value for value in data if value is not None))


def filter_with_key[K, V](data: Mapping[K, V], predicate: Callable[[K, V], object]) -> Seq[V]:
    """Return a new `Seq` holding the values for which **predicate** returns `True`.

    The predicate receives both the key and the value. If you don't need the key, see `filter`.

    Args:
        data (Mapping[K, V]): Keyed values to filter.
        predicate (Callable[[K, V], object]): Function called with each `(key, value)`.

    Returns:
        Seq[V]: The kept values, in iteration order.

    Example:
    ```python
    >>> import vecselect as vs
    >>> vs.filter_with_key({"a": 1, "b": 2, "c": 3}, lambda k, v: k == "a" or v > 2)
    Seq(1, 3)

    ```
    """
    return Seq(tuple(value for key, value in data.items() if predicate(key, value)))


def keys[K](data: Mapping[K, object]) -> Seq[K]:
    """Return a new `Seq` holding the keys of **data**, in iteration order.

    Example:
    ```python
    >>> import vecselect as vs
    >>> vs.keys({"b": 1, "a": 2})
    Seq('b', 'a')

    ```
    """
    return Seq(tuple(data))
