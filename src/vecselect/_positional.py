"""Selections keyed by index rather than by value."""

from __future__ import annotations

from collections.abc import Iterable

import cytoolz as cz
import more_itertools as mit

from ._core import check_non_negative
from ._seq import Seq


def take[T](data: Iterable[T], n: int) -> Seq[T]:
    """Return a new `Seq` holding the first **n** elements of **data**, or fewer if it ends sooner.

    Iteration stops as soon as **n** elements are collected, so **data** may be infinite.

    To drop the first **n** elements, see `drop`.

    Args:
        data (Iterable[T]): Values to take from.
        n (int): Number of elements to take.

    Returns:
        Seq[T]: The prefix of **data**.

    Raises:
        InvalidArgument: If **n** is negative.

    Example:
    ```python
    >>> import itertools
    >>> import vecselect as vs
    >>> vs.take([1, 2, 3], 2)
    Seq(1, 2)
    >>> vs.take([1, 2, 3], 5)
    Seq(1, 2, 3)
    >>> vs.take(itertools.count(), 3)
    Seq(0, 1, 2)

    ```
    """
    if n == 0:
        return Seq(())
    check_non_negative(n, "N")
    return Seq(tuple(cz.itertoolz.take(n, data)))


def drop[T](data: Iterable[T], n: int) -> Seq[T]:
    """Return a new `Seq` holding all except the first **n** elements of **data**.

    To take only the first **n** elements, see `take`.

    Args:
        data (Iterable[T]): Values to drop from.
        n (int): Number of elements to drop.

    Returns:
        Seq[T]: The elements at positions `>= n`.

    Raises:
        InvalidArgument: If **n** is negative.

    Example:
    ```python
    >>> import vecselect as vs
    >>> vs.drop([1, 2, 3], 1)
    Seq(2, 3)
    >>> vs.drop([1, 2, 3], 10)
    Seq()

    ```
    """
    check_non_negative(n, "N")
    return Seq(tuple(cz.itertoolz.drop(n, data)))


def slice[T](data: Iterable[T], offset: int, length: int | None = None) -> Seq[T]:  # noqa: A001
    """Return a new `Seq` holding up to **length** elements of **data**, starting at **offset**.

    If no length is given, or it exceeds what remains after the offset, every element after the offset is returned.

    Args:
        data (Iterable[T]): Values to slice.
        offset (int): Position of the first element to keep.
        length (int | None): Maximum number of elements to keep. Defaults to None.

    Returns:
        Seq[T]: The selected subsequence.

    Raises:
        InvalidArgument: If **offset** or **length** is negative.

    Example:
    ```python
    >>> import vecselect as vs
    >>> data = [0, 1, 2, 3, 4]
    >>> vs.slice(data, 1, 2)
    Seq(1, 2)
    >>> vs.slice(data, 3)
    Seq(3, 4)
    >>> vs.slice(data, 10)
    Seq()

    ```
    """
    check_non_negative(offset, "offset")
    if length is not None:
        check_non_negative(length, "length")
    stop = None if length is None else offset + length
    return Seq(tuple(mit.islice_extended(data, offset, stop)))
