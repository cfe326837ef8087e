from __future__ import annotations

from collections.abc import Callable, Collection, Hashable, Iterable, Iterator

import cytoolz as cz

from ._core import CommonBase, get_config


class Keyset[K: Hashable](CommonBase[dict[K, None]], Collection[K]):
    """An insertion-ordered set of scalar keys.

    Membership tests are O(1), and iteration follows the order in which each key was first seen.

    This is the structure from which `diff`, `diff_by`, `intersect` and `unique` answer membership questions.

    Args:
        data (dict[K, None]): The mapping whose keys form the set.
    """

    __slots__ = ("_inner",)

    _inner: dict[K, None]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({get_config().iter_repr(self._inner)})"

    def __iter__(self) -> Iterator[K]:
        return iter(self._inner)

    def __len__(self) -> int:
        return len(self._inner)

    def __contains__(self, key: object) -> bool:
        return key in self._inner

    @staticmethod
    def from_[U: Hashable](data: Iterable[U]) -> Keyset[U]:
        """Create a `Keyset` from an `Iterable` of keys, discarding repeats.

        Args:
            data (Iterable[U]): Keys to insert, in order.

        Returns:
            Keyset[U]: The keys of **data**, each once, in first-occurrence order.

        Example:
        ```python
        >>> import vecselect as vs
        >>> vs.Keyset.from_([3, 1, 3, 2, 1])
        Keyset(3, 1, 2)

        ```
        """
        return Keyset(dict.fromkeys(data))

    @staticmethod
    def map[T, U: Hashable](data: Iterable[T], key_fn: Callable[[T], U]) -> Keyset[U]:
        """Create a `Keyset` from the keys extracted by **key_fn** on each element of **data**.

        Args:
            data (Iterable[T]): Elements to extract keys from.
            key_fn (Callable[[T], U]): Scalar key extractor.

        Returns:
            Keyset[U]: The extracted keys, in first-occurrence order.

        Example:
        ```python
        >>> import vecselect as vs
        >>> vs.Keyset.map(["apple", "avocado", "banana"], lambda s: s[0])
        Keyset('a', 'b')

        ```
        """
        return Keyset(dict.fromkeys(map(key_fn, data)))

    @staticmethod
    def union[U: Hashable](first: Iterable[U], *others: Iterable[U]) -> Keyset[U]:
        """Create a `Keyset` holding every key of every input.

        Args:
            first (Iterable[U]): First iterable of keys.
            *others (Iterable[U]): More iterables of keys.

        Returns:
            Keyset[U]: The union, ordered by first occurrence across the inputs.

        Example:
        ```python
        >>> import vecselect as vs
        >>> vs.Keyset.union([1, 2], [2, 3], [4, 1])
        Keyset(1, 2, 3, 4)

        ```
        """
        return Keyset(dict.fromkeys(cz.itertoolz.concat((first, *others))))

    @staticmethod
    def intersect[U: Hashable](
        first: Iterable[U], second: Iterable[U], *rest: Iterable[U]
    ) -> Keyset[U]:
        """Create a `Keyset` holding the keys present in every input.

        The order is the one of **first**.

        Args:
            first (Iterable[U]): Iterable whose order is kept.
            second (Iterable[U]): Iterable to intersect with.
            *rest (Iterable[U]): More iterables to intersect with.

        Returns:
            Keyset[U]: The intersection.

        Example:
        ```python
        >>> import vecselect as vs
        >>> vs.Keyset.intersect([3, 1, 2, 1], [1, 2, 3], [2, 3])
        Keyset(3, 2)

        ```
        """
        result = dict.fromkeys(first)
        for other in (second, *rest):
            if not result:
                break
            seen = Keyset.from_(other)
            result = {key: None for key in result if key in seen}
        return Keyset(result)
