from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Iterator, Mapping
from typing import TYPE_CHECKING

from ._core import CommonBase, get_config

if TYPE_CHECKING:
    from ._seq import Seq


class Dict[K: Hashable, V](CommonBase[dict[K, V]], Mapping[K, V]):
    """An ordered collection of unique keys mapped to values.

    Iteration follows the order of *first* insertion: setting an existing key replaces its value but does not move it.

    Implement the `Mapping` interface, so it can be passed to anything expecting a read-only mapping.

    Args:
        data (dict[K, V]): The dictionary to wrap.
    """

    __slots__ = ("_inner",)

    _inner: dict[K, V]

    def __repr__(self) -> str:
        return f"{self.into(lambda d: get_config().dict_repr(d._inner))}"

    def __iter__(self) -> Iterator[K]:
        return self._inner.__iter__()

    def __len__(self) -> int:
        return len(self._inner)

    def __getitem__(self, key: K) -> V:
        return self._inner[key]

    @staticmethod
    def from_[G: Hashable, I](data: Mapping[G, I] | Iterable[tuple[G, I]]) -> Dict[G, I]:
        """Create a `Dict` from a mapping or an iterable of `(key, value)` pairs.

        Later pairs overwrite earlier ones in place.

        Args:
            data (Mapping[G, I] | Iterable[tuple[G, I]]): Object convertible into a dict.

        Returns:
            Dict[G, I]: Instance containing the data from the input.

        Example:
        ```python
        >>> import vecselect as vs
        >>> vs.Dict.from_([("a", 1), ("b", 2), ("a", 3)])
        {'a': 3, 'b': 2}

        ```
        """
        return Dict(dict(data))

    @staticmethod
    def from_values[T, U: Hashable](data: Iterable[T], key_fn: Callable[[T], U]) -> Dict[U, T]:
        """Index **data** by the scalar key extracted with **key_fn**.

        When two elements share a key, the later one overwrites the stored value, but the key keeps the position of its first occurrence.

        Args:
            data (Iterable[T]): Elements to index.
            key_fn (Callable[[T], U]): Scalar key extractor.

        Returns:
            Dict[U, T]: Mapping of extracted keys to the last element seen for each.

        Example:
        ```python
        >>> import vecselect as vs
        >>> vs.Dict.from_values(["ant", "bee", "asp"], lambda s: s[0])
        {'a': 'asp', 'b': 'bee'}

        ```
        """
        result: dict[U, T] = {}
        for value in data:
            result[key_fn(value)] = value
        return Dict(result)

    def keys_seq(self) -> Seq[K]:
        """Return the keys in iteration order.

        See `vecselect.keys`.

        Returns:
            Seq[K]: The keys.

        Example:
        ```python
        >>> import vecselect as vs
        >>> vs.Dict({"x": 1, "y": 2}).keys_seq()
        Seq('x', 'y')

        ```
        """
        from ._filters import keys

        return keys(self._inner)

    def values_seq(self) -> Seq[V]:
        """Return the values in iteration order.

        Returns:
            Seq[V]: The values.

        Example:
        ```python
        >>> import vecselect as vs
        >>> vs.Dict({"x": 1, "y": 2}).values_seq()
        Seq(1, 2)

        ```
        """
        from ._seq import Seq

        return Seq(tuple(self._inner.values()))

    def filter_with_key(self, predicate: Callable[[K, V], bool]) -> Seq[V]:
        """Return the values for which **predicate** returns `True` given their key and value.

        See `vecselect.filter_with_key`.

        Args:
            predicate (Callable[[K, V], bool]): Function called with each `(key, value)`.

        Returns:
            Seq[V]: The selected values, in iteration order.

        Example:
        ```python
        >>> import vecselect as vs
        >>> vs.Dict({"a": 1, "b": 2, "c": 3}).filter_with_key(lambda k, v: k != "b")
        Seq(1, 3)

        ```
        """
        from ._filters import filter_with_key

        return filter_with_key(self._inner, predicate)
