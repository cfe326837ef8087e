from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Iterator, Sequence
from typing import TYPE_CHECKING, Any, overload

import cytoolz as cz

from ._core import CommonBase, get_config

if TYPE_CHECKING:
    from ._dict import Dict
    from ._keyset import Keyset
    from ._sampling import Shuffler


class Seq[T](CommonBase[tuple[T, ...]], Sequence[T]):
    """`Seq` represent an immutable, in memory Sequence.

    Every selection function of the library returns a new `Seq`, and every one of them is also available as a method, so calls can be chained.

    Implements the `Sequence` Protocol from `collections.abc`, so it can be used as a standard immutable sequence.

    If you already have a tuple, simply pass it to the constructor, without runtime checks.

    Otherwise, use the `from_` class method to create a `Seq` from any `Iterable` or unpacked values.

    Args:
        data (tuple[T, ...]): The data to initialize the Seq with.

    Example:
    ```python
    >>> import vecselect as vs
    >>> vs.Seq((5, 1, 5, 2, 8, 1)).unique().filter(lambda x: x > 1).take(2)
    Seq(5, 2)

    ```
    """

    _inner: tuple[T, ...]

    __slots__ = ("_inner",)

    def __init__(self, data: tuple[T, ...]) -> None:
        self._inner = data

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({get_config().iter_repr(self._inner)})"

    def __iter__(self) -> Iterator[T]:
        return iter(self._inner)

    @overload
    def __getitem__(self, index: int) -> T: ...
    @overload
    def __getitem__(self, index: slice[Any, Any, Any]) -> Sequence[T]: ...
    def __getitem__(self, index: int | slice[Any, Any, Any]) -> T | Sequence[T]:
        return self._inner.__getitem__(index)

    def __len__(self) -> int:
        return len(self._inner)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Seq):
            return NotImplemented
        return self._inner == other._inner

    def __hash__(self) -> int:
        return hash(self._inner)

    @overload
    @staticmethod
    def from_[U](data: Iterable[U]) -> Seq[U]: ...
    @overload
    @staticmethod
    def from_[U](data: U, *more_data: U) -> Seq[U]: ...
    @staticmethod
    def from_[U](data: Iterable[U] | U, *more_data: U) -> Seq[U]:
        """Create a `Seq` from an `Iterable` or unpacked values.

        Prefer using the standard constructor, as this method involves extra checks and conversions steps.

        Args:
            data (Iterable[U] | U): Iterable to convert into a sequence, or a single value.
            *more_data (U): Unpacked items to include in the sequence, if 'data' is not an Iterable.

        Returns:
            Seq[U]: A new Seq instance containing the provided data.

        Example:
        ```python
        >>> import vecselect as vs
        >>> vs.Seq.from_(1, 2, 3)
        Seq(1, 2, 3)
        >>> vs.Seq.from_([1, 2, 3])
        Seq(1, 2, 3)

        ```
        """
        converted = data if cz.itertoolz.isiterable(data) else (data, *more_data)
        return Seq(converted if isinstance(converted, tuple) else tuple(converted))  # pyright: ignore[reportUnknownArgumentType]

    # filters ------------------------------------------------------------
    def filter(self, predicate: Callable[[T], object] | None = None) -> Seq[T]:
        """Keep the values for which **predicate** returns `True`. See `vecselect.filter`.

        Example:
        ```python
        >>> import vecselect as vs
        >>> vs.Seq((1, 2, 3)).filter(lambda x: x > 1)
        Seq(2, 3)

        ```
        """
        from ._filters import filter

        return self.into(filter, predicate)

    def filter_nulls[U](self: Seq[U | None]) -> Seq[U]:
        """Keep the values that are not `None`. See `vecselect.filter_nulls`.

        Example:
        ```python
        >>> import vecselect as vs
        >>> vs.Seq((1, None, 0)).filter_nulls()
        Seq(1, 0)

        ```
        """
        from ._filters import filter_nulls

        return self.into(filter_nulls)

    # set algebra --------------------------------------------------------
    def diff[U: Hashable](self: Seq[U], other: Iterable[U], *others: Iterable[U]) -> Seq[U]:
        """Remove the values present in any of the given iterables. See `vecselect.diff`.

        Example:
        ```python
        >>> import vecselect as vs
        >>> vs.Seq((1, 2, 2, 3)).diff([2])
        Seq(1, 3)

        ```
        """
        from ._sets import diff

        return self.into(diff, other, *others)

    def diff_by[S: Hashable](self, other: Iterable[T], key_fn: Callable[[T], S]) -> Seq[T]:
        """Remove the values whose key appears among the keys of **other**. See `vecselect.diff_by`.

        Example:
        ```python
        >>> import vecselect as vs
        >>> vs.Seq(("a1", "b1", "c1")).diff_by(["b2"], lambda s: s[0])
        Seq('a1', 'c1')

        ```
        """
        from ._sets import diff_by

        return self.into(diff_by, other, key_fn)

    def intersect[U: Hashable](
        self: Seq[U], other: Iterable[U], *others: Iterable[U]
    ) -> Seq[U]:
        """Keep the values present in every given iterable. See `vecselect.intersect`.

        Example:
        ```python
        >>> import vecselect as vs
        >>> vs.Seq((1, 1, 2, 3)).intersect([1, 2])
        Seq(1, 1, 2)

        ```
        """
        from ._sets import intersect

        return self.into(intersect, other, *others)

    def unique[U: Hashable](self: Seq[U]) -> Seq[U]:
        """Keep the first occurrence of each value. See `vecselect.unique`.

        Example:
        ```python
        >>> import vecselect as vs
        >>> vs.Seq((3, 1, 3, 2, 1)).unique()
        Seq(3, 1, 2)

        ```
        """
        from ._sets import unique

        return self.into(unique)

    def unique_by[S: Hashable](self, key_fn: Callable[[T], S]) -> Seq[T]:
        """Keep one value per key, placed at the first occurrence and holding the last one. See `vecselect.unique_by`.

        Example:
        ```python
        >>> import vecselect as vs
        >>> vs.Seq(("ant", "bee", "asp")).unique_by(lambda s: s[0])
        Seq('asp', 'bee')

        ```
        """
        from ._sets import unique_by

        return self.into(unique_by, key_fn)

    # positional ---------------------------------------------------------
    def take(self, n: int) -> Seq[T]:
        """Keep the first **n** values. See `vecselect.take`.

        Example:
        ```python
        >>> import vecselect as vs
        >>> vs.Seq((1, 2, 3)).take(2)
        Seq(1, 2)

        ```
        """
        from ._positional import take

        return self.into(take, n)

    def drop(self, n: int) -> Seq[T]:
        """Remove the first **n** values. See `vecselect.drop`.

        Example:
        ```python
        >>> import vecselect as vs
        >>> vs.Seq((1, 2, 3)).drop(2)
        Seq(3,)

        ```
        """
        from ._positional import drop

        return self.into(drop, n)

    def slice(self, offset: int, length: int | None = None) -> Seq[T]:
        """Keep up to **length** values starting at **offset**. See `vecselect.slice`.

        Example:
        ```python
        >>> import vecselect as vs
        >>> vs.Seq((0, 1, 2, 3, 4)).slice(1, 3)
        Seq(1, 2, 3)

        ```
        """
        from ._positional import slice

        return self.into(slice, offset, length)

    # sampling -----------------------------------------------------------
    def shuffle(self, rng: Shuffler | None = None) -> Seq[T]:
        """Return the values in a random order. See `vecselect.shuffle`."""
        from ._sampling import shuffle

        return self.into(shuffle, rng)

    def sample(self, sample_size: int, rng: Shuffler | None = None) -> Seq[T]:
        """Draw an unbiased random sample of up to **sample_size** values. See `vecselect.sample`."""
        from ._sampling import sample

        return self.into(sample, sample_size, rng)

    # conversions --------------------------------------------------------
    def to_keyset[U: Hashable](self: Seq[U]) -> Keyset[U]:
        """Convert to a `Keyset`, discarding repeated values.

        Example:
        ```python
        >>> import vecselect as vs
        >>> vs.Seq((2, 1, 2)).to_keyset()
        Keyset(2, 1)

        ```
        """
        from ._keyset import Keyset

        return self.into(Keyset.from_)

    def index_by[S: Hashable](self, key_fn: Callable[[T], S]) -> Dict[S, T]:
        """Index the values by **key_fn**, later values overwriting earlier ones in place.

        Example:
        ```python
        >>> import vecselect as vs
        >>> vs.Seq(("ant", "bee", "asp")).index_by(lambda s: s[0])
        {'a': 'asp', 'b': 'bee'}

        ```
        """
        from ._dict import Dict

        return self.into(Dict.from_values, key_fn)
