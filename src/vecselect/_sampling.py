"""Random permutations and samples.

The randomness provider is resolved, in order, from the `rng` argument, from the provider
installed by `seeded` or `using_rng` in the current context, then from the process-wide `random` module.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable, Iterator, MutableSequence
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Protocol

from ._core import check_non_negative
from ._positional import take
from ._seq import Seq

logger = logging.getLogger(__name__)


class Shuffler(Protocol):
    """Anything able to shuffle a list in place, such as `random.Random`."""

    def shuffle(self, x: MutableSequence[Any], /) -> None: ...


_SCOPED_RNG: ContextVar[Shuffler | None] = ContextVar("vecselect_rng", default=None)


def _resolve(rng: Shuffler | None) -> Shuffler:
    if rng is not None:
        logger.debug("shuffling with explicit provider %r", rng)
        return rng
    scoped = _SCOPED_RNG.get()
    if scoped is not None:
        logger.debug("shuffling with scoped provider %r", scoped)
        return scoped
    logger.debug("shuffling with the process-wide random module")
    return random  # pyright: ignore[reportReturnType]


@contextmanager
def using_rng(rng: Shuffler) -> Iterator[Shuffler]:
    """Use **rng** for every `shuffle` and `sample` call inside the `with` block.

    The provider is stored in a `ContextVar`, so it does not leak to other threads or tasks.

    Args:
        rng (Shuffler): The provider to install.

    Yields:
        Shuffler: The installed provider.
    """
    token = _SCOPED_RNG.set(rng)
    try:
        yield rng
    finally:
        _SCOPED_RNG.reset(token)


@contextmanager
def seeded(seed: int | str | bytes) -> Iterator[Shuffler]:
    """Make `shuffle` and `sample` deterministic inside the `with` block.

    Args:
        seed (int | str | bytes): Seed of the `random.Random` instance installed for the block.

    Yields:
        Shuffler: The seeded provider.

    Example:
    ```python
    >>> import vecselect as vs
    >>> with vs.seeded(42):
    ...     first = vs.sample(range(100), 5)
    >>> with vs.seeded(42):
    ...     second = vs.sample(range(100), 5)
    >>> first == second
    True

    ```
    """
    with using_rng(random.Random(seed)) as rng:
        yield rng


def shuffle[T](data: Iterable[T], rng: Shuffler | None = None) -> Seq[T]:
    """Return a new `Seq` holding the elements of **data** in a uniformly random order.

    Args:
        data (Iterable[T]): Values to permute. Never modified.
        rng (Shuffler | None): Randomness provider. Defaults to the scoped or process-wide one.

    Returns:
        Seq[T]: A random permutation of **data**.

    Example:
    ```python
    >>> import random
    >>> import vecselect as vs
    >>> data = [1, 2, 3, 4]
    >>> sorted(vs.shuffle(data, random.Random(0)))
    [1, 2, 3, 4]
    >>> data
    [1, 2, 3, 4]

    ```
    """
    values = list(data)
    _resolve(rng).shuffle(values)
    return Seq(tuple(values))


def sample[T](data: Iterable[T], sample_size: int, rng: Shuffler | None = None) -> Seq[T]:
    """Return a new `Seq` holding an unbiased random sample of up to **sample_size** elements.

    Fewer elements are returned only if **sample_size** is larger than the size of **data**.

    The whole input is shuffled before the first **sample_size** elements are taken, so every
    subset of that size is equally likely, at the price of O(n) work whatever the sample size.

    Args:
        data (Iterable[T]): Values to sample from.
        sample_size (int): Number of elements to draw.
        rng (Shuffler | None): Randomness provider. Defaults to the scoped or process-wide one.

    Returns:
        Seq[T]: The sampled elements, in random order.

    Raises:
        InvalidArgument: If **sample_size** is negative.

    Example:
    ```python
    >>> import random
    >>> import vecselect as vs
    >>> result = vs.sample(range(10), 3, random.Random(1))
    >>> len(result), len(set(result)), set(result) <= set(range(10))
    (3, 3, True)

    ```
    """
    check_non_negative(sample_size, "sample size")
    return take(shuffle(data, rng), sample_size)
