"""Benchmarks for vecselect operations."""

import random

import vecselect as vs

from ._registery import bench


def _is_even(x: int) -> bool:
    return x % 2 == 0


def _halves(size: range) -> tuple[tuple[int, ...], tuple[int, ...]]:
    return tuple(size), tuple(range(0, len(size), 2))


def _with_repeats(size: range) -> tuple[int, ...]:
    return tuple(x % 64 for x in size)


class Filters:
    """Benchmark the predicate filters."""

    @bench()
    @staticmethod
    def filter_predicate(data: tuple[int, ...]) -> object:
        """Benchmark filter with an explicit predicate."""
        return vs.filter(data, _is_even)

    @bench()
    @staticmethod
    def filter_truthy(data: tuple[int, ...]) -> object:
        """Benchmark filter with the default predicate."""
        return vs.filter(data)

    @bench(gen=lambda size: tuple(None if x % 3 else x for x in size))
    @staticmethod
    def filter_nulls(data: tuple[int | None, ...]) -> object:
        """Benchmark filter_nulls."""
        return vs.filter_nulls(data)

    @bench(gen=lambda size: {x: x * 2 for x in size})
    @staticmethod
    def filter_with_key(data: dict[int, int]) -> object:
        """Benchmark filter_with_key."""
        return vs.filter_with_key(data, lambda k, v: k % 2 == 0 and v > 10)


class SetAlgebra:
    """Benchmark the keyed set operations."""

    @bench(gen=_halves)
    @staticmethod
    def diff(data: tuple[tuple[int, ...], tuple[int, ...]]) -> object:
        """Benchmark diff."""
        return vs.diff(*data)

    @bench(gen=_halves)
    @staticmethod
    def diff_by(data: tuple[tuple[int, ...], tuple[int, ...]]) -> object:
        """Benchmark diff_by."""
        return vs.diff_by(*data, lambda x: x // 2)

    @bench(gen=_halves)
    @staticmethod
    def intersect(data: tuple[tuple[int, ...], tuple[int, ...]]) -> object:
        """Benchmark intersect."""
        return vs.intersect(*data)

    @bench(gen=_with_repeats)
    @staticmethod
    def unique(data: tuple[int, ...]) -> object:
        """Benchmark unique."""
        return vs.unique(data)

    @bench(gen=_with_repeats)
    @staticmethod
    def unique_by(data: tuple[int, ...]) -> object:
        """Benchmark unique_by."""
        return vs.unique_by(data, lambda x: x % 7)


class Positional:
    """Benchmark take, drop and slice."""

    @bench()
    @staticmethod
    def take(data: tuple[int, ...]) -> object:
        """Benchmark take of half the input."""
        return vs.take(data, len(data) // 2)

    @bench()
    @staticmethod
    def drop(data: tuple[int, ...]) -> object:
        """Benchmark drop of half the input."""
        return vs.drop(data, len(data) // 2)

    @bench()
    @staticmethod
    def slice(data: tuple[int, ...]) -> object:  # noqa: A003
        """Benchmark slice of the middle half."""
        return vs.slice(data, len(data) // 4, len(data) // 2)


class Sampling:
    """Benchmark shuffle and sample."""

    @bench()
    @staticmethod
    def shuffle(data: tuple[int, ...]) -> object:
        """Benchmark a full shuffle."""
        return vs.shuffle(data, random.Random(0))

    @bench()
    @staticmethod
    def sample_small(data: tuple[int, ...]) -> object:
        """Benchmark a sample of 10 elements, which still shuffles the whole input."""
        return vs.sample(data, 10, random.Random(0))
