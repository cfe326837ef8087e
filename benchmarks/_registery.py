import statistics
import timeit
from collections.abc import Callable
from dataclasses import dataclass
from functools import partial
from typing import Any, Final, NamedTuple, Self

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeRemainingColumn,
)
from rich.table import Table

import vecselect as vs

type BenchFn = Callable[[], object]


WARMUP_RUNS: Final = 5
CALLS_BY_RUN: Final = 10
TARGET_BENCH_SEC: Final = 1
MIN_RUNS: Final = 20
SIZES: Final = (256, 512, 1024, 2048)

CONSOLE: Final = Console()


class Variant(NamedTuple):
    """A specific benchmark variant size."""

    size: int
    n_runs: int
    fn: BenchFn

    @classmethod
    def from_fn(cls, fn: BenchFn, size: int) -> Self:
        """Estimate number of runs needed for benchmark variant."""
        warmup_time = timeit.timeit(fn, number=WARMUP_RUNS) / WARMUP_RUNS
        est = int(TARGET_BENCH_SEC / 2 / max(warmup_time, 1e-9) / CALLS_BY_RUN)
        return cls(size, max(MIN_RUNS, est), fn)


class Benchmark(NamedTuple):
    """A benchmark with multiple data sizes."""

    category: str
    name: str
    variants: vs.Seq[Variant]


@dataclass(slots=True)
class Row:
    """Raw row of timing data."""

    category: str
    name: str
    size: int
    run_idx: int
    time: float


BENCHMARKS: list[Benchmark] = []


def bench[P](
    *, gen: Callable[[range], P] = lambda size: tuple(size)
) -> Callable[[Callable[[P], object]], Callable[[P], object]]:
    """Decorator to register benchmarks with multiple data sizes."""

    def decorator(func: Callable[[P], object]) -> Callable[[P], object]:
        variants = vs.Seq(
            tuple(
                Variant.from_fn(partial(func, gen(range(size))), size)
                for size in SIZES
            )
        )
        BENCHMARKS.append(
            Benchmark(func.__qualname__.split(".")[0], func.__name__, variants)
        )
        return func

    return decorator


def select(benchmarks: list[Benchmark], pattern: str | None) -> vs.Seq[Benchmark]:
    """Keep the benchmarks whose `category.name` contains **pattern**."""
    if pattern is None:
        return vs.Seq(tuple(benchmarks))
    needle = pattern.lower()
    return vs.filter(
        benchmarks, lambda b: needle in f"{b.category}.{b.name}".lower()
    )


def collect_raw_timings(benchmarks: vs.Seq[Benchmark]) -> vs.Seq[Row]:
    """Collect raw timing data for all benchmarks. Stats computed at the end."""
    total_runs = sum(v.n_runs for b in benchmarks for v in b.variants)
    CONSOLE.print(
        f"Found {len(benchmarks)} benchmarks, {total_runs} total runs",
        style="bold white",
    )

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        TimeRemainingColumn(),
        console=CONSOLE,
    ) as progress:
        task = progress.add_task("[cyan]Running benchmarks...", total=total_runs)
        f = partial(_run_variant, progress, task)
        return vs.Seq(
            tuple(row for b in benchmarks for v in b.variants for row in f(v, b))
        )


def _run_variant(
    progress: Progress,
    task: Any,  # noqa: ANN401
    variant: Variant,
    bench: Benchmark,
) -> list[Row]:
    rows: list[Row] = []
    for run_idx in range(variant.n_runs):
        progress.update(
            task,
            description=f"[cyan]{bench.category}: {bench.name} @ {variant.size}",
        )
        time_taken = timeit.timeit(variant.fn, number=CALLS_BY_RUN)
        progress.advance(task)
        rows.append(Row(bench.category, bench.name, variant.size, run_idx, time_taken))
    return rows


def summary_table(rows: vs.Seq[Row]) -> Table:
    """Build a table of median timings per benchmark and size."""
    table = Table(title="vecselect benchmarks")
    table.add_column("category")
    table.add_column("name")
    for column in ("size", "runs", "median (µs/call)"):
        table.add_column(column, justify="right")

    def _key(r: Row) -> tuple[str, str, int]:
        return (r.category, r.name, r.size)

    for key in vs.Keyset.map(rows, _key):
        category, name, size = key
        times = vs.filter(rows, lambda r: _key(r) == key)  # noqa: B023
        median = statistics.median(r.time for r in times) / CALLS_BY_RUN * 1e6
        table.add_row(category, name, str(size), str(len(times)), f"{median:.2f}")
    return table
