"""Entry point for benchmarks CLI."""

from typing import Annotated

import typer

from . import benchs  # pyright: ignore[reportUnusedImport] # noqa: F401
from ._registery import BENCHMARKS, CONSOLE, collect_raw_timings, select, summary_table

app = typer.Typer(help="Benchmarks for vecselect selection operations.")


@app.command(name="list")
def list_() -> None:
    """List the registered benchmarks."""
    for b in BENCHMARKS:
        CONSOLE.print(f"{b.category}.{b.name}", style="cyan")


@app.command()
def run(
    *,
    pattern: Annotated[
        str | None,
        typer.Option("--only", "-k", help="Run benchmarks whose name contains this."),
    ] = None,
) -> None:
    """Run benchmarks and print the median timings."""
    selected = select(BENCHMARKS, pattern)
    if not selected:
        CONSOLE.print(f"No benchmark matches {pattern!r}", style="bold red")
        raise typer.Exit(code=1)
    CONSOLE.print("Running benchmarks...", style="bold blue")
    rows = collect_raw_timings(selected)
    CONSOLE.print()
    CONSOLE.print(summary_table(rows))


if __name__ == "__main__":
    app()
