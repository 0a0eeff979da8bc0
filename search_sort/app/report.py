"""Console rendering of command results."""

from collections.abc import Iterable, Sequence
from typing import Any

from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..common.pydantic import BenchResult


def format_values(values: Sequence[Any]) -> str:
    """Format values as a space separated line."""
    return " ".join(str(v) for v in values)


def format_duration(seconds: float) -> str:
    """Format a duration with a readable unit."""
    if seconds < 1e-3:
        return f"{seconds * 1e6:.1f} µs"
    if seconds < 1:
        return f"{seconds * 1e3:.2f} ms"
    return f"{seconds:.3f} s"


def bench_table(results: Iterable[BenchResult]) -> Table:
    """Build a table of benchmark results, fastest first within each size."""
    table = Table(title="Sort benchmark")
    table.add_column("size", justify="right")
    table.add_column("algorithm")
    table.add_column("distribution")
    table.add_column("best", justify="right")
    table.add_column("mean", justify="right")

    for result in sorted(results, key=lambda r: (r.size, r.best_seconds)):
        table.add_row(
            str(result.size),
            result.algorithm,
            result.distribution,
            format_duration(result.best_seconds),
            format_duration(result.mean_seconds),
        )
    return table


def search_message(index: int | None, value: Any) -> Text:
    """Describe the outcome of a search."""
    if index is None:
        return Text(f"{value} not found", style="red")
    return Text(f"{value} found at index {index}", style="green")


def print_renderable(renderable: Any, console: Console | None = None) -> None:
    """Print to the given console or a fresh one on stdout."""
    (console or Console()).print(renderable)
