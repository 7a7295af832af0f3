"""Aggregate raw benchmark timings into per-variant medians."""

import statistics
from itertools import groupby
from typing import NamedTuple

from rich.table import Table

import pyoutcome as po

from ._registery import BENCHMARKS, Benchmark, Row, collect_raw_timings


class Summary(NamedTuple):
    """Median timing of one benchmark at one data size."""

    category: str
    name: str
    size: int
    runs: int
    median: float


class NoBenchmarksError(LookupError):
    """Raised when the selection matches no registered benchmark."""


def select(category: str | None = None) -> po.Outcome[list[Benchmark], NoBenchmarksError]:
    """Registered benchmarks, optionally restricted to one category."""
    selected = [b for b in BENCHMARKS if category is None or b.category == category]
    return po.of_optional(
        selected or None,
        lambda: NoBenchmarksError(f"No benchmarks registered for {category!r}!"),
    )


def summarize(rows: list[Row]) -> list[Summary]:
    """Compute median stats from raw timings."""

    def _key(row: Row) -> tuple[str, str, int]:
        return (row.category, row.name, row.size)

    summaries: list[Summary] = []
    for (category, name, size), group in groupby(sorted(rows, key=_key), key=_key):
        times = [row.time for row in group]
        summaries.append(
            Summary(category, name, size, len(times), statistics.median(times))
        )
    return summaries


def run_pipeline(
    category: str | None = None,
) -> po.Outcome[list[Summary], NoBenchmarksError]:
    """Run the selected benchmarks and aggregate their timings."""
    return select(category).map(collect_raw_timings).map(summarize)


def to_table(summaries: list[Summary]) -> Table:
    """Render summaries as a rich table."""
    table = Table(title="Benchmark medians", show_header=True)
    table.add_column("Category", style="cyan")
    table.add_column("Name", style="magenta")
    table.add_column("Size", justify="right")
    table.add_column("Runs", justify="right")
    table.add_column("Median (s)", justify="right", style="green")
    for summary in summaries:
        table.add_row(
            summary.category,
            summary.name,
            str(summary.size),
            str(summary.runs),
            f"{summary.median:.6f}",
        )
    return table
