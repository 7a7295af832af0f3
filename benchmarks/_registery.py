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
        est = int(TARGET_BENCH_SEC / 2 / warmup_time / CALLS_BY_RUN)
        return cls(size, max(MIN_RUNS, est), fn)


@dataclass(slots=True)
class Benchmark:
    """A registered benchmark, sized lazily."""

    category: str
    name: str
    func: Callable[[Any], object]
    gen: Callable[[range], Any]

    def variants(self) -> list[Variant]:
        """Build one variant per data size."""
        return [
            Variant.from_fn(partial(self.func, self.gen(range(size))), size)
            for size in SIZES
        ]


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
    *, gen: Callable[[range], P] = list
) -> Callable[[Callable[[P], object]], Callable[[P], object]]:
    """Decorator to register benchmarks with multiple data sizes."""

    def decorator(func: Callable[[P], object]) -> Callable[[P], object]:
        BENCHMARKS.append(
            Benchmark(func.__qualname__.split(".")[0], func.__name__, func, gen)
        )
        return func

    return decorator


def collect_raw_timings(benchmarks: list[Benchmark]) -> list[Row]:
    """Collect raw timing data for all benchmarks. Stats computed at the end."""
    sized = [(b, b.variants()) for b in benchmarks]
    total_runs = sum(v.n_runs for _, variants in sized for v in variants)
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
        return [
            row
            for benchmark, variants in sized
            for variant in variants
            for row in _run_variant(progress, task, variant, benchmark)
        ]


def _run_variant(
    progress: Progress,
    task: Any,  # noqa: ANN401
    variant: Variant,
    bench: Benchmark,
) -> list[Row]:
    progress.update(
        task,
        description=f"[cyan]{bench.category}: {bench.name} @ {variant.size}",
    )
    rows: list[Row] = []
    for run_idx in range(variant.n_runs):
        time_taken = timeit.timeit(variant.fn, number=CALLS_BY_RUN)
        progress.advance(task)
        rows.append(Row(bench.category, bench.name, variant.size, run_idx, time_taken))
    return rows
