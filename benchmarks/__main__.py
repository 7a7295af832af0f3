"""Entry point for benchmarks CLI."""

from typing import Annotated

import typer

import pyoutcome as po

from . import benchs  # pyright: ignore[reportUnusedImport] # noqa: F401
from ._pipeline import NoBenchmarksError, Summary, run_pipeline, select, to_table
from ._registery import CONSOLE

app = typer.Typer(help="Benchmarks for pyoutcome developments.")

CategoryOption = Annotated[
    str | None, typer.Option("--category", "-c", help="Only this benchmark class.")
]


def _exit_with(error: NoBenchmarksError) -> None:
    CONSOLE.print(f"✗ {error}", style="bold red")
    raise typer.Exit(code=1)


@app.command("list")
def list_benchmarks(*, category: CategoryOption = None) -> None:
    """List registered benchmarks."""
    match select(category):
        case po.Succeeded(benchmarks):
            for benchmark in benchmarks:
                CONSOLE.print(f"{benchmark.category}.{benchmark.name}")
        case po.Failed(error):
            _exit_with(error)


@app.command()
def run(*, category: CategoryOption = None) -> None:
    """Run benchmarks and print median timings."""
    CONSOLE.print("Running benchmarks...", style="bold blue")

    def _show(summaries: list[Summary]) -> None:
        CONSOLE.print()
        CONSOLE.print(to_table(summaries))

    run_pipeline(category).fold(_show, _exit_with)


if __name__ == "__main__":
    app()
