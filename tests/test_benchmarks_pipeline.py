"""Tests for the benchmark aggregation helpers."""

import pytest

import pyoutcome as po
from benchmarks import _pipeline
from benchmarks._registery import Benchmark, Row


def _benchmark(category: str, name: str) -> Benchmark:
    return Benchmark(category, name, func=len, gen=list)


def test_select_without_benchmarks(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that an empty selection is a failed outcome."""
    monkeypatch.setattr(_pipeline, "BENCHMARKS", [])
    outcome = _pipeline.select()
    assert outcome.is_failure()
    assert isinstance(outcome.error(), _pipeline.NoBenchmarksError)


def test_select_by_category(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test filtering registered benchmarks by category."""
    registered = [_benchmark("Of", "with_of"), _benchmark("Chain", "map_fold")]
    monkeypatch.setattr(_pipeline, "BENCHMARKS", registered)
    assert _pipeline.select().get() == registered
    assert _pipeline.select("Chain").get() == [registered[1]]
    assert _pipeline.select("Missing").is_failure()


def test_summarize() -> None:
    """Test that summaries hold the median of each benchmark and size."""
    rows = [
        Row("Chain", "map_fold", 256, 0, 3.0),
        Row("Chain", "map_fold", 256, 1, 1.0),
        Row("Chain", "map_fold", 256, 2, 2.0),
        Row("Chain", "map_fold", 512, 0, 5.0),
    ]
    assert _pipeline.summarize(rows) == [
        _pipeline.Summary("Chain", "map_fold", 256, 3, 2.0),
        _pipeline.Summary("Chain", "map_fold", 512, 1, 5.0),
    ]


def test_run_pipeline_without_benchmarks(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that running nothing short-circuits before timing."""
    monkeypatch.setattr(_pipeline, "BENCHMARKS", [])
    outcome = _pipeline.run_pipeline()
    assert isinstance(outcome, po.Failed)


def test_to_table() -> None:
    """Test that every summary becomes a table row."""
    table = _pipeline.to_table([_pipeline.Summary("Of", "with_of", 256, 20, 0.5)])
    assert table.row_count == 1
