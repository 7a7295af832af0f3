"""Benchmarks for pyoutcome package - benchs.py."""

import pyoutcome as po

from ._registery import bench

# Helper functions
# ------------------------------------------------------------


def _parse(raw: str) -> int:
    return int(raw)


def _half(x: int) -> po.Outcome[int, ValueError]:
    if x % 2:
        return po.failed(ValueError(x))
    return po.succeeded(x // 2)


def _mixed(size: range) -> list[str]:
    return [str(x) if x % 4 else "not a number" for x in size]


# Benchmark classes
# ------------------------------------------------------------


class Of:
    """Benchmark `of` against a bare try/except."""

    @bench(gen=_mixed)
    @staticmethod
    def with_of(data: list[str]) -> object:
        """Benchmark catching parse errors with `of`."""
        return [po.of(lambda: _parse(raw), ValueError).or_else(0) for raw in data]

    @bench(gen=_mixed)
    @staticmethod
    def with_try(data: list[str]) -> object:
        """Benchmark catching parse errors with try/except."""
        total: list[int] = []
        for raw in data:
            try:
                total.append(_parse(raw))
            except ValueError:
                total.append(0)
        return total


class Chain:
    """Benchmark combinator chains on both variants."""

    @bench()
    @staticmethod
    def map_fold(data: list[int]) -> object:
        """Benchmark map then fold."""
        return [
            po.succeeded(x).map(lambda v: v + 1).fold(str, lambda _: "") for x in data
        ]

    @bench()
    @staticmethod
    def flat_map(data: list[int]) -> object:
        """Benchmark flat_map with half of the values failing."""
        return [po.succeeded(x).flat_map(_half).or_else(-1) for x in data]

    @bench()
    @staticmethod
    def match_variant(data: list[int]) -> object:
        """Benchmark pattern matching on the variant."""
        total = 0
        for x in data:
            match _half(x):
                case po.Succeeded(value):
                    total += value
                case po.Failed(_):
                    total -= 1
        return total
