"""Tests for structural pattern matching on outcomes."""

from __future__ import annotations

import pyoutcome as po


def _describe(outcome: po.Outcome[int | None, Exception]) -> str:
    match outcome:
        case po.Succeeded(None):
            return "empty"
        case po.Succeeded(value):
            return f"ok {value}"
        case po.Failed(KeyError() as error):
            return f"missing {error}"
        case po.Failed(error):
            return f"err {type(error).__name__}"
        case _:
            raise RuntimeError("unreachable")


def test_result_pattern_matching() -> None:
    """Test matching each variant positionally."""
    assert _describe(po.succeeded(42)) == "ok 42"
    assert _describe(po.failed(ValueError())) == "err ValueError"


def test_nested_pattern_matching() -> None:
    """Test matching on the payload inside the variant."""
    assert _describe(po.succeeded(None)) == "empty"
    assert _describe(po.failed(KeyError("k"))) == "missing 'k'"


def test_with_guards() -> None:
    """Test pattern matching with guards."""
    threshold = 10
    outcomes: list[po.Outcome[int, ValueError]] = [
        po.succeeded(5),
        po.succeeded(15),
        po.failed(ValueError("invalid")),
    ]
    labels: list[str] = []
    for outcome in outcomes:
        match outcome:
            case po.Succeeded(value) if value <= threshold:
                labels.append("small")
            case po.Succeeded(_):
                labels.append("big")
            case po.Failed(_):
                labels.append("failed")
    assert labels == ["small", "big", "failed"]
