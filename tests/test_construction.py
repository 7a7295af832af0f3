"""Tests for building outcomes and inspecting them."""

import pytest

import pyoutcome as po


class CustomError(Exception):
    """Caller-defined error used across tests."""


def test_succeeded_is_success() -> None:
    """Test a succeeded outcome with a value."""
    outcome = po.succeeded(1)
    assert outcome.is_success()
    assert not outcome.is_failure()
    assert outcome.get() == 1
    assert outcome.value() == 1
    assert outcome.error() is None


def test_failed_is_failure() -> None:
    """Test a failed outcome."""
    error = CustomError("boom")
    outcome = po.failed(error)
    assert not outcome.is_success()
    assert outcome.is_failure()
    assert outcome.get() is None
    assert outcome.value() is None
    assert outcome.error() is error


def test_succeeded_none_is_neither_success_nor_failure() -> None:
    """Test that a succeeded outcome holding None reports no success."""
    outcome = po.succeeded(None)
    assert isinstance(outcome, po.Succeeded)
    assert outcome.is_success() is False
    assert outcome.is_failure() is False
    assert outcome.get() is None


@pytest.mark.parametrize("value", [0, "", [], False, 1, "a"])
def test_falsy_values_are_still_success(value: object) -> None:
    """Test that only None, not falsiness, makes is_success False."""
    assert po.succeeded(value).is_success()


def test_failed_rejects_non_exception() -> None:
    """Test that errors must be exception instances."""
    with pytest.raises(TypeError, match="holds exceptions only"):
        po.failed("not an error")  # type: ignore[type-var]
    with pytest.raises(TypeError):
        po.Failed(None)  # type: ignore[type-var]


class TestOf:
    """Test `of` with a producer and an exception kind."""

    def test_returning_producer(self) -> None:
        """Test that a returning producer gives a succeeded outcome."""
        outcome = po.of(lambda: 1, RuntimeError)
        assert outcome == po.Succeeded(1)
        assert outcome.is_success()

    def test_producer_returning_none(self) -> None:
        """Test that a producer returning None is still wrapped as succeeded."""
        outcome = po.of(lambda: None, RuntimeError)
        assert isinstance(outcome, po.Succeeded)
        assert not outcome.is_success()
        assert not outcome.is_failure()

    def test_matching_exception_is_caught(self) -> None:
        """Test that an exception of the given kind becomes a failed outcome."""
        error = RuntimeError("boom")

        def _raise() -> int:
            raise error

        outcome = po.of(_raise, RuntimeError)
        assert outcome.is_failure()
        assert outcome.error() is error
        assert outcome.get() is None

    def test_subclass_is_caught(self) -> None:
        """Test that subclasses of the given kind are caught."""
        outcome = po.of(lambda: 5 / 0, ArithmeticError)
        assert outcome.is_failure()
        assert isinstance(outcome.error(), ZeroDivisionError)

    def test_tuple_of_kinds(self) -> None:
        """Test catching with a tuple of exception classes."""
        outcome = po.of(lambda: int("x"), (KeyError, ValueError))
        assert isinstance(outcome.error(), ValueError)

    def test_unrelated_exception_propagates(self) -> None:
        """Test that an exception of another kind is not converted."""

        def _raise() -> int:
            raise CustomError("unrelated")

        with pytest.raises(CustomError, match="unrelated"):
            po.of(_raise, ArithmeticError)

    def test_base_exception_not_caught_by_exception(self) -> None:
        """Test that KeyboardInterrupt escapes an `Exception` kind."""

        def _raise() -> int:
            raise KeyboardInterrupt

        with pytest.raises(KeyboardInterrupt):
            po.of(_raise, Exception)

    @pytest.mark.parametrize("kind", [None, "ValueError", int, (ValueError, str)])
    def test_invalid_kind(self, kind: object) -> None:
        """Test that the kind is validated before the producer runs."""
        calls: list[int] = []
        with pytest.raises(TypeError, match="`kind`"):
            po.of(lambda: calls.append(1), kind)  # type: ignore[arg-type]
        assert calls == []

    def test_none_producer(self) -> None:
        """Test that a missing producer is rejected."""
        with pytest.raises(TypeError, match="`producer` must be callable"):
            po.of(None, ValueError)  # type: ignore[arg-type]


class TestOfOptional:
    """Test `of_optional` with a value and a default error supplier."""

    def test_present_value(self) -> None:
        """Test that a present value gives a succeeded outcome."""
        outcome = po.of_optional(5, CustomError)
        assert outcome == po.Succeeded(5)
        assert outcome.is_success()

    def test_absent_value(self) -> None:
        """Test that None gives a failed outcome with the default error."""
        default = CustomError("default")
        outcome = po.of_optional(None, lambda: default)
        assert outcome.is_failure()
        assert outcome.error() is default

    def test_supplier_not_called_for_present_value(self) -> None:
        """Test that the supplier is lazy."""
        calls: list[int] = []

        def _supplier() -> CustomError:
            calls.append(1)
            return CustomError()

        po.of_optional(1, _supplier)
        assert calls == []

    def test_none_supplier(self) -> None:
        """Test that a missing supplier is rejected."""
        with pytest.raises(TypeError, match="`error_supplier`"):
            po.of_optional(1, None)  # type: ignore[arg-type]
