from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeIs

from .._core import Pipeable, check_callable


class Outcome[V, E: BaseException](Pipeable, ABC):
    """The outcome of an operation: either `Succeeded` with a value, or `Failed` with an error.

    Instances are immutable. Every combinator returns a new `Outcome` (or a plain value for terminal operations),
    and only dispatches on the variant, never on the payload, except for `is_success()`.

    Use `succeeded`, `failed`, `of` or `of_optional` to build one, and pattern matching to take one apart:

    Example:
    ```python
    >>> import pyoutcome as po
    >>> def show(outcome: po.Outcome[int, ValueError]) -> str:
    ...     match outcome:
    ...         case po.Succeeded(value):
    ...             return f"got {value}"
    ...         case po.Failed(error):
    ...             return f"failed with {error!r}"
    ...         case _:
    ...             raise RuntimeError("unreachable")
    >>> show(po.succeeded(1))
    'got 1'
    >>> show(po.failed(ValueError("bad")))
    "failed with ValueError('bad')"

    ```
    """

    __slots__ = ()

    @abstractmethod
    def value(self) -> V | None:
        """
        Returns the held value for `Succeeded`, or `None` for `Failed`.

        Example:
        ```python
        >>> import pyoutcome as po
        >>> po.succeeded(1).value()
        1
        >>> po.failed(KeyError("k")).value() is None
        True

        ```
        """
        ...

    @abstractmethod
    def error(self) -> E | None:
        """
        Returns the held error for `Failed`, or `None` for `Succeeded`.

        Example:
        ```python
        >>> import pyoutcome as po
        >>> po.failed(KeyError("k")).error()
        KeyError('k')
        >>> po.succeeded(1).error() is None
        True

        ```
        """
        ...

    @abstractmethod
    def is_success(self) -> bool:
        """
        Returns `True` if the outcome is `Succeeded` **and** its value is not `None`.

        A `Succeeded(None)` is therefore not a success, although it is not a failure either.

        Example:
        ```python
        >>> import pyoutcome as po
        >>> po.succeeded(0).is_success()
        True
        >>> po.succeeded(None).is_success()
        False
        >>> po.failed(OSError()).is_success()
        False

        ```
        """
        ...

    @abstractmethod
    def is_failure(self) -> TypeIs[Failed[V, E]]:  # type: ignore[misc]
        """
        Returns `True` if the outcome is `Failed`.

        This is not the negation of `is_success()`, see `Outcome.is_success()`.

        Example:
        ```python
        >>> import pyoutcome as po
        >>> po.failed(OSError()).is_failure()
        True
        >>> po.succeeded(None).is_failure()
        False

        ```
        """
        ...

    def get(self) -> V | None:
        """
        Returns the held value, or `None` if the outcome is `Failed`.

        Never raises.

        Example:
        ```python
        >>> import pyoutcome as po
        >>> po.succeeded("a").get()
        'a'
        >>> po.failed(OSError()).get() is None
        True

        ```
        """
        return self.value()

    def fold[U](self, on_value: Callable[[V], U], on_error: Callable[[E], U]) -> U:
        """
        Collapses the outcome into a plain value, calling **on_value** if `Succeeded`, or **on_error** if `Failed`.

        Exactly one of the two functions is called.

        Args:
            on_value: Callable to handle the held value.
            on_error: Callable to handle the held error.

        Returns:
            U: The result of the called function.

        Example:
        ```python
        >>> import pyoutcome as po
        >>> po.succeeded(1).fold(str, lambda e: "fallback")
        '1'
        >>> po.failed(OSError()).fold(str, lambda e: "fallback")
        'fallback'

        ```
        """
        check_callable(on_value, "on_value")
        check_callable(on_error, "on_error")
        match self:
            case Succeeded(value):
                return on_value(value)
            case Failed(error):
                return on_error(error)
            case _:
                raise RuntimeError("unreachable")

    def or_else(self, fallback: V) -> V:
        """
        Returns the held value if `Succeeded`, otherwise **fallback**.

        Only the variant is checked: a `Succeeded(None)` returns `None`, not **fallback**.

        Args:
            fallback: The value to return if the outcome is `Failed`.

        Returns:
            V: The held value or **fallback**.

        Example:
        ```python
        >>> import pyoutcome as po
        >>> po.succeeded(1).or_else(2)
        1
        >>> po.failed(OSError()).or_else(2)
        2
        >>> po.succeeded(None).or_else(2) is None
        True

        ```
        """
        return self.fold(_identity, lambda _: fallback)

    def or_else_get(self, fallback: Callable[[], V]) -> V:
        """
        Returns the held value if `Succeeded`, otherwise computes it from **fallback**.

        **fallback** is only called if the outcome is `Failed`.

        Args:
            fallback: Zero-argument callable producing the value to return.

        Returns:
            V: The held value or the result of **fallback**.

        Example:
        ```python
        >>> import pyoutcome as po
        >>> po.failed(OSError()).or_else_get(lambda: 2)
        2

        ```
        """
        check_callable(fallback, "fallback")
        return self.fold(_identity, lambda _: fallback())

    def or_else_raise(self, error_producer: Callable[[], BaseException]) -> V:
        """
        Returns the held value if `Succeeded`, otherwise raises the exception produced by **error_producer**.

        The held error is attached as the `__cause__` of the raised exception,
        unless it is the raised exception itself or that exception already has a cause.

        **error_producer** is not called if the outcome is `Succeeded`.

        Args:
            error_producer: Zero-argument callable returning the exception to raise.

        Returns:
            V: The held value.

        Raises:
            BaseException: The exception returned by **error_producer**, if the outcome is `Failed`.

        Example:
        ```python
        >>> import pyoutcome as po
        >>> po.succeeded(1).or_else_raise(LookupError)
        1
        >>> po.failed(KeyError("k")).or_else_raise(LookupError)
        Traceback (most recent call last):
            ...
        LookupError

        ```
        """
        check_callable(error_producer, "error_producer")
        match self:
            case Succeeded(value):
                return value
            case Failed(error):
                exc = error_producer()
                if exc is error or exc.__cause__ is not None:
                    raise exc
                raise exc from error
            case _:
                raise RuntimeError("unreachable")

    def map[U](self, mapper: Callable[[V], U]) -> Outcome[U, E]:
        """
        Maps an `Outcome[V, E]` to `Outcome[U, E]` by applying **mapper** to the held value, leaving a `Failed` untouched.

        Args:
            mapper: Callable to apply to the held value.

        Returns:
            Outcome[U, E]: `Succeeded(mapper(value))` if `Succeeded`, otherwise `Failed(error)`.

        Example:
        ```python
        >>> import pyoutcome as po
        >>> po.succeeded(5).map(lambda x: x + 1)
        Succeeded(6)
        >>> po.failed(ValueError("bad")).map(lambda x: x + 1)
        Failed(ValueError('bad'))

        ```
        """
        check_callable(mapper, "mapper")
        return self.fold(lambda value: Succeeded(mapper(value)), Failed)

    def flat_map[U](self, mapper: Callable[[V], Outcome[U, E]]) -> Outcome[U, E]:
        """
        Calls **mapper** with the held value if `Succeeded`, otherwise passes the `Failed` through.

        The `Outcome` returned by **mapper** is returned as is.

        Args:
            mapper: Callable that takes the held value and returns an `Outcome`.

        Returns:
            Outcome[U, E]: `mapper(value)` if `Succeeded`, otherwise `Failed(error)`.

        Example:
        ```python
        >>> import pyoutcome as po
        >>> def parse(raw: str) -> po.Outcome[int, ValueError]:
        ...     return po.of(lambda: int(raw), ValueError)
        >>> po.succeeded("12").flat_map(parse)
        Succeeded(12)
        >>> po.succeeded("twelve").flat_map(parse).is_failure()
        True

        ```
        """
        check_callable(mapper, "mapper")
        return self.fold(mapper, Failed)

    def map_error[X: BaseException](self, mapper: Callable[[E], X]) -> Outcome[V, X]:
        """
        Maps an `Outcome[V, E]` to `Outcome[V, X]` by applying **mapper** to the held error, leaving a `Succeeded` untouched.

        Args:
            mapper: Callable to apply to the held error.

        Returns:
            Outcome[V, X]: `Failed(mapper(error))` if `Failed`, otherwise `Succeeded(value)`.

        Example:
        ```python
        >>> import pyoutcome as po
        >>> po.failed(KeyError("k")).map_error(lambda e: LookupError(f"missing {e}"))
        Failed(LookupError("missing 'k'"))
        >>> po.succeeded(1).map_error(lambda e: LookupError(f"missing {e}"))
        Succeeded(1)

        ```
        """
        check_callable(mapper, "mapper")
        return self.fold(Succeeded, lambda error: Failed(mapper(error)))

    def flat_map_error[X: BaseException](
        self, mapper: Callable[[E], Outcome[V, X]]
    ) -> Outcome[V, X]:
        """
        Calls **mapper** with the held error if `Failed`, otherwise passes the `Succeeded` through.

        Useful to recover from some errors.

        Args:
            mapper: Callable that takes the held error and returns an `Outcome`.

        Returns:
            Outcome[V, X]: `mapper(error)` if `Failed`, otherwise `Succeeded(value)`.

        Example:
        ```python
        >>> import pyoutcome as po
        >>> po.failed(FileNotFoundError()).flat_map_error(lambda e: po.succeeded(""))
        Succeeded('')

        ```
        """
        check_callable(mapper, "mapper")
        return self.fold(Succeeded, mapper)

    def transform[U, X: BaseException](
        self, on_value: Callable[[V], U], on_error: Callable[[E], X]
    ) -> Outcome[U, X]:
        """
        Maps both sides at once: applies **on_value** to a held value, or **on_error** to a held error.

        Same as `map(on_value).map_error(on_error)`, with a single dispatch.

        Args:
            on_value: Callable to apply to the held value.
            on_error: Callable to apply to the held error.

        Returns:
            Outcome[U, X]: `Succeeded(on_value(value))` or `Failed(on_error(error))`.

        Example:
        ```python
        >>> import pyoutcome as po
        >>> po.succeeded(1).transform(str, RuntimeError)
        Succeeded('1')

        ```
        """
        check_callable(on_value, "on_value")
        check_callable(on_error, "on_error")
        return self.fold(
            lambda value: Succeeded(on_value(value)),
            lambda error: Failed(on_error(error)),
        )

    def lift[U, X: BaseException](
        self,
        on_value: Callable[[V], Outcome[U, X]],
        on_error: Callable[[E], Outcome[U, X]],
    ) -> Outcome[U, X]:
        """
        Applies **on_value** to a held value, or **on_error** to a held error, each returning an `Outcome`.

        Same as `flat_map(on_value).flat_map_error(on_error)`, with a single dispatch.

        Args:
            on_value: Callable that takes the held value and returns an `Outcome`.
            on_error: Callable that takes the held error and returns an `Outcome`.

        Returns:
            Outcome[U, X]: The `Outcome` returned by the called function.

        Example:
        ```python
        >>> import pyoutcome as po
        >>> po.failed(TimeoutError()).lift(po.succeeded, lambda e: po.succeeded(-1))
        Succeeded(-1)

        ```
        """
        check_callable(on_value, "on_value")
        check_callable(on_error, "on_error")
        return self.fold(on_value, on_error)

    def any(self, predicate: Callable[[V], bool]) -> bool:
        """
        Returns `True` if the outcome is `Succeeded` and its value satisfies **predicate**.

        Args:
            predicate: Callable testing the held value.

        Returns:
            bool: `False` for a `Failed`, otherwise the result of **predicate**.

        Example:
        ```python
        >>> import pyoutcome as po
        >>> po.succeeded(1).any(lambda x: x < 2)
        True
        >>> po.failed(OSError()).any(lambda x: x < 2)
        False

        ```
        """
        check_callable(predicate, "predicate")
        return self.fold(lambda value: bool(predicate(value)), lambda _: False)


@dataclass(slots=True, frozen=True)
class Succeeded[V, E: BaseException](Outcome[V, E]):
    """Outcome variant holding a value, which may be `None`."""

    _value: V

    def __repr__(self) -> str:
        return f"Succeeded({self._value!r})"

    def value(self) -> V:
        return self._value

    def error(self) -> None:
        return None

    def is_success(self) -> bool:
        return self._value is not None

    def is_failure(self) -> TypeIs[Failed[V, E]]:  # type: ignore[misc]
        return False


@dataclass(slots=True, frozen=True)
class Failed[V, E: BaseException](Outcome[V, E]):
    """Outcome variant holding an error.

    Raises:
        TypeError: If the error is not an exception instance.
    """

    _error: E

    def __post_init__(self) -> None:
        if not isinstance(self._error, BaseException):
            msg = f"`Failed` holds exceptions only, got {self._error!r}"
            raise TypeError(msg)

    def __repr__(self) -> str:
        return f"Failed({self._error!r})"

    def value(self) -> None:
        return None

    def error(self) -> E:
        return self._error

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> TypeIs[Failed[V, E]]:  # type: ignore[misc]
        return True


def _identity[T](value: T) -> T:
    return value


