from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .._core import check_callable, check_error_kind
from ._outcome import Failed, Outcome, Succeeded


def succeeded[V](value: V) -> Succeeded[V, Any]:
    """
    Wraps **value** in a `Succeeded`.

    **value** may be `None`, in which case the outcome is neither a success nor a failure.

    Example:
    ```python
    >>> import pyoutcome as po
    >>> po.succeeded(5)
    Succeeded(5)
    >>> po.succeeded(None).is_success()
    False

    ```
    """
    return Succeeded(value)


def failed[E: BaseException](error: E) -> Failed[Any, E]:
    """
    Wraps **error** in a `Failed`.

    Raises:
        TypeError: If **error** is not an exception instance.

    Example:
    ```python
    >>> import pyoutcome as po
    >>> po.failed(ValueError("bad"))
    Failed(ValueError('bad'))

    ```
    """
    return Failed(error)


def of[V, E: BaseException](
    producer: Callable[[], V], kind: type[E] | tuple[type[E], ...]
) -> Outcome[V, E]:
    """
    Calls **producer**, catching exceptions of **kind** into a `Failed`.

    **kind** accepts what an `except` clause accepts: an exception class, or a tuple of them.
    Subclasses of **kind** are caught too. Any other exception propagates.

    Args:
        producer: Zero-argument callable to run.
        kind: The exception class(es) to catch.

    Returns:
        Outcome[V, E]: `Succeeded(producer())`, or `Failed(exc)` if **producer** raised a **kind**.

    Raises:
        TypeError: If **producer** is not callable or **kind** is not an exception class, before calling **producer**.

    Example:
    ```python
    >>> import pyoutcome as po
    >>> po.of(lambda: 10 // 2, ArithmeticError)
    Succeeded(5)
    >>> po.of(lambda: 5 / 0, ArithmeticError)
    Failed(ZeroDivisionError('division by zero'))
    >>> po.of(lambda: {}["key"], ArithmeticError)
    Traceback (most recent call last):
        ...
    KeyError: 'key'

    ```
    """
    check_callable(producer, "producer")
    check_error_kind(kind, "kind")
    try:
        return Succeeded(producer())
    except kind as e:
        return Failed(e)


def of_optional[V, E: BaseException](
    value: V | None, error_supplier: Callable[[], E]
) -> Outcome[V, E]:
    """
    Wraps **value** in a `Succeeded`, or a `Failed` built by **error_supplier** if **value** is `None`.

    **error_supplier** is only called if **value** is `None`.

    Args:
        value: The value to wrap.
        error_supplier: Zero-argument callable returning the default error.

    Returns:
        Outcome[V, E]: `Succeeded(value)` or `Failed(error_supplier())`.

    Example:
    ```python
    >>> import pyoutcome as po
    >>> po.of_optional(5, LookupError)
    Succeeded(5)
    >>> po.of_optional(None, lambda: LookupError("no value"))
    Failed(LookupError('no value'))
    >>> po.of_optional(0, LookupError)
    Succeeded(0)

    ```
    """
    check_callable(error_supplier, "error_supplier")
    if value is None:
        return Failed(error_supplier())
    return Succeeded(value)
