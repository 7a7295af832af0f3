from __future__ import annotations

from typing import Any


def check_callable(func: object, name: str) -> None:
    """Raise `TypeError` if **func** is not callable, naming the offending parameter.

    Example:
    ```python
    >>> from pyoutcome._core import check_callable
    >>> check_callable(print, "mapper")
    >>> check_callable(None, "mapper")
    Traceback (most recent call last):
        ...
    TypeError: `mapper` must be callable, got None

    ```
    """
    if not callable(func):
        msg = f"`{name}` must be callable, got {func!r}"
        raise TypeError(msg)


def _is_error_kind(kind: Any) -> bool:  # noqa: ANN401
    match kind:
        case tuple():
            return all(_is_error_kind(k) for k in kind)
        case type():
            return issubclass(kind, BaseException)
        case _:
            return False


def check_error_kind(kind: object, name: str) -> None:
    """Raise `TypeError` unless **kind** is usable in an `except` clause.

    Example:
    ```python
    >>> from pyoutcome._core import check_error_kind
    >>> check_error_kind((KeyError, ValueError), "kind")
    >>> check_error_kind(int, "kind")
    Traceback (most recent call last):
        ...
    TypeError: `kind` must be an exception class or a tuple of exception classes, got <class 'int'>

    ```
    """
    if not _is_error_kind(kind):
        msg = f"`{name}` must be an exception class or a tuple of exception classes, got {kind!r}"
        raise TypeError(msg)
