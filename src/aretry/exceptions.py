r"""Exceptions raised by the retry engine.

Two failure kinds are distinguished. ``UntilMismatchError`` signals that an
operation returned a value but the ``until`` predicate rejected it.
``TooManyRetriesError`` is the only error that escapes a retry call: it is
raised once the attempt budget is exhausted and carries the last failure as
its cause.
"""

from __future__ import annotations

__all__ = [
    "RetryError",
    "TooManyRetriesError",
    "UntilMismatchError",
    "is_too_many_retries_error",
    "is_until_mismatch_error",
]

from typing import Any


class RetryError(Exception):
    """Base class for errors produced by the retry engine.

    Args:
        message: Human readable description of the failure.
        cause: The underlying value or exception that triggered the error.

    Attributes:
        kind: A short classification label, unique per subclass.
        cause: The underlying value or exception.
    """

    kind: str = "retry_error"

    def __init__(self, message: str, cause: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        return self.message


class UntilMismatchError(RetryError):
    """Raised when the ``until`` predicate rejects a successful result.

    Args:
        result: The rejected value returned by the operation.

    Example:
        ```pycon
        >>> from aretry.exceptions import UntilMismatchError
        >>> error = UntilMismatchError(42)
        >>> error.result
        42
        >>> error.kind
        'until_mismatch'

        ```
    """

    kind = "until_mismatch"

    def __init__(self, result: Any = None) -> None:
        super().__init__("Until check failed", cause=result)
        self.result = result


class TooManyRetriesError(RetryError):
    """Raised when the retry budget is exhausted.

    Args:
        cause: The most recent failure. This is either the exception raised
            by the operation or an ``UntilMismatchError``.
        attempts: The number of times the operation was invoked.

    Example:
        ```pycon
        >>> from aretry.exceptions import TooManyRetriesError
        >>> error = TooManyRetriesError(ValueError("boom"), attempts=4)
        >>> error.attempts
        4
        >>> error.kind
        'too_many_retries'

        ```
    """

    kind = "too_many_retries"

    def __init__(self, cause: BaseException | None = None, attempts: int | None = None) -> None:
        super().__init__("Too many retries", cause=cause)
        self.attempts = attempts
        self.__cause__ = cause


def is_until_mismatch_error(error: Any) -> bool:
    """Indicate whether ``error`` is an ``UntilMismatchError``.

    Example:
        ```pycon
        >>> from aretry.exceptions import UntilMismatchError, is_until_mismatch_error
        >>> is_until_mismatch_error(UntilMismatchError(None))
        True
        >>> is_until_mismatch_error(ValueError())
        False

        ```
    """
    return isinstance(error, UntilMismatchError)


def is_too_many_retries_error(error: Any) -> bool:
    """Indicate whether ``error`` is a ``TooManyRetriesError``.

    Example:
        ```pycon
        >>> from aretry.exceptions import (
        ...     TooManyRetriesError,
        ...     UntilMismatchError,
        ...     is_too_many_retries_error,
        ... )
        >>> is_too_many_retries_error(TooManyRetriesError())
        True
        >>> is_too_many_retries_error(UntilMismatchError(None))
        False

        ```
    """
    return isinstance(error, TooManyRetriesError)
