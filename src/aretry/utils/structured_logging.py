r"""Structured logging utilities for retry sequences.

Every call to a retry executor runs under a retry id stored in a context
variable. The id is attached to the JSON records produced by
``StructuredFormatter`` so the log lines of concurrent retry sequences can
be told apart. Structured output is opt-in: the library only emits records
through ``logging`` and never installs handlers.

Example:
    Enable structured logging for aretry:

    ```python
    import logging
    from aretry.utils.structured_logging import StructuredFormatter

    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter())

    logger = logging.getLogger("aretry")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    ```
"""

from __future__ import annotations

__all__ = [
    "StructuredFormatter",
    "clear_retry_id",
    "get_retry_id",
    "log_structured",
    "new_retry_id",
    "set_retry_id",
]

import contextvars
import json
import logging
import time
import uuid
from typing import Any

_retry_id: contextvars.ContextVar[str | None] = contextvars.ContextVar("retry_id", default=None)

# Attributes present on every LogRecord; anything else came from ``extra``.
_RECORD_ATTRIBUTES = frozenset(
    vars(logging.LogRecord("", logging.NOTSET, "", 0, "", (), None))
) | {"message", "asctime"}


def get_retry_id() -> str | None:
    """Get the retry id of the current context.

    Example:
        ```pycon
        >>> from aretry.utils.structured_logging import (
        ...     clear_retry_id,
        ...     get_retry_id,
        ...     set_retry_id,
        ... )
        >>> set_retry_id("sync-users")
        >>> get_retry_id()
        'sync-users'
        >>> clear_retry_id()
        >>> get_retry_id()

        ```
    """
    return _retry_id.get()


def set_retry_id(retry_id: str) -> None:
    """Set the retry id for the current context.

    Callers can set an id before invoking a retry executor to have it
    reused instead of a generated one.

    Args:
        retry_id: The identifier to attach to log records.
    """
    _retry_id.set(retry_id)


def clear_retry_id() -> None:
    r"""Clear the retry id of the current context."""
    _retry_id.set(None)


def new_retry_id() -> str:
    """Generate a short random retry id.

    Example:
        ```pycon
        >>> from aretry.utils.structured_logging import new_retry_id
        >>> len(new_retry_id())
        12

        ```
    """
    return uuid.uuid4().hex[:12]


class StructuredFormatter(logging.Formatter):
    """JSON formatter for retry log records.

    Standard fields in the JSON output:
        - timestamp: ISO 8601 UTC timestamp with milliseconds
        - level: Log level name
        - logger: Logger name
        - message: Log message
        - module, function, line: Location of the logging call
        - retry_id: The current retry id, if any

    Fields passed through ``extra`` (for example ``attempt`` and ``delay``
    emitted by the executor) are copied into the output. Values that are not
    JSON serializable are rendered with ``repr``.

    Example:
        ```pycon
        >>> import json
        >>> import logging
        >>> from io import StringIO
        >>> from aretry.utils.structured_logging import StructuredFormatter
        >>> stream = StringIO()
        >>> handler = logging.StreamHandler(stream)
        >>> handler.setFormatter(StructuredFormatter())
        >>> logger = logging.getLogger("doctest_structured_formatter")
        >>> logger.addHandler(handler)
        >>> logger.setLevel(logging.INFO)
        >>> logger.info("attempt failed", extra={"attempt": 2})
        >>> json.loads(stream.getvalue())["attempt"]
        2

        ```
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        retry_id = get_retry_id()
        if retry_id is not None:
            log_data["retry_id"] = retry_id
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRIBUTES:
                log_data[key] = value
        return json.dumps(log_data, default=repr)

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: N802, ARG002
        return (
            time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created))
            + f".{int(record.msecs):03d}Z"
        )


def log_structured(logger: logging.Logger, level: int, message: str, **extra: Any) -> None:
    """Log a message with structured fields.

    Args:
        logger: Logger to use.
        level: Log level (e.g., ``logging.DEBUG``).
        message: Log message.
        **extra: Additional fields included in the JSON output when
            ``StructuredFormatter`` is used.
    """
    logger.log(level, message, extra=extra)
