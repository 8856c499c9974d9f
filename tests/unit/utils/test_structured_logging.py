r"""Unit tests for structured logging utilities."""

from __future__ import annotations

import json
import logging
import sys

import pytest

from aretry.utils.structured_logging import (
    StructuredFormatter,
    clear_retry_id,
    get_retry_id,
    log_structured,
    new_retry_id,
    set_retry_id,
)


def make_record(message: str = "Attempt 1 failed", **extra: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="aretry.retry.executor",
        level=logging.DEBUG,
        pathname=__file__,
        lineno=42,
        msg=message,
        args=(),
        exc_info=None,
        func="_run",
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


##################################
#     Tests for the retry id     #
##################################


def test_retry_id_default_none() -> None:
    assert get_retry_id() is None


def test_set_retry_id() -> None:
    set_retry_id("abc")
    assert get_retry_id() == "abc"


def test_clear_retry_id() -> None:
    set_retry_id("abc")
    clear_retry_id()
    assert get_retry_id() is None


def test_new_retry_id_unique() -> None:
    ids = {new_retry_id() for _ in range(100)}
    assert len(ids) == 100
    assert all(len(value) == 12 for value in ids)


#########################################
#     Tests for StructuredFormatter     #
#########################################


def test_structured_formatter_standard_fields() -> None:
    data = json.loads(StructuredFormatter().format(make_record()))
    assert data["level"] == "DEBUG"
    assert data["logger"] == "aretry.retry.executor"
    assert data["message"] == "Attempt 1 failed"
    assert data["function"] == "_run"
    assert data["line"] == 42
    assert data["timestamp"].endswith("Z")
    assert "retry_id" not in data


def test_structured_formatter_retry_id() -> None:
    set_retry_id("sync-users")
    data = json.loads(StructuredFormatter().format(make_record()))
    assert data["retry_id"] == "sync-users"


def test_structured_formatter_extra_fields() -> None:
    data = json.loads(
        StructuredFormatter().format(make_record(attempt=2, delay=400, error_type="ValueError"))
    )
    assert data["attempt"] == 2
    assert data["delay"] == 400
    assert data["error_type"] == "ValueError"


def test_structured_formatter_non_serializable_extra() -> None:
    data = json.loads(StructuredFormatter().format(make_record(payload={1, 2})))
    assert data["payload"] == repr({1, 2})


def test_structured_formatter_exception() -> None:
    record = make_record()
    try:
        msg = "boom"
        raise ValueError(msg)
    except ValueError:
        record.exc_info = sys.exc_info()
    data = json.loads(StructuredFormatter().format(record))
    assert "ValueError: boom" in data["exception"]


####################################
#     Tests for log_structured     #
####################################


def test_log_structured(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("aretry.tests")
    with caplog.at_level(logging.DEBUG, logger="aretry.tests"):
        log_structured(logger, logging.DEBUG, "Retrying in 100ms", attempt=1, delay=100)
    record = caplog.records[-1]
    assert record.getMessage() == "Retrying in 100ms"
    assert record.attempt == 1
    assert record.delay == 100


def test_log_structured_respects_level(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("aretry.tests")
    with caplog.at_level(logging.INFO, logger="aretry.tests"):
        log_structured(logger, logging.DEBUG, "hidden", attempt=1)
    assert not caplog.records
