r"""Utility functions shared by the retry engine.

The suspension primitive lives in ``aretry.utils.sleep``; this package
re-exports the structured logging helpers.
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

from aretry.utils.structured_logging import (
    StructuredFormatter,
    clear_retry_id,
    get_retry_id,
    log_structured,
    new_retry_id,
    set_retry_id,
)
