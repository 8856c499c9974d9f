r"""Core validation logic shared by the configuration objects."""

from __future__ import annotations

__all__ = ["validate_callback", "validate_delay", "validate_times"]

from aretry.core.validation import validate_callback, validate_delay, validate_times
