from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, Mock, patch

import pytest

from aretry.utils.structured_logging import clear_retry_id

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def mock_asleep() -> Generator[AsyncMock, None, None]:
    """Patch the sleep primitive used by the executor to make tests run
    faster.

    The mock records the delays (in milliseconds) the executor waited.
    """
    with patch("aretry.retry.executor.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_callback() -> Mock:
    """Create a mock callback function for testing callbacks."""
    return Mock()


@pytest.fixture(autouse=True)
def _reset_retry_id() -> Generator[None, None, None]:
    clear_retry_id()
    yield
    clear_retry_id()
