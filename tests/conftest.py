"""Pytest configuration and shared fixtures."""

from collections.abc import Generator

import pytest
import structlog

from queueconn.config import get_settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Clear QUEUECONN_ environment variables and the settings cache.

    Yields:
        None
    """
    for key in ("QUEUECONN_REDIS_URI", "QUEUECONN_LOG_LEVEL", "QUEUECONN_LOG_JSON"):
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    """Restore structlog defaults after tests that configure logging.

    Yields:
        None
    """
    yield
    structlog.reset_defaults()
