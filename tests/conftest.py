"""Pytest fixtures for oceandns test suite."""

import logging
import logging.handlers
from collections.abc import Generator

import pytest

from oceandns.providers.digitalocean import DigitalOceanProvider

API_URL = "https://api.digitalocean.com/v2"
API_TOKEN = "test-do-token"


@pytest.fixture
def api_url() -> str:
    """Return the DigitalOcean API base URL used by providers in tests."""
    return API_URL


@pytest.fixture
def api_token() -> str:
    """Return the bearer token used by providers in tests."""
    return API_TOKEN


@pytest.fixture
def provider(api_token: str) -> Generator[DigitalOceanProvider]:
    """Create a DigitalOceanProvider owning its own HTTP client."""
    do_provider = DigitalOceanProvider(api_token=api_token)
    yield do_provider
    do_provider.close()


class LogCapture:
    """Helper class to capture and inspect log records."""

    def __init__(self, handler: logging.handlers.MemoryHandler) -> None:
        self._handler = handler

    @property
    def records(self) -> list[logging.LogRecord]:
        """Get all captured log records."""
        return self._handler.buffer

    def get_records(
        self, level: int | None = None, name: str | None = None
    ) -> list[logging.LogRecord]:
        """Get log records filtered by level and/or logger name.

        Args:
            level: Filter by log level (e.g., logging.INFO).
            name: Filter by logger name prefix (e.g., "oceandns.providers").

        Returns:
            List of matching log records.
        """
        records = self.records
        if level is not None:
            records = [r for r in records if r.levelno == level]
        if name is not None:
            records = [r for r in records if r.name.startswith(name)]
        return records

    def get_messages(self, level: int | None = None, name: str | None = None) -> list[str]:
        """Get log messages filtered by level and/or logger name."""
        return [r.getMessage() for r in self.get_records(level, name)]

    def clear(self) -> None:
        """Clear all captured log records."""
        self._handler.buffer.clear()


@pytest.fixture
def log_capture() -> Generator[LogCapture]:
    """Capture logs from the oceandns library during a test.

    Usage:
        def test_something(log_capture):
            # do something that logs
            assert "TXT record created" in log_capture.get_messages(logging.INFO)
    """
    handler = logging.handlers.MemoryHandler(capacity=1000)
    handler.setLevel(logging.DEBUG)

    library_logger = logging.getLogger("oceandns")
    original_level = library_logger.level
    library_logger.setLevel(logging.DEBUG)
    library_logger.addHandler(handler)

    try:
        yield LogCapture(handler)
    finally:
        library_logger.removeHandler(handler)
        library_logger.setLevel(original_level)
        handler.close()
