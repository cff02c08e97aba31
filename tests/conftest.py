"""Shared pytest fixtures."""

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_logger():
    """Restore the library's default logging state after each test."""
    yield
    logger.remove()
    logger.disable("nlsplit")
