"""Shared pytest fixtures."""

import logging
from collections.abc import Iterator

import pytest
import structlog


@pytest.fixture
def reset_logging() -> Iterator[None]:
    """Undo configure_logging so later tests do not write to stale streams."""
    yield
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if getattr(handler, "_pixelcollider_handler", False):
            root_logger.removeHandler(handler)
            handler.close()
    structlog.reset_defaults()
