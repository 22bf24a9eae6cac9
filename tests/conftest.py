"""Shared test fixtures."""

import logging

import pytest


@pytest.fixture(autouse=True)
def restore_fromposix_logger():
    """Undo any logging setup a test leaves on the ``fromposix`` logger."""
    logger = logging.getLogger("fromposix")
    saved = (logger.level, list(logger.handlers), logger.propagate)
    yield
    level, handlers, propagate = saved
    logger.setLevel(level)
    logger.handlers = handlers
    logger.propagate = propagate
