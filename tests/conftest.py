"""Shared fixtures."""

import logging
from collections.abc import Iterator

import pytest


@pytest.fixture(autouse=True)
def _reset_printqueue_logger() -> Iterator[None]:
    """CLI runs reconfigure the package logger; restore it after each test."""
    logger = logging.getLogger("printqueue")
    yield
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
