"""Shared test fixtures for minicurl tests."""

from __future__ import annotations

import logging

import pytest

from minicurl.config import LOG_LEVEL_VAR


@pytest.fixture(autouse=True)
def isolated_logging(monkeypatch: pytest.MonkeyPatch):
    """Keep CLI runs from leaking handlers or levels into other tests."""
    monkeypatch.delenv(LOG_LEVEL_VAR, raising=False)
    logger = logging.getLogger("minicurl")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
