"""Shared fixtures for the mp-auth test suite."""

from __future__ import annotations

import logging
from datetime import UTC, datetime

import pytest
import structlog

from mp_auth.kernel.time import FrozenClock


@pytest.fixture(autouse=True)
def _reset_logging():
    """Undo any structlog / root logger configuration a test applied."""
    root = logging.getLogger()
    level = root.level
    yield
    structlog.reset_defaults()
    for handler in root.handlers[:]:
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def frozen_clock() -> FrozenClock:
    return FrozenClock(datetime(2024, 6, 15, 12, 0, 0, tzinfo=UTC))
