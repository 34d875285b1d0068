"""Pytest configuration and fixtures."""

import io
import logging

import pytest

from strictcheck.config import RunnerSettings
from strictcheck.runner import TestRunner
from strictcheck.style import ColorMode


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Clean up strictcheck loggers after each test to prevent name collisions."""
    yield

    loggers_to_remove = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name.startswith("strictcheck")
    ]

    for name in loggers_to_remove:
        logger = logging.getLogger(name)
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        del logging.Logger.manager.loggerDict[name]


@pytest.fixture
def make_runner():
    """Build a runner writing to an in-memory stream; returns (runner, stream)."""

    def _make(
        track_failures: bool = False, **settings
    ) -> tuple[TestRunner, io.StringIO]:
        settings.setdefault("color", ColorMode.NEVER)
        out = io.StringIO()
        runner = TestRunner(
            settings=RunnerSettings(**settings),
            file=out,
            track_failures=track_failures,
        )
        return runner, out

    return _make
