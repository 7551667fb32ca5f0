"""Pytest configuration and fixtures."""

import logging
import textwrap
from pathlib import Path

import pytest

from suitetally.result import TestResult

SUITE_NAME = "DummySuite"
SUITE_FULL_NAME = "tests.fixtures.DummySuite"
CASE_NAME = "dummy_method"
CASE_FULL_NAME = "tests.fixtures.DummySuite.dummy_method"


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Detach handlers from suitetally loggers after each test."""
    yield

    # Module loggers keep references to their parents, so loggers are reset
    # in place rather than removed from the registry.
    names = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name.startswith("suitetally")
    ]

    for name in names:
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)


@pytest.fixture
def case_result() -> TestResult:
    return TestResult(CASE_NAME, CASE_FULL_NAME)


@pytest.fixture
def suite_result() -> TestResult:
    return TestResult(SUITE_NAME, SUITE_FULL_NAME, is_suite=True)


@pytest.fixture()
def tmp_yaml(tmp_path):
    """Helper that writes YAML content to a temp file and returns its path."""

    def _write(content: str, name: str = "results.yaml") -> Path:
        p = tmp_path / name
        p.write_text(textwrap.dedent(content))
        return p

    return _write
