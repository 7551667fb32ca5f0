"""Tests for verbose logging."""

import logging
from pathlib import Path

from suitetally.result import TestResult
from suitetally.verbose import setup_logger


def test_logger_creates_debug_log(tmp_path: Path):
    debug_file = tmp_path / "debug.log"
    logger = setup_logger(debug_file=debug_file, verbose=False)

    assert not logger.disabled
    assert logger.level == logging.DEBUG
    assert debug_file.exists()


def test_logger_writes_to_file(tmp_path: Path):
    debug_file = tmp_path / "debug.log"
    logger = setup_logger(debug_file=debug_file, verbose=False)

    logger.debug("test message")

    content = debug_file.read_text()
    assert "test message" in content
    assert "[" in content  # timestamp


def test_verbose_mode_adds_stderr_handler(tmp_path: Path):
    logger = setup_logger(debug_file=tmp_path / "debug.log", verbose=True)

    assert len(logger.handlers) == 2
    handler_types = [type(h).__name__ for h in logger.handlers]
    assert "StreamHandler" in handler_types
    assert "FileHandler" in handler_types


def test_non_verbose_mode_only_file_handler(tmp_path: Path):
    logger = setup_logger(debug_file=tmp_path / "debug.log", verbose=False)

    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], logging.FileHandler)


def test_no_file_and_not_verbose_is_silent():
    logger = setup_logger(verbose=False)

    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], logging.NullHandler)


def test_logger_creates_parent_directories(tmp_path: Path):
    debug_file = tmp_path / "nested" / "dir" / "debug.log"
    setup_logger(debug_file=debug_file, verbose=False)

    assert debug_file.exists()


def test_library_modules_log_through_package_logger(tmp_path: Path):
    debug_file = tmp_path / "debug.log"
    setup_logger(debug_file=debug_file, verbose=False)

    suite = TestResult("S", "Demo.S", is_suite=True)
    case = TestResult("ok", "Demo.S.ok")
    case.mark_success()
    suite.add_result(case)

    assert "Demo.S: Inconclusive -> Success" in debug_file.read_text()


def test_setup_logger_replaces_handlers(tmp_path: Path):
    log1 = tmp_path / "first.log"
    log2 = tmp_path / "second.log"

    setup_logger(log1, verbose=False, logger_name="suitetally_isolated")
    logger = setup_logger(log2, verbose=False, logger_name="suitetally_isolated")
    logger.debug("only in second")

    assert "only in second" not in log1.read_text()
    assert "only in second" in log2.read_text()
