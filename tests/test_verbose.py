"""Tests for debug logger setup and isolation."""

import logging
from pathlib import Path

import pytest

from strictcheck.verbose import setup_logger


def test_logger_creates_debug_log(tmp_path: Path):
    debug_file = tmp_path / "debug.log"
    logger = setup_logger(debug_file=debug_file, logger_name="strictcheck_t1")

    assert not logger.disabled
    assert logger.level == logging.DEBUG
    assert debug_file.exists()


def test_logger_writes_timestamped_messages(tmp_path: Path):
    debug_file = tmp_path / "debug.log"
    logger = setup_logger(debug_file=debug_file, logger_name="strictcheck_t2")

    logger.debug("test message")

    content = debug_file.read_text()
    assert "test message" in content
    assert content.startswith("[")


def test_verbose_mode_adds_stderr_handler(tmp_path: Path):
    logger = setup_logger(
        tmp_path / "debug.log", verbose=True, logger_name="strictcheck_t3"
    )

    handler_types = [type(h).__name__ for h in logger.handlers]
    assert handler_types == ["FileHandler", "StreamHandler"]


def test_verbose_without_file_logs_to_stderr_only():
    logger = setup_logger(verbose=True, logger_name="strictcheck_t4")

    assert len(logger.handlers) == 1
    assert type(logger.handlers[0]) is logging.StreamHandler


def test_logger_creates_parent_directories(tmp_path: Path):
    debug_file = tmp_path / "nested" / "dir" / "debug.log"
    setup_logger(debug_file=debug_file, logger_name="strictcheck_t5")

    assert debug_file.exists()


def test_separate_names_write_separate_files(tmp_path: Path):
    log1 = tmp_path / "one.log"
    log2 = tmp_path / "two.log"
    logger1 = setup_logger(log1, logger_name="strictcheck_runner_one")
    logger2 = setup_logger(log2, logger_name="strictcheck_runner_two")

    logger1.debug("Message from one")
    logger2.debug("Message from two")

    assert "Message from one" in log1.read_text()
    assert "Message from two" not in log1.read_text()
    assert "Message from two" in log2.read_text()


def test_same_logger_name_raises_error(tmp_path: Path):
    setup_logger(tmp_path / "a.log", logger_name="strictcheck_shared")

    with pytest.raises(RuntimeError) as exc_info:
        setup_logger(tmp_path / "b.log", logger_name="strictcheck_shared")

    error_msg = str(exc_info.value)
    assert "strictcheck_shared" in error_msg
    assert "already exists" in error_msg
