"""Tests for the file-only logging configuration."""
import logging

from leftpad.utils.logging_config import get_log_file, get_logger, setup_logging


def test_log_file_lives_under_home(isolated_home):
    log_file = get_log_file()

    assert log_file == isolated_home / ".leftpad" / "logs" / "leftpad.log"
    assert log_file.parent.is_dir()


def test_setup_logging_levels():
    setup_logging(verbose=True)
    assert logging.root.level == logging.DEBUG
    assert all(isinstance(h, logging.FileHandler) for h in logging.root.handlers)

    setup_logging(verbose=False)
    assert logging.root.level == logging.INFO


def test_get_logger_writes_to_file_only(isolated_home, capsys):
    logger = get_logger("leftpad.tests.sample")
    logger.warning("written to file")
    for handler in logger.handlers:
        handler.flush()

    assert logger.propagate is False
    captured = capsys.readouterr()
    assert captured.out == "" and captured.err == ""
    assert "written to file" in get_log_file().read_text(encoding="utf-8")


def test_get_logger_adds_file_handler_next_to_other_handlers():
    logger = logging.getLogger("leftpad.tests.preloaded")
    stray = logging.NullHandler()
    logger.addHandler(stray)
    try:
        get_logger("leftpad.tests.preloaded")

        assert stray in logger.handlers
        assert any(isinstance(h, logging.FileHandler) for h in logger.handlers)
    finally:
        logger.removeHandler(stray)
