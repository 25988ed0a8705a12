"""
Centralized logging configuration for leftpad.
Ensures all logging goes to files and never to stdout/stderr so that padded
output can be piped without log lines mixed in.
"""
import logging
from pathlib import Path

from leftpad.config import LOG_DIR_NAME, LOG_FILE_NAME, LOG_FORMAT


def get_log_file() -> Path:
    """Return the log file path, creating its directory if needed."""
    logs_dir = Path.home() / LOG_DIR_NAME / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    return logs_dir / LOG_FILE_NAME


def setup_logging(verbose: bool = False):
    """Setup centralized logging for the entire application.

    Args:
        verbose: Enable debug level logging if True
    """
    # Clear any existing handlers to avoid stdout/stderr leakage
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)

    level = logging.DEBUG if verbose else logging.INFO

    file_handler = logging.FileHandler(get_log_file(), encoding="utf-8")
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logging.root.setLevel(level)
    logging.root.handlers = [file_handler]

    # prompt_toolkit logs through asyncio; keep it in the file as well
    for logger_name in ['leftpad', 'asyncio']:
        logger = logging.getLogger(logger_name)
        logger.handlers = [file_handler]
        logger.setLevel(level)
        logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance that's guaranteed to only log to files.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger instance configured for file-only output
    """
    logger = logging.getLogger(name)

    # Ensure this logger doesn't accidentally write to stdout/stderr
    logger.propagate = False

    if not any(isinstance(h, logging.FileHandler) for h in logger.handlers):
        file_handler = logging.FileHandler(get_log_file(), encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)

    return logger
