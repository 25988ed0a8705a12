"""
Pytest configuration for leftpad tests.

Points HOME at a temporary directory so log files never land in the real
home directory, and closes any file handlers a test opened.
"""
import logging

import pytest


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Redirect the home directory used for log files."""
    monkeypatch.setenv("HOME", str(tmp_path))
    yield tmp_path

    loggers = [logging.root] + [logging.getLogger(name) for name in list(logging.root.manager.loggerDict)]
    for logger in loggers:
        for handler in logger.handlers[:]:
            if isinstance(handler, logging.FileHandler):
                logger.removeHandler(handler)
                handler.close()


@pytest.fixture
def output_lines():
    """Collect everything the shell displays."""
    return []
