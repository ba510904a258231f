import logging

import pytest

from log_init import config_logger


def test_console_only():
    logger = config_logger()
    assert logger is logging.getLogger()
    assert len(logger.handlers) == 1
    assert logger.level == logging.INFO


def test_file_handler(tmp_path):
    path = tmp_path / "run.log"
    logger = config_logger(str(path), "debug")

    logging.debug("debug message")
    for handler in logger.handlers:
        handler.flush()

    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2
    assert "[DEBUG] debug message" in path.read_text()


def test_reconfiguring_replaces_handlers(tmp_path):
    config_logger(str(tmp_path / "a.log"))
    logger = config_logger()
    assert len(logger.handlers) == 1


def test_unknown_level():
    with pytest.raises(ValueError, match="VERBOSE"):
        config_logger(level="verbose")
