"""Tests for logging setup."""

import logging

from areagraph.utils.logger import setup_logging


def test_console_handler():
    """Test a console handler is installed at the requested level."""
    logger = setup_logging(level="debug", name="areagraph.test_console")

    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], logging.StreamHandler)


def test_file_handler(tmp_path):
    """Test logging to a file."""
    log_file = tmp_path / "logs" / "graph.log"
    logger = setup_logging(level="INFO", log_file=log_file, name="areagraph.test_file")

    logger.info("Stacked 2 layers")
    for handler in logger.handlers:
        handler.flush()

    assert len(logger.handlers) == 2
    content = log_file.read_text()
    assert "areagraph.test_file - INFO - Stacked 2 layers" in content


def test_handlers_replaced():
    """Test repeated setup does not duplicate handlers."""
    setup_logging(name="areagraph.test_repeat")
    logger = setup_logging(name="areagraph.test_repeat")

    assert len(logger.handlers) == 1
