"""Logging setup for the areagraph package."""

import logging
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Union[str, Path]] = None,
    name: str = "areagraph"
) -> logging.Logger:
    """Configure the package logger.

    Previously installed handlers are closed and replaced, so calling this
    twice does not duplicate output.

    Args:
        level: Logging level (e.g. "INFO", "WARNING", "DEBUG")
        log_file: Optional file to log to in addition to the console
        name: Logger name

    Returns:
        logging.Logger: Configured logger
    """
    log_level = getattr(logging, level.upper())
    logger = logging.getLogger(name)
    logger.setLevel(log_level)

    # Remove any existing handlers and close them
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)

    formatter = logging.Formatter(LOG_FORMAT)

    ch = logging.StreamHandler()
    ch.setLevel(log_level)
    ch.setFormatter(formatter)
    logger.addHandler(ch)

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_path)
        fh.setLevel(log_level)
        fh.setFormatter(formatter)
        logger.addHandler(fh)

    return logger
