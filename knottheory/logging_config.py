"""
Logging setup for the knottheory command line.

Every module logs through ``logging.getLogger(__name__)`` and stays silent
until a caller configures the ``knottheory`` logger. The CLI calls
``setup_logging`` with its ``--log-level`` and ``--log-file`` options.
Records go to stderr because stdout carries one JSON summary per knot.
"""
import logging
import sys
from typing import Optional

LOGGER_NAME = "knottheory"
LOG_FORMAT = '%(asctime)s %(name)s [%(levelname)s] %(message)s'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Route knottheory records to stderr and, optionally, to a file.

    Handlers from an earlier call are replaced, so repeated CLI runs in one
    process (as in the tests) do not print each record twice.

    Args:
        level: threshold for the package logger and its handlers
        log_file: path of a log file, truncated on open

    Returns:
        The configured ``knottheory`` logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug(f"Logging to stderr at {logging.getLevelName(level)}"
                 + (f" and to {log_file}" if log_file else ""))
    return logger
