"""Simple logging utility.

Wraps the standard logging module so every module of the package logs
with the same format. Handlers are attached once per logger name.
"""

import logging

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: str) -> logging.Logger:
    """Return a logger for *name* under the ``tile_partition`` hierarchy."""
    return logging.getLogger(name)


def configure_logging(level: int = logging.WARNING) -> logging.Logger:
    """Attach a stream handler to the package logger and set its level."""
    logger = logging.getLogger("tile_partition")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger
