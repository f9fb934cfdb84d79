import logging

from ..config import config

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str | None = None, name: str = "market_console") -> logging.Logger:
    """Attach a single stdout handler to the package logger.

    Safe to call more than once; handlers are not duplicated.
    """
    logger = logging.getLogger(name)
    logger.setLevel((level or config.log_level).upper())
    logger.propagate = False

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)

    return logger
