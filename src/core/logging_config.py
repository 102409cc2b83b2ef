"""One place to hook up the stdlib logging tree. Modules only ever call logging.getLogger(__name__)."""

import logging

from src.core.config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: str | int = LOG_LEVEL) -> logging.Logger:
    """Attach a single stream handler to the 'src' logger. Safe to call more than once."""
    logger = logging.getLogger("src")
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
