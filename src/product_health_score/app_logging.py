"""Logging setup for the health score service."""

import logging

_LOGGER_NAME = "product_health_score"
_LOG_FORMAT = "%(asctime)s %(levelname)s [health-score] %(name)s: %(message)s"


def configure_logging(level: int = logging.INFO) -> logging.Logger:
    """Attach one stream handler to the package logger and return it.

    Repeated calls only update the level, so app factories can call this freely.
    """
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    if logger.handlers:
        return logger
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
