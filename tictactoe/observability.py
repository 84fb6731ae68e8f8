"""
logging setup, called once from the entry point
"""
import logging

from .config import LOG_FORMAT, get_settings


def setup_logging(level=None):
    """
    attach a single stream handler to the package logger
    """
    logger = logging.getLogger("tictactoe")
    logger.setLevel((level or get_settings().log_level).upper())
    # don't stack handlers if called twice
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
