"""
logger.py
----------
Centralized logging utility for the bill calculator.

Outputs:
---------
- Logs to console
- Logs to file when ECGBILL_LOG_FILE is set

Usage Example:
---------------
from ecgbill.utils.logger import get_logger
logger = get_logger(__name__)
logger.info("Bill computed.")
"""

import logging

from ecgbill import config

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: str = "ecgbill") -> logging.Logger:
    """
    Returns a configured logger instance that logs to console (and file,
    when one is configured).

    Parameters
    ----------
    name : str
        The name of the logger (typically the module name).
    """
    logger = logging.getLogger(name)
    logger.setLevel(config.LOG_LEVEL)

    # Avoid duplicate handlers
    if not logger.handlers:
        formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        if config.LOG_FILE:
            file_handler = logging.FileHandler(config.LOG_FILE, mode="a")
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger
