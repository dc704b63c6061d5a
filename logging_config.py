"""
Logging Configuration
Sets up console logging for the calculator modules.
"""
import logging
import sys

LOGGER_NAMES = ["app", "catalog", "components", "logic"]


def setup_logging(level=logging.INFO):
    """
    Configures the calculator's loggers with a single stdout handler.

    Streamlit re-executes the app script on every interaction, so existing
    handlers are cleared first to avoid duplicate lines.
    """
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        if logger.hasHandlers():
            logger.handlers.clear()
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.propagate = False
