import logging
import sys

APP_NAME = "kanjidic-records"
PACKAGE_LOGGER = "kanjidic_records"


def setup_logging(level=logging.WARNING):
    """Send package log records to stderr; stdout stays free for decoded output."""
    log_formatter = logging.Formatter(
        f"%(asctime)s - [%(levelname)-5s] - [{APP_NAME}] - %(message)s",
        datefmt="%H:%M:%S",
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(log_formatter)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    if logger.hasHandlers():
        logger.handlers.clear()
    logger.addHandler(handler)
    return logger
