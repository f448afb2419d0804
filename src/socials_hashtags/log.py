"""File logging for API calls."""

from __future__ import annotations

import logging
from pathlib import Path

API_LOGGER_NAME = "hashtag_api"

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"


def configure_api_logging(log_dir: Path) -> logging.Logger:
    """Send the API logger to ``<log_dir>/hashtag_api.log``.

    Console output is suppressed; the logger does not propagate to root.
    Calling this again replaces the previous handler.

    Args:
        log_dir: Directory for the log file. Created if missing.

    Returns:
        The configured API logger.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    api_logger = logging.getLogger(API_LOGGER_NAME)
    api_logger.setLevel(logging.DEBUG)
    api_logger.propagate = False

    for handler in list(api_logger.handlers):
        api_logger.removeHandler(handler)
        handler.close()

    file_handler = logging.FileHandler(log_dir / "hashtag_api.log", encoding="utf-8")
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    api_logger.addHandler(file_handler)

    return api_logger
