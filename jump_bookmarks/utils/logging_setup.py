"""
Logging configuration for Jump Bookmarks.

This module sets up logging based on configuration settings. Console
output goes to stderr because stdout carries the paths printed by
``jump to``.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    config=None, verbose: bool = False, log_file: Optional[Path] = None
) -> None:
    """
    Set up logging configuration.

    Args:
        config: Configuration object providing ``log_level`` and ``log_file``
        verbose: Force DEBUG level on the console
        log_file: Optional log file path override
    """
    log_level = getattr(config, "log_level", "WARNING")
    if verbose:
        log_level = "DEBUG"

    if log_file is None:
        log_file = getattr(config, "log_file", None)

    handlers = []

    # Console handler
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    handlers.append(console_handler)

    # File handler
    if log_file is not None:
        log_path = Path(log_file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        handlers.append(file_handler)

    # Configure root logger
    logging.basicConfig(level=getattr(logging, log_level.upper()), handlers=handlers)

    logger = logging.getLogger(__name__)
    logger.debug(f"Logging initialized at {log_level}")
    if log_file is not None:
        logger.debug(f"Log file: {log_file}")
