# teleproj/utils/logging.py
"""
Logging configuration for teleproj.
"""
import sys
from pathlib import Path
from typing import Optional

from loguru import logger
from teleproj.constants import APP_NAME, LOG_FORMAT, LOG_ROTATION, LOG_RETENTION


def setup_logging(debug: bool = False, log_dir: Optional[Path] = None) -> None:
    """
    Configure the application logging.

    Console output stays quiet unless something goes wrong, since stdout
    carries the resolved path for the shell wrapper.

    Args:
        debug: Whether to enable debug logging.
        log_dir: Directory for the rotating log file. No file is written
            when omitted.
    """
    # Remove default handlers
    logger.remove()

    log_level = "DEBUG" if debug else "WARNING"
    logger.add(
        sys.stderr,
        format=LOG_FORMAT,
        level=log_level,
        diagnose=debug,  # Include variable values in traceback if debug is True
    )

    if log_dir is None:
        return

    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "teleproj.log"
    logger.add(
        log_file,
        format=LOG_FORMAT,
        level="DEBUG",
        rotation=LOG_ROTATION,
        retention=LOG_RETENTION,
        compression="zip",
    )

    logger.debug(f"Logging initialized. Log file: {log_file}")


def get_logger(name: str = APP_NAME):
    """
    Get a logger instance with the given name.

    Args:
        name: The name for the logger, usually the module's ``__name__``.

    Returns:
        A loguru logger bound to ``name``.
    """
    return logger.bind(name=name)
