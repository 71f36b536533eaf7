"""
Logging configuration for the strvalid command line.

The library itself only creates loggers; handlers are installed here when
strvalid runs as a program.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: Union[str, int] = "WARNING", log_file: Optional[str] = None
) -> None:
    """
    Set up logging configuration.

    Args:
        level: Log level name or number for the root logger
        log_file: Optional log file path; parent directories are created
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper())

    handlers = []

    # Console handler; stdout is reserved for validation results
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    handlers.append(console_handler)

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        handlers.append(file_handler)

    logging.basicConfig(level=level, handlers=handlers, force=True)

    logger = logging.getLogger(__name__)
    logger.debug(f"Log level: {logging.getLevelName(level)}")
    if log_file is not None:
        logger.debug(f"Logging to file: {log_file}")
