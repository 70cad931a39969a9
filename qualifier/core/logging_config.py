"""
Centralized logging configuration.

Every module logs through get_logger(__name__). setup_logging() runs once
when the application starts and attaches the handlers to the root logger:
stdout at the configured level, plus a daily file that records everything
when a log directory is configured.
"""
import logging
import sys
from datetime import date
from pathlib import Path
from typing import List, Optional, Union

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Client libraries that log every HTTP exchange at DEBUG
NOISY_LOGGERS = ("httpx", "httpcore", "urllib3", "google")

_logging_configured = False


def daily_log_file(log_dir: Union[str, Path], day: Optional[date] = None) -> Path:
    """Path of the log file for a given day (today by default)."""
    day = day or date.today()
    return Path(log_dir) / f"app_{day:%Y%m%d}.log"


def _build_handlers(log_level: str, log_dir: Optional[Union[str, Path]]) -> List[logging.Handler]:
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(log_level.upper())
    handlers: List[logging.Handler] = [console]

    if log_dir:
        Path(log_dir).mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(daily_log_file(log_dir), encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        handlers.append(file_handler)

    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(
    log_level: str = "INFO",
    log_dir: Optional[Union[str, Path]] = None,
) -> logging.Logger:
    """
    Attach the application's handlers to the root logger.

    Only the first call has an effect.

    Args:
        log_level: Console level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for daily log files; None or "" means console only

    Returns:
        The root logger
    """
    global _logging_configured

    root_logger = logging.getLogger()
    if _logging_configured:
        return root_logger

    root_logger.setLevel(logging.DEBUG)
    for handler in _build_handlers(log_level, log_dir):
        root_logger.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    _logging_configured = True
    root_logger.debug(f"Logging configured: level={log_level}, dir={log_dir or '-'}")
    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Logger for a module; pass __name__."""
    return logging.getLogger(name)
