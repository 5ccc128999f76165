"""
Logging configuration for hapticpulse.

Console output goes to stderr so it never mixes with command output such as
`python -m hapticpulse --check`. An optional rotating file keeps a history of
pulses on long-running hosts.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# "2026-01-20 15:30:45 | DEBUG    | hapticpulse.controller | <HapticPulse(...)>: pulse of 1.0s started"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def parse_log_level(log_level: str) -> int:
    """
    Convert a level name to its logging constant.

    Raises:
        ValueError: If the name is not one of LOG_LEVELS
    """
    name = log_level.strip().upper()
    if name not in LOG_LEVELS:
        raise ValueError(f"Invalid log level '{log_level}'. Choose from: {', '.join(LOG_LEVELS)}")
    return logging.getLevelName(name)


def setup_logging(
    log_level: str = "INFO",
    log_file: str | None = None,
    console: bool = True,
) -> None:
    """
    Configure the root logger for the hapticpulse command line.

    Args:
        log_level: One of LOG_LEVELS (case-insensitive)
        log_file: Optional log file, rotated at 1MB with 3 backups
        console: Whether to log to stderr (default: True)

    Raises:
        ValueError: If log_level is invalid. Existing handlers are left untouched.
    """
    level = parse_log_level(log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_path, maxBytes=1024 * 1024, backupCount=3, encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    logging.getLogger("hapticpulse.logging").debug(
        f"Logging configured: level={logging.getLevelName(level)}, file={log_file}"
    )
