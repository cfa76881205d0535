"""Logging configuration with console and rotating file handlers"""
import glob
import logging
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

KEEP_SESSION_LOGS = 5
DEFAULT_LOG_FILE = "logs/memory-search.log"


def resolve_level(level: Union[int, str]) -> int:
    """Level name ("debug", "INFO", ...) or number to a logging level (unknown names: INFO)"""
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return level


def setup_logging(
    log_file: Optional[str] = DEFAULT_LOG_FILE,
    console_level: Union[int, str] = logging.INFO,
    file_level: Union[int, str] = logging.DEBUG,
) -> Optional[Path]:
    """
    Configure logging with two destinations:
    - Console: Brief logs (INFO by default)
    - File: Detailed logs (DEBUG by default) with rotation

    Rotation policy:
    - New log file per session (timestamp-based naming)
    - Keep last 5 session files (older ones removed on startup)
    - Auto-rotate when file reaches 10MB

    Args:
        log_file: Base path to log file (None = console only)
        console_level: Console logging level (number or name, e.g. "DEBUG")
        file_level: File logging level (number or name)

    Returns:
        Path of the session log file, or None when file logging is off
    """
    console_level = resolve_level(console_level)
    file_level = resolve_level(file_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Capture everything, filter in handlers

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    root_logger.addHandler(console_handler)

    if log_file is None:
        logging.info(f"Logging configured: console={logging.getLevelName(console_level)}")
        return None

    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    # Keep only the newest session files (the new one included)
    existing_logs = sorted(glob.glob(str(log_path.parent / f"{log_path.stem}_*.log")), reverse=True)
    for old_log in existing_logs[KEEP_SESSION_LOGS - 1:]:
        try:
            Path(old_log).unlink()
        except OSError:
            logging.getLogger(__name__).debug(f"Could not remove old log file {old_log}")

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    session_log = log_path.parent / f"{log_path.stem}_{timestamp}.log"

    file_handler = RotatingFileHandler(
        session_log,
        mode='a',
        maxBytes=10*1024*1024,  # 10MB
        backupCount=10,
        encoding='utf-8'
    )
    file_handler.setLevel(file_level)
    file_handler.setFormatter(logging.Formatter(
        '%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))
    root_logger.addHandler(file_handler)

    logging.info(f"Logging configured: console={logging.getLevelName(console_level)}, file={session_log} ({logging.getLevelName(file_level)})")
    return session_log


def configure_logging(settings, log_file: Optional[str] = DEFAULT_LOG_FILE) -> Optional[Path]:
    """
    Apply SearchSettings to logging (LOG_LEVEL drives the console level).

    Args:
        settings: SearchSettings (see config.load_settings)
        log_file: Base path to log file (None = console only)
    """
    return setup_logging(log_file=log_file, console_level=settings.log_level)
