"""
Logging utilities for the Answer Grader.

Only the service layer imports this module; the grading core logs through
plain ``logging.getLogger(__name__)`` loggers and never touches the disk.
"""
import logging
import sys
from datetime import date
from typing import Optional

from ..config import settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def dated_log_name(prefix: str, day: Optional[date] = None) -> str:
    """Log file name such as ``grading_20261017.log``"""
    day = day or date.today()
    return f"{prefix}_{day.strftime('%Y%m%d')}.log"


def _file_handler(log_file: str) -> logging.Handler:
    settings.LOGS_DIR.mkdir(parents=True, exist_ok=True)
    return logging.FileHandler(settings.LOGS_DIR / log_file, encoding="utf-8")


def setup_logger(name: str, log_file: str = None, level=logging.INFO) -> logging.Logger:
    """
    Build a named logger writing to stdout and, when file logging is
    enabled, to ``LOGS_DIR/log_file``.
    
    The logger does not propagate to the root logger, so lines are not
    printed a second time by ``logging.basicConfig`` handlers.
    
    Args:
        name: Logger name
        log_file: Optional log file name
        level: Logging level
    
    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False
    
    if logger.handlers:
        return logger
    
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file and settings.LOG_TO_FILE:
        handlers.append(_file_handler(log_file))
    
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    
    return logger


grading_logger = setup_logger('grading', dated_log_name('grading'))
