"""
Centralized logging configuration for print_order_client.

The library never configures logging on import. All modules log through
loggers under the "print_order_client" namespace; applications either
configure that namespace themselves or call setup_logging().

Features:
    - Automatic asyncio task name in all log messages
    - Console output (always enabled)
    - Rotating file logs (optional)
    - Separate error log for ERROR/CRITICAL messages

Log Format:
    2025-12-03 10:15:30 [DEBUG   ] [Task-4] print_order_client.core.api_client - POST /v3.0/orders
    2025-12-03 10:15:31 [WARNING ] [Task-4] print_order_client.core.api_client - POST /v3.0/orders failed (400)

Usage:
    from print_order_client.logging_config import setup_logging, get_logger

    setup_logging(log_level=logging.DEBUG, enable_file_logging=False)

    logger = get_logger(__name__)
"""

import asyncio
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional


LOGGER_NAMESPACE = "print_order_client"


# =============================================================================
# TASK CONTEXT FILTER
# =============================================================================

class TaskContextFilter(logging.Filter):
    """
    Logging filter that adds asyncio task context to log records.

    Adds a ``task_name`` attribute: the name of the running asyncio task,
    or "-" when the record is emitted outside of a task.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        try:
            task = asyncio.current_task()
        except RuntimeError:
            task = None
        record.task_name = task.get_name() if task is not None else "-"
        return True


# =============================================================================
# LOGGING SETUP
# =============================================================================

def setup_logging(
    log_level: int = logging.INFO,
    log_dir: Optional[Path] = None,
    enable_file_logging: bool = False,
) -> logging.Logger:
    """
    Configure logging for the print_order_client namespace.

    This sets up:
    1. Console handler (always enabled)
    2. Rotating file handler (optional)
    3. Error file handler (optional) - ERROR/CRITICAL only
    4. Task context filter on every handler

    Calling it again replaces previously installed handlers.

    Args:
        log_level: Minimum log level (default: INFO)
        log_dir: Directory for log files (default: ./logs in the working directory)
        enable_file_logging: Whether to write to log files (default: False)

    Returns:
        The configured namespace logger
    """
    logger = logging.getLogger(LOGGER_NAMESPACE)
    logger.setLevel(log_level)
    logger.propagate = False

    logger.handlers.clear()

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)-8s] [%(task_name)s] %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    task_filter = TaskContextFilter()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    console_handler.addFilter(task_filter)
    logger.addHandler(console_handler)

    if enable_file_logging:
        if log_dir is None:
            log_dir = Path.cwd() / "logs"
        log_dir.mkdir(parents=True, exist_ok=True)

        app_log_file = log_dir / f"{LOGGER_NAMESPACE}.log"
        file_handler = RotatingFileHandler(
            filename=app_log_file,
            maxBytes=10 * 1024 * 1024,  # 10 MB per file
            backupCount=5,
            encoding="utf-8"
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        file_handler.addFilter(task_filter)
        logger.addHandler(file_handler)

        error_log_file = log_dir / f"{LOGGER_NAMESPACE}_error.log"
        error_handler = RotatingFileHandler(
            filename=error_log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8"
        )
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(formatter)
        error_handler.addFilter(task_filter)
        logger.addHandler(error_handler)

        logger.info(f"File logging enabled: {app_log_file}")

    logger.debug(f"Logging configured at level {logging.getLevelName(log_level)}")
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a child logger under the library namespace.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger instance, e.g. "print_order_client.services.orders"
    """
    if not name.startswith(LOGGER_NAMESPACE):
        name = f"{LOGGER_NAMESPACE}.{name}"
    return logging.getLogger(name)
