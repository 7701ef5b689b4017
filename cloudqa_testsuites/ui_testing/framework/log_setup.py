"""
================================================================================
Logging Setup
================================================================================

Centralized Loguru configuration for a test run.

Sinks:
    - Console (stderr), colorized
    - Per-run execution log file (reports/test-execution.log by default)

The locator and executor never write to these sinks directly; they receive a
bound logger at construction time.

Author: Automation Team
License: MIT
================================================================================
"""

import sys
from pathlib import Path
from typing import List, Optional

from loguru import logger

from .config_loader import ConfigLoader


DEFAULT_LOG_FORMAT = "[{time:YYYY-MM-DD HH:mm:ss.SSS}] | {level: <8} | {message}"

_logger_initialized: bool = False
_handler_ids: List[int] = []


def init_logger(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    config: Optional[ConfigLoader] = None,
) -> None:
    """
    Initialize the Loguru logger for the test run.

    Safe to call more than once; only the first call configures sinks.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to config value.
        log_file: Execution log path. Defaults to config value.
        config: Configuration loader to read defaults from
    """
    global _logger_initialized

    if _logger_initialized:
        return

    config = config or ConfigLoader()
    log_level = (level or config.get("logging.level", "INFO")).upper()
    log_format = config.get("logging.format", DEFAULT_LOG_FORMAT)
    log_file = log_file or config.get("logging.file", "reports/test-execution.log")

    logger.remove()
    _handler_ids.append(
        logger.add(
            sys.stderr,
            level=log_level,
            format=log_format,
            colorize=True,
            backtrace=True,
            diagnose=False,
        )
    )

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        _handler_ids.append(
            logger.add(
                log_file,
                level=log_level,
                format=log_format.replace("{level: <8}", "{level}"),
                encoding="utf-8",
                enqueue=True,
            )
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {log_level}")


def reset_logger() -> None:
    """Remove sinks added by init_logger (used by tests)."""
    global _logger_initialized

    for handler_id in _handler_ids:
        try:
            logger.remove(handler_id)
        except ValueError:
            pass
    _handler_ids.clear()
    _logger_initialized = False


__all__ = [
    "init_logger",
    "reset_logger",
    "DEFAULT_LOG_FORMAT",
]
