"""
Logging setup for the suspend timer.

The console level comes from ``SUSPEND_TIMER_LOG_LEVEL`` and the log file
location from ``SUSPEND_TIMER_LOG_FILE`` or ``SUSPEND_TIMER_LOG_DIR``.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Mapping, Optional

from loguru import logger as _logger

_LOG_INITIALISED = False
LOG_FILE_NAME = "suspend_timer.log"
DEFAULT_CONSOLE_LEVEL = "INFO"
_VALID_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


def resolve_log_path(environ: Mapping[str, str] = os.environ) -> Path:
    explicit = environ.get("SUSPEND_TIMER_LOG_FILE")
    if explicit:
        return Path(explicit).expanduser()
    log_dir = environ.get("SUSPEND_TIMER_LOG_DIR")
    if log_dir:
        return Path(log_dir).expanduser() / LOG_FILE_NAME
    return Path.home() / ".local" / "share" / "SuspendTimer" / LOG_FILE_NAME


def resolve_console_level(environ: Mapping[str, str] = os.environ) -> str:
    level = environ.get("SUSPEND_TIMER_LOG_LEVEL", "").strip().upper()
    return level if level in _VALID_LEVELS else DEFAULT_CONSOLE_LEVEL


def configure(log_path: Optional[Path] = None, console_level: Optional[str] = None) -> None:
    """Install the console and rotating file sinks once per process."""
    global _LOG_INITIALISED
    if _LOG_INITIALISED:
        return
    target = log_path or resolve_log_path()
    target.parent.mkdir(parents=True, exist_ok=True)

    _logger.remove()
    if sys.stderr is not None:
        _logger.add(sys.stderr, level=console_level or resolve_console_level(), enqueue=True)
    _logger.add(
        target,
        level="DEBUG",
        rotation="10 MB",
        retention=5,
        encoding="utf-8",
        enqueue=True,
        backtrace=True,
        diagnose=False,
    )
    _LOG_INITIALISED = True


def get_logger():
    """Return the shared logger instance."""
    configure()
    return _logger
