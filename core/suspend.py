"""
Suspend action run when the countdown expires.
"""

from __future__ import annotations

import os
import shlex
import subprocess
from typing import Callable, List, Optional

from suspend_timer.suspend_timer import logger as app_logger

_LOGGER = app_logger.get_logger()

SUSPEND_COMMAND_ENV = "SUSPEND_TIMER_COMMAND"
LOGIND_SUSPEND_COMMAND = [
    "dbus-send",
    "--system",
    "--print-reply",
    "--dest=org.freedesktop.login1",
    "/org/freedesktop/login1",
    "org.freedesktop.login1.Manager.Suspend",
    "boolean:true",
]


def build_suspend_command(override: Optional[str] = None) -> List[str]:
    """Return the argv used to suspend, honouring ``SUSPEND_TIMER_COMMAND``."""
    custom = override if override is not None else os.environ.get(SUSPEND_COMMAND_ENV)
    if custom and custom.strip():
        return shlex.split(custom)
    return list(LOGIND_SUSPEND_COMMAND)


def suspend_machine(spawn: Callable[..., object] = subprocess.Popen) -> bool:
    """
    Spawn the suspend command without waiting for it.

    Returns False when the process could not be started.
    """
    command = build_suspend_command()
    _LOGGER.info("Suspending machine: {}", " ".join(command))
    try:
        spawn(
            command,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except OSError as exc:
        _LOGGER.error("Failed to start suspend command {}: {}", command[0], exc)
        return False
    return True
