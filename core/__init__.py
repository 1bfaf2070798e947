"""
Countdown, settings and tray widgets for the suspend timer.
"""

from .settings import TimerSettings, TimerSettingsManager  # noqa: F401
from .timer import Timer  # noqa: F401
