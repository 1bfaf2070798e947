"""
QSettings-backed configuration for the suspend timer.
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from typing import Any, Optional

from PySide6.QtCore import QSettings

from suspend_timer.suspend_timer import logger as app_logger

_LOGGER = app_logger.get_logger()

ORGANIZATION_NAME = "SuspendTimer"
APPLICATION_NAME = "SuspendTimer"
SLIDER_VALUE_KEY = "slider-value"
MAX_TIMER_VALUE_KEY = "max-timer-value"

DEFAULT_SLIDER_VALUE = 50
DEFAULT_MAX_TIMER_VALUE = 120
_MIN_SLIDER_VALUE = 0
_MAX_SLIDER_VALUE = 100
_MIN_MAX_TIMER_VALUE = 1
_MAX_MAX_TIMER_VALUE = 1440


@dataclass(eq=True, frozen=True)
class TimerSettings:
    slider_value: int = DEFAULT_SLIDER_VALUE
    max_timer_value: int = DEFAULT_MAX_TIMER_VALUE

    @property
    def start_minutes(self) -> int:
        """Countdown length selected by the slider, in whole minutes."""
        return math.floor(self.slider_value / 100.0 * self.max_timer_value)


def minutes_for(slider_value: int, max_timer_value: int) -> int:
    return TimerSettings(slider_value, max_timer_value).start_minutes


def _default_backend() -> QSettings:
    ini_path = os.environ.get("SUSPEND_TIMER_SETTINGS")
    if ini_path:
        return QSettings(ini_path, QSettings.Format.IniFormat)
    return QSettings(
        QSettings.Format.IniFormat,
        QSettings.Scope.UserScope,
        ORGANIZATION_NAME,
        APPLICATION_NAME,
    )


class TimerSettingsManager:
    """Loads and stores the timer settings, clamping invalid data."""

    def __init__(self, *, backend: Optional[Any] = None) -> None:
        self._backend = backend if backend is not None else _default_backend()

    def read_settings(self) -> TimerSettings:
        return TimerSettings(
            slider_value=self._read_clamped(
                SLIDER_VALUE_KEY,
                DEFAULT_SLIDER_VALUE,
                _MIN_SLIDER_VALUE,
                _MAX_SLIDER_VALUE,
            ),
            max_timer_value=self._read_clamped(
                MAX_TIMER_VALUE_KEY,
                DEFAULT_MAX_TIMER_VALUE,
                _MIN_MAX_TIMER_VALUE,
                _MAX_MAX_TIMER_VALUE,
            ),
        )

    def write_slider_value(self, percent: int) -> None:
        value = max(_MIN_SLIDER_VALUE, min(_MAX_SLIDER_VALUE, int(percent)))
        self._backend.setValue(SLIDER_VALUE_KEY, value)
        self._backend.sync()

    def write_max_timer_value(self, minutes: int) -> None:
        value = max(_MIN_MAX_TIMER_VALUE, min(_MAX_MAX_TIMER_VALUE, int(minutes)))
        self._backend.setValue(MAX_TIMER_VALUE_KEY, value)
        self._backend.sync()

    def write_settings(self, settings: TimerSettings) -> None:
        self.write_max_timer_value(settings.max_timer_value)
        self.write_slider_value(settings.slider_value)

    def _read_clamped(self, name: str, default: int, lower: int, upper: int) -> int:
        raw = self._read_int(name)
        if raw is None:
            return default
        if raw < lower or raw > upper:
            _LOGGER.warning(
                "Invalid value {} for setting {}. Clamping to [{}, {}].",
                raw,
                name,
                lower,
                upper,
            )
        return max(lower, min(upper, raw))

    def _read_int(self, name: str) -> Optional[int]:
        value = self._backend.value(name)
        if value is None:
            return None
        try:
            return int(value)
        except (TypeError, ValueError):
            _LOGGER.warning("Setting {} has unexpected value {!r}.", name, value)
            return None
