"""
Toolkit-independent controller tying the menu widgets, settings and timer together.
"""

from __future__ import annotations

from typing import Callable, Protocol

from core.i18n import _
from core.scheduler import Scheduler
from core.settings import TimerSettings, TimerSettingsManager
from core.timer import TextSink, Timer
from suspend_timer.suspend_timer import logger as app_logger


class TimerWidget(Protocol):
    """Capability set the controller needs from the menu."""

    @property
    def status_label(self) -> TextSink:
        ...

    def on_toggle(self, handler: Callable[[bool], None]) -> None:
        ...

    def on_value_changed(self, handler: Callable[[int], None]) -> None:
        ...

    def set_toggle_state(self, state: bool) -> None:
        ...

    def set_toggle_text(self, text: str) -> None:
        ...

    def set_slider_percent(self, percent: int) -> None:
        ...


def format_minutes(minutes: int) -> str:
    return f"{minutes} min"


def format_remaining(minutes: int) -> str:
    return _("Suspend in {minutes} min").format(minutes=minutes)


class PanelController:
    """
    Owns the countdown for the lifetime of the tray menu. Slider moves are
    persisted immediately; toggling the switch arms or cancels the timer.
    """

    def __init__(
        self,
        settings_manager: TimerSettingsManager,
        scheduler: Scheduler,
        widget: TimerWidget,
        *,
        notify: Callable[[str], None],
        suspend_action: Callable[[], object],
    ) -> None:
        self._logger = app_logger.get_logger()
        self._settings_manager = settings_manager
        self._widget = widget
        self._notify = notify
        self._suspend_action = suspend_action
        self._settings = settings_manager.read_settings()

        self.timer = Timer(scheduler, self._on_timer_expired, label_format=format_remaining)
        self.timer.set_label(widget.status_label)

        widget.set_slider_percent(self._settings.slider_value)
        widget.set_toggle_text(format_minutes(self._settings.start_minutes))
        widget.status_label.setText(_("Suspend Timer"))
        widget.on_toggle(self.on_toggled)
        widget.on_value_changed(self.on_slider_changed)

    @property
    def settings(self) -> TimerSettings:
        return self._settings

    def start_minutes(self) -> int:
        return self._settings.start_minutes

    def on_slider_changed(self, percent: int) -> None:
        self._settings_manager.write_slider_value(percent)
        self._settings = self._settings_manager.read_settings()
        self._widget.set_toggle_text(format_minutes(self._settings.start_minutes))

    def on_settings_changed(self, settings: TimerSettings) -> None:
        self._settings = settings
        self._widget.set_slider_percent(settings.slider_value)
        self._widget.set_toggle_text(format_minutes(settings.start_minutes))

    def on_toggled(self, state: bool) -> None:
        if state:
            minutes = self._settings.start_minutes
            self._logger.info("Suspend timer armed for {} minute(s).", minutes)
            self.timer.start(minutes)
            self._notify(
                _("System will suspend in {minutes} minutes").format(minutes=minutes)
            )
            return

        self._logger.info("Suspend timer cancelled by user.")
        self.timer.stop()
        self._notify(_("Suspend Timer stopped"))
        self._widget.status_label.setText(_("Suspend Timer"))

    def shutdown(self) -> None:
        self.timer.stop()
        self.timer.set_label(None)

    def _on_timer_expired(self) -> None:
        self._widget.set_toggle_state(False)
        self._widget.status_label.setText(_("Suspend Timer"))
        self._logger.info("Suspend timer expired.")
        self._suspend_action()
