"""
Application coordinator wiring the tray menu to the suspend timer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from PySide6.QtCore import QObject, QTimer
from PySide6.QtWidgets import QApplication

from core.notification_popup import NotificationPopup
from core.panel_controller import PanelController
from core.preferences_dialog import PreferencesDialog
from core.scheduler import QtScheduler
from core.settings import TimerSettings, TimerSettingsManager
from core.suspend import suspend_machine
from core.timer_menu import TimerMenu
from suspend_timer.suspend_timer import logger as app_logger

APP_NAME = "Suspend Timer"
APP_VERSION = "1.0.0"
SETTINGS_REFRESH_INTERVAL_MS = 5000


@dataclass
class AppCoordinator(QObject):
    settings_manager: TimerSettingsManager = field(default_factory=TimerSettingsManager)
    suspend_action: Callable[[], object] = suspend_machine

    def __post_init__(self) -> None:
        super().__init__()
        self._logger = app_logger.get_logger()
        self._manual_shutdown_requested = False

        self._scheduler = QtScheduler(self)
        self._popup = NotificationPopup()
        self._menu = TimerMenu(self)
        self._preferences = PreferencesDialog(self.settings_manager)

        self._controller = PanelController(
            self.settings_manager,
            self._scheduler,
            self._menu,
            notify=self._popup.show_message,
            suspend_action=self.suspend_action,
        )

        self._menu.settingsRequested.connect(self._preferences.open_with_current)
        self._menu.exitRequested.connect(self.shutdown)
        self._preferences.settingsSaved.connect(self._apply_settings)

        self._settings: TimerSettings = self._controller.settings
        self._settings_timer = QTimer(self)
        self._settings_timer.setInterval(SETTINGS_REFRESH_INTERVAL_MS)
        self._settings_timer.timeout.connect(self._reload_settings)

    def start(self) -> None:
        self._logger.info("Starting {} v{}.", APP_NAME, APP_VERSION)
        self._menu.show()
        self._settings_timer.start()

    def shutdown(self) -> None:
        self._logger.info("Shutting down application on user request.")
        self._manual_shutdown_requested = True
        self._settings_timer.stop()
        self._controller.shutdown()
        self._popup.hide()
        self._preferences.hide()
        self._menu.hide()
        QApplication.instance().quit()

    @property
    def manual_shutdown_requested(self) -> bool:
        return self._manual_shutdown_requested

    @property
    def controller(self) -> PanelController:
        return self._controller

    @property
    def menu(self) -> TimerMenu:
        return self._menu

    @property
    def preferences(self) -> PreferencesDialog:
        return self._preferences

    def _reload_settings(self) -> None:
        new_settings = self.settings_manager.read_settings()
        if new_settings != self._controller.settings:
            self._logger.info("Detected settings change. Applying updates.")
            self._apply_settings(new_settings)

    def _apply_settings(self, settings: TimerSettings) -> None:
        previous = self._settings
        self._settings = settings
        if previous.max_timer_value != settings.max_timer_value:
            self._logger.info("Maximum timer value updated to {} minutes.", settings.max_timer_value)
        self._controller.on_settings_changed(settings)
