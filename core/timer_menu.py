"""
Tray icon and menu hosting the suspend timer controls.
"""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import QObject, QSize, Qt, Signal
from PySide6.QtGui import QAction, QIcon
from PySide6.QtWidgets import (
    QApplication,
    QCheckBox,
    QHBoxLayout,
    QLabel,
    QMenu,
    QSlider,
    QStyle,
    QSystemTrayIcon,
    QToolButton,
    QWidget,
    QWidgetAction,
)

from core.i18n import _


def _themed_icon(name: str, fallback: QStyle.StandardPixmap) -> QIcon:
    return QIcon.fromTheme(name, QApplication.style().standardIcon(fallback))


class TimerMenu(QObject):
    """
    Tray icon whose context menu holds a status line, the on/off switch with a
    settings button, and the duration slider.
    """

    toggled = Signal(bool)
    sliderChanged = Signal(int)
    settingsRequested = Signal()
    exitRequested = Signal()

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._menu = QMenu()

        self._status_action = QAction(_("Suspend Timer"), self._menu)
        self._status_action.setEnabled(False)
        self._status_action.setIcon(
            _themed_icon("system-shutdown-symbolic", QStyle.StandardPixmap.SP_TitleBarCloseButton)
        )

        switch_row = QWidget()
        switch_layout = QHBoxLayout(switch_row)
        switch_layout.setContentsMargins(12, 4, 8, 4)
        self._switch = QCheckBox()
        self._switch.setCursor(Qt.CursorShape.PointingHandCursor)
        self._settings_button = QToolButton()
        self._settings_button.setAutoRaise(True)
        self._settings_button.setToolTip(_("Settings"))
        self._settings_button.setAccessibleName(_("Settings"))
        self._settings_button.setIconSize(QSize(16, 16))
        self._settings_button.setIcon(
            _themed_icon("emblem-system-symbolic", QStyle.StandardPixmap.SP_FileDialogDetailedView)
        )
        switch_layout.addWidget(self._switch)
        switch_layout.addStretch()
        switch_layout.addWidget(self._settings_button)
        switch_action = QWidgetAction(self._menu)
        switch_action.setDefaultWidget(switch_row)

        slider_row = QWidget()
        slider_layout = QHBoxLayout(slider_row)
        slider_layout.setContentsMargins(12, 4, 12, 4)
        slider_icon = QLabel()
        slider_icon.setPixmap(
            _themed_icon(
                "preferences-system-time-symbolic", QStyle.StandardPixmap.SP_BrowserReload
            ).pixmap(16, 16)
        )
        self._slider = QSlider(Qt.Orientation.Horizontal)
        self._slider.setRange(0, 100)
        self._slider.setMinimumWidth(180)
        slider_layout.addWidget(slider_icon)
        slider_layout.addWidget(self._slider, 1)
        slider_action = QWidgetAction(self._menu)
        slider_action.setDefaultWidget(slider_row)

        exit_action = QAction(_("Exit"), self._menu)

        self._menu.addAction(self._status_action)
        self._menu.addAction(switch_action)
        self._menu.addAction(slider_action)
        self._menu.addSeparator()
        self._menu.addAction(exit_action)

        self._tray = QSystemTrayIcon(self)
        self._tray.setIcon(
            _themed_icon("system-shutdown-symbolic", QStyle.StandardPixmap.SP_ComputerIcon)
        )
        self._tray.setToolTip(_("Suspend Timer"))
        self._tray.setContextMenu(self._menu)

        self._switch.toggled.connect(self.toggled)  # type: ignore[arg-type]
        self._slider.valueChanged.connect(self.sliderChanged)  # type: ignore[arg-type]
        self._settings_button.clicked.connect(self._emit_settings_requested)  # type: ignore[arg-type]
        exit_action.triggered.connect(self.exitRequested)  # type: ignore[arg-type]

    @property
    def status_label(self) -> QAction:
        return self._status_action

    @property
    def toggle_state(self) -> bool:
        return self._switch.isChecked()

    @property
    def toggle_text(self) -> str:
        return self._switch.text()

    @property
    def slider_percent(self) -> int:
        return self._slider.value()

    def on_toggle(self, handler: Callable[[bool], None]) -> None:
        self.toggled.connect(handler)  # type: ignore[arg-type]

    def on_value_changed(self, handler: Callable[[int], None]) -> None:
        self.sliderChanged.connect(handler)  # type: ignore[arg-type]

    def set_toggle_state(self, state: bool) -> None:
        self._switch.blockSignals(True)
        self._switch.setChecked(state)
        self._switch.blockSignals(False)

    def set_toggle_text(self, text: str) -> None:
        self._switch.setText(text)

    def set_slider_percent(self, percent: int) -> None:
        self._slider.blockSignals(True)
        self._slider.setValue(percent)
        self._slider.blockSignals(False)

    def show(self) -> None:
        self._tray.show()

    def hide(self) -> None:
        self._tray.hide()

    def _emit_settings_requested(self) -> None:
        self._menu.hide()
        self.settingsRequested.emit()
