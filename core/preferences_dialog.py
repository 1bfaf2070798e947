"""
Preferences dialog for the timer range and the default slider position.
"""

from __future__ import annotations

from PySide6.QtCore import Signal
from PySide6.QtWidgets import (
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QLabel,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from core.i18n import _
from core.settings import TimerSettings, TimerSettingsManager, minutes_for


class PreferencesDialog(QDialog):
    settingsSaved = Signal(object)

    def __init__(self, settings_manager: TimerSettingsManager, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._settings_manager = settings_manager
        self.setWindowTitle(_("Suspend Timer Settings"))

        self._max_spin = QSpinBox()
        self._max_spin.setRange(1, 1440)
        self._max_spin.setSuffix(" min")

        self._slider_spin = QSpinBox()
        self._slider_spin.setRange(0, 100)
        self._slider_spin.setSuffix(" %")

        self._preview_label = QLabel()

        form = QFormLayout()
        form.addRow(_("Maximum timer value"), self._max_spin)
        form.addRow(_("Slider position"), self._slider_spin)
        form.addRow(_("Timer starts at"), self._preview_label)

        buttons = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Save | QDialogButtonBox.StandardButton.Cancel
        )
        buttons.accepted.connect(self._save)  # type: ignore[arg-type]
        buttons.rejected.connect(self.reject)  # type: ignore[arg-type]

        layout = QVBoxLayout(self)
        layout.addLayout(form)
        layout.addWidget(buttons)

        self._max_spin.valueChanged.connect(self._update_preview)  # type: ignore[arg-type]
        self._slider_spin.valueChanged.connect(self._update_preview)  # type: ignore[arg-type]

    def open_with_current(self) -> None:
        """Load the stored values and show the dialog."""
        current = self._settings_manager.read_settings()
        self._max_spin.setValue(current.max_timer_value)
        self._slider_spin.setValue(current.slider_value)
        self._update_preview()
        self.show()
        self.raise_()
        self.activateWindow()

    def _update_preview(self) -> None:
        minutes = minutes_for(self._slider_spin.value(), self._max_spin.value())
        self._preview_label.setText(f"{minutes} min")

    def _save(self) -> None:
        settings = TimerSettings(
            slider_value=self._slider_spin.value(),
            max_timer_value=self._max_spin.value(),
        )
        self._settings_manager.write_settings(settings)
        self.settingsSaved.emit(self._settings_manager.read_settings())
        self.accept()
