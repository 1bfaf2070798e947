"""Tests for the tray menu widgets and the preferences dialog."""
import pytest
from PySide6.QtWidgets import QDialogButtonBox

from core.preferences_dialog import PreferencesDialog
from core.settings import MAX_TIMER_VALUE_KEY, SLIDER_VALUE_KEY, TimerSettings, TimerSettingsManager
from core.timer_menu import TimerMenu


@pytest.fixture
def menu(qt_app):
    widget = TimerMenu()
    emitted = {"toggled": [], "slider": []}
    widget.toggled.connect(emitted["toggled"].append)
    widget.sliderChanged.connect(emitted["slider"].append)
    return widget, emitted


class TestTimerMenuSetters:
    """Programmatic updates never echo back as signals."""

    def test_set_toggle_state_is_silent(self, menu):
        widget, emitted = menu
        widget.set_toggle_state(True)
        assert widget.toggle_state is True
        widget.set_toggle_state(False)
        assert widget.toggle_state is False
        assert emitted["toggled"] == []

    def test_set_slider_percent_is_silent(self, menu):
        widget, emitted = menu
        widget.set_slider_percent(40)
        assert widget.slider_percent == 40
        assert emitted["slider"] == []

    def test_set_toggle_text(self, menu):
        widget, _ = menu
        widget.set_toggle_text("12 min")
        assert widget.toggle_text == "12 min"

    def test_status_label_accepts_text(self, menu):
        widget, _ = menu
        widget.status_label.setText("Suspend in 3 min")
        assert widget.status_label.text() == "Suspend in 3 min"


class TestTimerMenuSubscriptions:
    """User interaction reaches handlers registered through the capability set."""

    def test_user_toggle_reaches_handler(self, menu):
        widget, emitted = menu
        received = []
        widget.on_toggle(received.append)
        widget._switch.click()
        assert received == [True]
        assert emitted["toggled"] == [True]

    def test_user_slider_move_reaches_handler(self, menu):
        widget, _ = menu
        received = []
        widget.on_value_changed(received.append)
        widget._slider.setValue(70)
        assert received == [70]


class TestPreferencesDialog:
    def test_open_loads_stored_values(self, qt_app, backend):
        backend.values = {SLIDER_VALUE_KEY: 30, MAX_TIMER_VALUE_KEY: 90}
        dialog = PreferencesDialog(TimerSettingsManager(backend=backend))
        dialog.open_with_current()
        assert dialog._max_spin.value() == 90
        assert dialog._slider_spin.value() == 30
        assert dialog._preview_label.text() == "27 min"
        dialog.hide()

    def test_save_writes_both_keys_and_emits(self, qt_app, backend):
        dialog = PreferencesDialog(TimerSettingsManager(backend=backend))
        saved = []
        dialog.settingsSaved.connect(saved.append)
        dialog.open_with_current()

        dialog._max_spin.setValue(200)
        dialog._slider_spin.setValue(25)
        assert dialog._preview_label.text() == "50 min"
        buttons = dialog.findChild(QDialogButtonBox)
        buttons.button(QDialogButtonBox.StandardButton.Save).click()

        assert backend.values[MAX_TIMER_VALUE_KEY] == 200
        assert backend.values[SLIDER_VALUE_KEY] == 25
        assert saved == [TimerSettings(slider_value=25, max_timer_value=200)]
        assert not dialog.isVisible()
