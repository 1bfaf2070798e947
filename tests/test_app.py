"""Tests for AppCoordinator wiring, settings polling and shutdown."""
import pytest

import core.app as app_module
from core.app import AppCoordinator
from core.settings import MAX_TIMER_VALUE_KEY, SLIDER_VALUE_KEY, TimerSettings, TimerSettingsManager


class FakeApplication:
    """Stands in for QApplication so shutdown does not end the test's event loop."""

    quit_calls = 0

    @classmethod
    def instance(cls):
        return cls

    @classmethod
    def quit(cls):
        cls.quit_calls += 1


@pytest.fixture
def coordinator(qt_app, backend, monkeypatch):
    monkeypatch.setattr(app_module, "QApplication", FakeApplication)
    FakeApplication.quit_calls = 0
    backend.values = {SLIDER_VALUE_KEY: 50, MAX_TIMER_VALUE_KEY: 10}
    suspends = []
    instance = AppCoordinator(
        settings_manager=TimerSettingsManager(backend=backend),
        suspend_action=lambda: suspends.append(True),
    )
    yield instance, suspends
    instance.controller.shutdown()


class TestInitialState:
    def test_menu_reflects_stored_settings(self, coordinator):
        instance, _ = coordinator
        assert instance.menu.slider_percent == 50
        assert instance.menu.toggle_text == "5 min"
        assert instance.menu.status_label.text() == "Suspend Timer"


class TestSettingsPolling:
    """External settings changes are picked up on the next refresh."""

    def test_external_change_reaches_switch_text(self, coordinator, backend):
        instance, _ = coordinator
        backend.values[SLIDER_VALUE_KEY] = 20
        backend.values[MAX_TIMER_VALUE_KEY] = 60

        instance._reload_settings()

        assert instance.controller.settings == TimerSettings(slider_value=20, max_timer_value=60)
        assert instance.menu.slider_percent == 20
        assert instance.menu.toggle_text == "12 min"

    def test_unchanged_settings_leave_menu_alone(self, coordinator):
        instance, _ = coordinator
        instance.menu.set_toggle_text("marker")
        instance._reload_settings()
        assert instance.menu.toggle_text == "marker"

    def test_refresh_timer_runs_after_start(self, coordinator):
        instance, _ = coordinator
        instance.start()
        assert instance._settings_timer.isActive()
        assert instance._settings_timer.interval() == app_module.SETTINGS_REFRESH_INTERVAL_MS

    def test_saved_preferences_reach_menu(self, coordinator, backend):
        instance, _ = coordinator
        saved = TimerSettings(slider_value=100, max_timer_value=30)
        TimerSettingsManager(backend=backend).write_settings(saved)
        instance.preferences.settingsSaved.emit(saved)
        assert instance.menu.slider_percent == 100
        assert instance.menu.toggle_text == "30 min"


class TestShutdown:
    def test_shutdown_stops_timer_and_flags_manual_exit(self, coordinator):
        instance, suspends = coordinator
        instance.start()
        instance.menu.toggled.emit(True)
        assert instance.controller.timer.running
        assert instance.menu.status_label.text() == "Suspend in 5 min"

        instance.shutdown()

        assert not instance.controller.timer.running
        assert instance.manual_shutdown_requested
        assert not instance._settings_timer.isActive()
        assert FakeApplication.quit_calls == 1
        assert suspends == []

    def test_exit_menu_entry_shuts_down(self, coordinator):
        instance, _ = coordinator
        instance.menu.exitRequested.emit()
        assert instance.manual_shutdown_requested
        assert FakeApplication.quit_calls == 1
