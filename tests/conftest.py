"""Shared fixtures for the suspend timer tests."""
import os
import tempfile

os.environ.setdefault("SUSPEND_TIMER_LOG_DIR", tempfile.mkdtemp(prefix="suspend-timer-logs-"))
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest  # noqa: E402


class ManualScheduler:
    """Scheduler driven by the test: nothing fires until advance() is called."""

    def __init__(self):
        self.now = 0.0
        self._next_id = 0
        self.pending = {}

    def schedule_after(self, seconds, callback):
        self._next_id += 1
        self.pending[self._next_id] = (self.now + seconds, callback)
        return self._next_id

    def cancel(self, handle):
        self.pending.pop(handle, None)

    def advance(self, seconds):
        """Move time forward, firing due callbacks in order."""
        target = self.now + seconds
        while True:
            due = [
                (when, handle) for handle, (when, _) in self.pending.items() if when <= target
            ]
            if not due:
                break
            when, handle = min(due)
            _, callback = self.pending.pop(handle)
            self.now = when
            callback()
        self.now = target


class RecordingLabel:
    def __init__(self):
        self.texts = []

    def setText(self, text):  # noqa: N802
        self.texts.append(text)

    @property
    def text(self):
        return self.texts[-1] if self.texts else None


class MemoryBackend:
    """In-memory stand-in for QSettings."""

    def __init__(self, values=None):
        self.values = dict(values or {})
        self.sync_count = 0

    def value(self, key, default=None):
        return self.values.get(key, default)

    def setValue(self, key, value):  # noqa: N802
        self.values[key] = value

    def sync(self):
        self.sync_count += 1


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def label():
    return RecordingLabel()


@pytest.fixture
def backend():
    return MemoryBackend()


@pytest.fixture(scope="session")
def qt_app():
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
