"""
Scheduling primitive backed by the Qt event loop.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol, Set

from PySide6.QtCore import QObject, Qt, QTimer


class Scheduler(Protocol):
    """Runs a callback once after a delay and lets the caller cancel it."""

    def schedule_after(self, seconds: float, callback: Callable[[], None]) -> Any:
        ...

    def cancel(self, handle: Any) -> None:
        ...


class QtScheduler(QObject):
    """
    Creates one single-shot QTimer per scheduled callback. Timers are owned by
    the scheduler and released once they fire or are cancelled.
    """

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._pending: Set[QTimer] = set()

    def schedule_after(self, seconds: float, callback: Callable[[], None]) -> QTimer:
        timer = QTimer(self)
        timer.setSingleShot(True)
        timer.setTimerType(Qt.TimerType.CoarseTimer)
        timer.setInterval(max(0, int(seconds * 1000)))
        timer.timeout.connect(lambda: self._fire(timer, callback))  # type: ignore[arg-type]
        self._pending.add(timer)
        timer.start()
        return timer

    def cancel(self, handle: QTimer) -> None:
        if handle not in self._pending:
            return
        handle.stop()
        self._release(handle)

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def _fire(self, timer: QTimer, callback: Callable[[], None]) -> None:
        if timer not in self._pending:
            return
        self._release(timer)
        callback()

    def _release(self, timer: QTimer) -> None:
        self._pending.discard(timer)
        timer.deleteLater()
