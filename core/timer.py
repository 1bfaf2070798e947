"""
Minute-granularity countdown that runs an action when it reaches zero.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Protocol

from core.scheduler import Scheduler
from suspend_timer.suspend_timer import logger as app_logger

TICK_SECONDS = 60


class TextSink(Protocol):
    def setText(self, text: str) -> None:  # noqa: N802
        ...


class Timer:
    """
    Counts whole minutes down to zero and invokes ``on_expire`` once.

    Each tick is a separate one-shot callback on the scheduler. The handle of
    the pending tick is always cancelled before another one is scheduled, so
    an instance never has more than one tick outstanding. Expiry is always
    asynchronous: ``start(0)`` fires after one tick interval.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        on_expire: Callable[[], None],
        *,
        tick_seconds: float = TICK_SECONDS,
        label_format: Callable[[int], str] = str,
    ) -> None:
        self._logger = app_logger.get_logger()
        self._scheduler = scheduler
        self._on_expire = on_expire
        self._tick_seconds = tick_seconds
        self._label_format = label_format
        self._label: Optional[TextSink] = None
        self._handle: Any = None
        self._remaining = 0
        self._running = False

    @property
    def remaining_minutes(self) -> int:
        return self._remaining

    @property
    def running(self) -> bool:
        return self._running

    def set_label(self, sink: Optional[TextSink]) -> None:
        """Route future label updates to ``sink``; ``None`` detaches."""
        self._label = sink

    def start(self, initial_minutes: int) -> None:
        self._cancel_pending()
        self._remaining = initial_minutes
        self._running = True
        self._logger.info("Timer started with {} minute(s) remaining.", initial_minutes)
        self._update_label()
        self._schedule_tick()

    def stop(self) -> None:
        if not self._running:
            return
        self._cancel_pending()
        self._running = False
        self._logger.info("Timer stopped with {} minute(s) remaining.", self._remaining)

    def _tick(self) -> None:
        self._handle = None
        if not self._running:
            return
        self._remaining = max(0, self._remaining - 1)
        self._update_label()
        if self._remaining > 0:
            self._logger.debug("Timer tick; {} minute(s) remaining.", self._remaining)
            self._schedule_tick()
            return

        self._running = False
        self._logger.info("Timer expired; running expiry action.")
        self._on_expire()

    def _schedule_tick(self) -> None:
        self._handle = self._scheduler.schedule_after(self._tick_seconds, self._tick)

    def _cancel_pending(self) -> None:
        if self._handle is None:
            return
        self._scheduler.cancel(self._handle)
        self._handle = None

    def _update_label(self) -> None:
        if self._label is not None:
            self._label.setText(self._label_format(self._remaining))
