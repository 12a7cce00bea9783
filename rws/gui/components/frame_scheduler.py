"""QTimer-backed frame clock for coalescing drag updates."""
from __future__ import annotations
from typing import Callable, Set
from PySide6.QtCore import QObject, QTimer
import logging

logger = logging.getLogger(__name__)


class QtFrameScheduler(QObject):
    """Runs callbacks once per frame interval using single-shot timers.

    Implements the FrameScheduler protocol expected by ResizeHandler:
    ``request()`` returns the timer as the handle, ``cancel()`` stops it.

    Example:
        scheduler = QtFrameScheduler(interval_ms=16)
        handle = scheduler.request(handler.flush)
        scheduler.cancel(handle)
    """

    def __init__(self, interval_ms: int = 16, parent=None):
        """Initialize the scheduler.

        Args:
            interval_ms: Delay before a requested callback runs
            parent: Parent QObject
        """
        super().__init__(parent)
        self._interval_ms = max(0, int(interval_ms))
        # Keep timers referenced until they fire or are cancelled
        self._timers: Set[QTimer] = set()

    @property
    def interval_ms(self) -> int:
        return self._interval_ms

    @property
    def pending_count(self) -> int:
        return len(self._timers)

    def request(self, callback: Callable[[], None]) -> QTimer:
        timer = QTimer(self)
        timer.setSingleShot(True)
        timer.timeout.connect(lambda: self._fire(timer, callback))
        self._timers.add(timer)
        timer.start(self._interval_ms)
        return timer

    def cancel(self, handle: QTimer) -> None:
        if handle in self._timers:
            handle.stop()
            self._discard(handle)

    def cancel_all(self) -> None:
        for timer in list(self._timers):
            self.cancel(timer)

    def _fire(self, timer: QTimer, callback: Callable[[], None]) -> None:
        if timer not in self._timers:
            return
        self._discard(timer)
        callback()

    def _discard(self, timer: QTimer) -> None:
        self._timers.discard(timer)
        timer.deleteLater()


__all__ = ["QtFrameScheduler"]
