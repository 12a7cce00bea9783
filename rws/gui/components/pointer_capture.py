"""Application-wide pointer capture used while a boundary is dragged."""
from __future__ import annotations
from typing import Callable, Optional
from PySide6.QtCore import QEvent, QObject, Qt
from PySide6.QtWidgets import QApplication
import logging

logger = logging.getLogger(__name__)


class GlobalPointerCapture(QObject):
    """Forwards global mouse moves/releases to a drag in progress.

    While acquired, an event filter is installed on the QApplication so the
    drag keeps tracking the pointer even when it leaves the boundary handle,
    and a split cursor is forced for the whole application. Calling the
    release function returned by ``acquire()`` removes both; it is safe to
    call more than once.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self._on_move: Optional[Callable[[float], None]] = None
        self._on_release: Optional[Callable[[], None]] = None

    @property
    def is_active(self) -> bool:
        return self._on_move is not None

    def acquire(
        self, on_move: Callable[[float], None], on_release: Callable[[], None]
    ) -> Callable[[], None]:
        """Start forwarding pointer events.

        Args:
            on_move: Called with the global x-coordinate of each mouse move
            on_release: Called once the mouse button is released

        Returns:
            Function that removes the event filter and restores the cursor
        """
        if self.is_active:
            self.release()
        self._on_move = on_move
        self._on_release = on_release
        app = QApplication.instance()
        if app is not None:
            app.installEventFilter(self)
            QApplication.setOverrideCursor(Qt.SplitHCursor)
        logger.debug("Pointer captured")
        return self.release

    def release(self) -> None:
        if not self.is_active:
            return
        self._on_move = None
        self._on_release = None
        app = QApplication.instance()
        if app is not None:
            app.removeEventFilter(self)
            QApplication.restoreOverrideCursor()
        logger.debug("Pointer released")

    def eventFilter(self, watched, event) -> bool:
        event_type = event.type()
        if event_type == QEvent.MouseMove and self._on_move is not None:
            self._on_move(event.globalPosition().x())
        elif event_type == QEvent.MouseButtonRelease and self._on_release is not None:
            self._on_release()
        return False


__all__ = ["GlobalPointerCapture"]
