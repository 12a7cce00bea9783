"""Tests for frame scheduler, pointer capture and panel toolbar."""

import pytest
from PySide6.QtCore import QEvent, QPointF, Qt
from PySide6.QtGui import QMouseEvent
from PySide6.QtTest import QTest
from PySide6.QtWidgets import QApplication, QWidget

from rws.gui.components import GlobalPointerCapture, PanelToolbar, QtFrameScheduler


class TestQtFrameScheduler:
    """Single-shot timer scheduling."""

    def test_callback_runs_once(self, qapp):
        scheduler = QtFrameScheduler(interval_ms=0)
        calls = []
        scheduler.request(lambda: calls.append(1))
        assert scheduler.pending_count == 1
        QTest.qWait(50)
        assert calls == [1]
        assert scheduler.pending_count == 0

    def test_cancel(self, qapp):
        scheduler = QtFrameScheduler(interval_ms=0)
        calls = []
        handle = scheduler.request(lambda: calls.append(1))
        scheduler.cancel(handle)
        QTest.qWait(50)
        assert calls == []

    def test_cancel_all(self, qapp):
        scheduler = QtFrameScheduler(interval_ms=5)
        calls = []
        scheduler.request(lambda: calls.append(1))
        scheduler.request(lambda: calls.append(2))
        scheduler.cancel_all()
        QTest.qWait(50)
        assert calls == []

    def test_negative_interval_clamped(self, qapp):
        assert QtFrameScheduler(interval_ms=-3).interval_ms == 0


def _mouse_event(event_type, x):
    button = Qt.LeftButton if event_type != QEvent.MouseMove else Qt.NoButton
    buttons = Qt.LeftButton if event_type == QEvent.MouseMove else Qt.NoButton
    return QMouseEvent(event_type, QPointF(x, 5), QPointF(x, 5), button, buttons, Qt.NoModifier)


class TestGlobalPointerCapture:
    """Application event filter forwarding."""

    @pytest.fixture
    def target(self, qapp):
        return QWidget()

    def test_forwards_move_and_release(self, qapp, target):
        capture = GlobalPointerCapture()
        moves, releases = [], []
        release = capture.acquire(moves.append, lambda: releases.append(True))
        try:
            QApplication.sendEvent(target, _mouse_event(QEvent.MouseMove, 42))
            QApplication.sendEvent(target, _mouse_event(QEvent.MouseButtonRelease, 42))
        finally:
            release()
        assert moves and moves[0] == pytest.approx(42.0)
        assert releases

    def test_release_stops_forwarding(self, qapp, target):
        capture = GlobalPointerCapture()
        moves = []
        release = capture.acquire(moves.append, lambda: None)
        release()
        release()  # idempotent
        QApplication.sendEvent(target, _mouse_event(QEvent.MouseMove, 10))
        assert moves == []
        assert not capture.is_active

    def test_override_cursor_restored(self, qapp):
        capture = GlobalPointerCapture()
        release = capture.acquire(lambda x: None, lambda: None)
        assert QApplication.overrideCursor() is not None
        release()
        assert QApplication.overrideCursor() is None


class TestPanelToolbar:
    """Toolbar signals."""

    def test_buttons_emit(self, qapp):
        toolbar = PanelToolbar("Spring Campaign")
        seen = []
        toolbar.libraryToggled.connect(lambda: seen.append("library"))
        toolbar.playerToggled.connect(lambda: seen.append("player"))
        toolbar.commentsToggled.connect(lambda: seen.append("comments"))
        toolbar.btn_library.click()
        toolbar.btn_player.click()
        toolbar.btn_comments.click()
        assert seen == ["library", "player", "comments"]
        assert toolbar.title_label.text() == "Spring Campaign"

    def test_buttons_checkable(self, qapp):
        toolbar = PanelToolbar()
        assert toolbar.btn_player.isCheckable()
