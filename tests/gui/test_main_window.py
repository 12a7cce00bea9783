"""Tests for MainWindow composition."""

import pytest
from PySide6.QtCore import QSettings, QSize
from PySide6.QtGui import QResizeEvent

from rws.config_types import AppConfig, WindowConfig
from rws.gui.main_window import MainWindow
from rws.layout import Panel


@pytest.fixture
def window(qapp):
    config = AppConfig(window=WindowConfig(organization="TestOrg", application="TestMainWindow"))
    win = MainWindow(config, title="Spring Campaign", restore_geometry=False)
    win.resize(1200, 800)
    win.show()
    yield win
    win.close()
    QSettings("TestOrg", "TestMainWindow").clear()


class TestMainWindow:

    def test_composition(self, window):
        assert window.toolbar.title_label.text() == "Spring Campaign"
        assert window.workspace.store is window.layout_store

    def test_toolbar_toggles_panels(self, window):
        window.toolbar.btn_player.click()
        assert window.layout_store.state.visible_panels == (Panel.LIBRARY, Panel.PLAYER)
        assert window.toolbar.btn_player.isChecked()

    def test_rejected_click_keeps_button_state(self, window):
        window.toolbar.btn_player.click()
        window.toolbar.btn_library.click()
        assert window.layout_store.state.library_visible
        assert window.toolbar.btn_library.isChecked()

    def test_narrow_window_switches_to_mobile(self, window):
        window.toolbar.btn_player.click()
        window.resizeEvent(QResizeEvent(QSize(500, 800), QSize(1200, 800)))
        assert window.layout_store.is_mobile
        assert window.layout_store.state.visible_panels == (Panel.LIBRARY,)
        window.resizeEvent(QResizeEvent(QSize(1200, 800), QSize(500, 800)))
        assert not window.layout_store.is_mobile
        assert window.layout_store.state.player_visible

    def test_annotation_reveals_comments(self, window):
        window.toolbar.btn_player.click()
        window.on_annotation_created()
        assert window.layout_store.state.comments_visible

    def test_comment_permission(self, window):
        window.set_can_comment(False)
        window.toolbar.btn_comments.click()
        assert not window.layout_store.state.comments_visible

    def test_layout_signal_forwarded(self, window):
        seen = []
        window.on_layout_changed.connect(seen.append)
        window.toolbar.btn_comments.click()
        assert seen and seen[-1].comments_visible
