"""Tests for WindowStateManager component."""

import pytest
from PySide6.QtCore import QSettings
from PySide6.QtWidgets import QMainWindow

from rws.gui.window_state_manager import WindowStateManager


@pytest.fixture
def manager():
    """Create WindowStateManager instance for testing."""
    yield WindowStateManager("TestOrg", "TestApp")
    QSettings("TestOrg", "TestApp").clear()


@pytest.fixture
def main_window(qapp):
    window = QMainWindow()
    window.resize(800, 600)
    return window


class TestWindowStateManager:

    def test_settings_identity(self, manager):
        assert manager.settings.organizationName() == "TestOrg"
        assert manager.settings.applicationName() == "TestApp"

    def test_save_window_geometry(self, manager, main_window):
        manager.save_window_geometry(main_window)
        assert manager.settings.value("geometry") is not None
        assert manager.settings.value("windowState") is not None

    def test_restore_window_geometry(self, manager, main_window):
        manager.save_window_geometry(main_window)
        main_window.resize(640, 480)
        assert manager.restore_window_geometry(main_window) is True

    def test_restore_without_saved_geometry(self, manager, main_window):
        manager.clear()
        assert manager.restore_window_geometry(main_window) is False
