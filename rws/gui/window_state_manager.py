"""Window geometry persistence using QSettings.

Only the window frame is persisted. The panel layout starts from the
configured defaults every time the workspace is built.
"""

from __future__ import annotations
from typing import TYPE_CHECKING
from PySide6.QtCore import QSettings
import logging

if TYPE_CHECKING:
    from PySide6.QtWidgets import QMainWindow

logger = logging.getLogger(__name__)


class WindowStateManager:
    """Saves and restores window geometry.

    Example:
        manager = WindowStateManager("rws", "ReviewWorkspace")
        manager.save_window_geometry(main_window)
        manager.restore_window_geometry(main_window)
    """

    def __init__(self, organization: str, application: str):
        """Initialize state manager.

        Args:
            organization: Organization name for QSettings
            application: Application name for QSettings
        """
        self.settings = QSettings(organization, application)

    def save_window_geometry(self, window: QMainWindow):
        """Save window geometry and state.

        Args:
            window: Main window to save state from
        """
        self.settings.setValue("geometry", window.saveGeometry())
        self.settings.setValue("windowState", window.saveState())
        logger.info("Window state saved")

    def restore_window_geometry(self, window: QMainWindow) -> bool:
        """Restore window geometry and state.

        Args:
            window: Main window to restore state to

        Returns:
            True if saved geometry was found
        """
        geometry = self.settings.value("geometry")
        if geometry:
            window.restoreGeometry(geometry)

        window_state = self.settings.value("windowState")
        if window_state:
            window.restoreState(window_state)

        if geometry:
            logger.info("Window state restored")
        return bool(geometry)

    def clear(self):
        """Forget saved geometry."""
        self.settings.remove("geometry")
        self.settings.remove("windowState")
