"""Main window for the GUI application.

Assembles the workspace using composition:
- PanelToolbar for panel toggles
- WorkspacePanel for the resizable panels
- LayoutStore as the single source of truth for panel state
"""
from __future__ import annotations
from PySide6.QtWidgets import QMainWindow
from PySide6.QtCore import Signal
import logging

from ..config_types import AppConfig
from ..layout import PanelLayoutController, PanelState
from .components import PanelToolbar
from .panels import WorkspacePanel
from .state import LayoutStore
from .ui_state_controller import UiStateController
from .window_state_manager import WindowStateManager

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window."""

    # Forwarded from LayoutStore for external listeners
    on_layout_changed = Signal(PanelState)

    def __init__(self, config: AppConfig | None = None, title: str = "Review Workspace",
                 restore_geometry: bool = True):
        """Initialize main window.

        Args:
            config: Typed application config (defaults if None)
            title: Project title shown in the toolbar
            restore_geometry: Restore saved window geometry from QSettings
        """
        super().__init__()
        self.config = config or AppConfig()

        self.state_manager = WindowStateManager(
            self.config.window.organization, self.config.window.application
        )

        self.setWindowTitle(title)
        self.resize(1400, 900)
        self.setMinimumSize(320, 400)

        self.layout_store = LayoutStore(PanelLayoutController.from_config(self.config.layout), self)

        self._create_ui(title)

        if restore_geometry:
            self.state_manager.restore_window_geometry(self)
        self._update_mobile_mode(self.width())

    def _create_ui(self, title: str):
        """Create the main UI layout."""
        self.toolbar = PanelToolbar(title, self)
        self.addToolBar(self.toolbar)

        self.workspace = WorkspacePanel(self.layout_store, self.config.resize, self)
        self.setCentralWidget(self.workspace)

        self.ui_state = UiStateController(toolbar=self.toolbar, store=self.layout_store)

        self.toolbar.libraryToggled.connect(self._on_library_toggled)
        self.toolbar.playerToggled.connect(self._on_player_toggled)
        self.toolbar.commentsToggled.connect(self._on_comments_toggled)

        self.layout_store.layoutChanged.connect(self._on_layout_changed)
        self.ui_state.update_all_states()

    # ----- Toolbar handlers -----

    def _on_library_toggled(self):
        self.layout_store.toggle_library()
        # Rejected toggles emit nothing; resync the button check state anyway
        self.ui_state.update_all_states()

    def _on_player_toggled(self):
        self.layout_store.toggle_player()
        self.ui_state.update_all_states()

    def _on_comments_toggled(self):
        self.layout_store.toggle_comments(self.ui_state.can_comment)
        self.ui_state.update_all_states()

    def _on_layout_changed(self, state: PanelState):
        self.ui_state.update_all_states()
        self.on_layout_changed.emit(state)

    # ----- Public API -----

    def set_can_comment(self, can_comment: bool):
        """Grant or revoke comment permission for the comments toggle."""
        self.ui_state.set_can_comment(can_comment)

    def on_annotation_created(self):
        """Open the comments panel so a new annotation can be described."""
        self.layout_store.reveal_comments()

    # ----- Qt events -----

    def resizeEvent(self, event):
        super().resizeEvent(event)
        if hasattr(self, "workspace"):
            self._update_mobile_mode(event.size().width())

    def _update_mobile_mode(self, width: int):
        is_mobile = width < self.config.layout.mobile_breakpoint_px
        if self.layout_store.set_mobile(is_mobile):
            if is_mobile:
                self.workspace.resize_handler.cancel()
            logger.info(f"Window width {width}px: {'mobile' if is_mobile else 'desktop'} layout")
            self.ui_state.update_all_states()

    def closeEvent(self, event):
        self.workspace.shutdown()
        self.state_manager.save_window_geometry(self)
        super().closeEvent(event)
