"""WorkspacePanel - the three resizable panels and their drag handles.

Renders whatever PanelState the LayoutStore publishes:

    [Library] |lp| [Player] |pc| [Comments]
              |lc|  (only when the player is hidden)

Widths are applied as layout stretch factors so the panels keep their
percentages when the window is resized. Drags on a handle are routed to a
ResizeHandler, which writes the new widths back into the store.
"""

from __future__ import annotations
from typing import Dict
from PySide6.QtWidgets import QWidget, QHBoxLayout, QVBoxLayout, QFrame, QLabel
from PySide6.QtCore import Qt, Signal, QPoint
import logging

from ...config_types import ResizeConfig
from ...layout import Boundary, ContainerRect, Panel, PanelState, ResizeBounds, ResizeHandler
from ..components import GlobalPointerCapture, QtFrameScheduler
from ..state import LayoutStore

logger = logging.getLogger(__name__)

LOCK_MESSAGE = "\U0001F512 Locked - enable the media library to toggle"

# Stretch factors are integers; scale percentages to keep two decimals.
_STRETCH_SCALE = 100


class BoundaryHandle(QFrame):
    """Thin draggable divider between two panels."""

    pressed = Signal(object)  # Boundary

    def __init__(self, boundary: Boundary, parent=None):
        super().__init__(parent)
        self.boundary = boundary
        self.setObjectName(f"handle-{boundary.value}")
        self.setFixedWidth(4)
        self.setCursor(Qt.SplitHCursor)
        self.setFrameShape(QFrame.VLine)
        self.setFrameShadow(QFrame.Sunken)

    def mousePressEvent(self, event):
        if event.button() == Qt.LeftButton:
            self.pressed.emit(self.boundary)
            event.accept()
            return
        super().mousePressEvent(event)


class PanelFrame(QFrame):
    """Container for one panel's content with an optional lock banner."""

    def __init__(self, panel: Panel, title: str, placeholder: str = "", parent=None):
        super().__init__(parent)
        self.panel = panel
        self.setObjectName(f"panel-{panel.value}")
        self.setFrameShape(QFrame.StyledPanel)
        self.setMinimumWidth(0)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self.lock_banner = QLabel(LOCK_MESSAGE)
        self.lock_banner.setAlignment(Qt.AlignCenter)
        self.lock_banner.setStyleSheet("background: #ea580c; color: white; font-size: 11px; padding: 2px;")
        self.lock_banner.setVisible(False)
        layout.addWidget(self.lock_banner)

        self.title_label = QLabel(title)
        self.title_label.setStyleSheet("font-weight: bold; padding: 6px;")
        layout.addWidget(self.title_label)

        self.body = QLabel(placeholder)
        self.body.setAlignment(Qt.AlignCenter)
        self.body.setWordWrap(True)
        layout.addWidget(self.body, 1)

    def set_locked(self, locked: bool):
        self.lock_banner.setVisible(locked)


class WorkspacePanel(QWidget):
    """Three-panel workspace driven by a LayoutStore.

    Signals:
        resizeStarted(Boundary): A boundary drag was accepted
        resizeFinished(): The active drag ended
    """

    resizeStarted = Signal(object)
    resizeFinished = Signal()

    def __init__(self, store: LayoutStore, resize_config: ResizeConfig | None = None, parent=None):
        """Initialize the workspace.

        Args:
            store: Layout store to render and to write drag results into
            resize_config: Clamp ranges and frame interval (defaults if None)
            parent: Parent widget
        """
        super().__init__(parent)
        self._store = store
        resize_config = resize_config or ResizeConfig()

        self.scheduler = QtFrameScheduler(resize_config.frame_interval_ms, self)
        self.pointer_capture = GlobalPointerCapture(self)
        self.resize_handler = ResizeHandler(
            store,
            self.scheduler,
            ResizeBounds.from_config(resize_config),
            capture=_NotifyingCapture(self),
        )

        self._build_ui()
        store.layoutChanged.connect(self.apply_state)
        self.apply_state(store.state)

    def _build_ui(self):
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self.panels: Dict[Panel, PanelFrame] = {
            Panel.LIBRARY: PanelFrame(Panel.LIBRARY, "Media Library", "No media uploaded yet"),
            Panel.PLAYER: PanelFrame(Panel.PLAYER, "Player", "Select media\nChoose a video or image to view"),
            Panel.COMMENTS: PanelFrame(Panel.COMMENTS, "Comments", "No comments yet"),
        }
        self.handles: Dict[Boundary, BoundaryHandle] = {
            boundary: BoundaryHandle(boundary) for boundary in Boundary
        }
        for handle in self.handles.values():
            handle.pressed.connect(self._on_handle_pressed)

        # Order matters: stretch indices below follow insertion order
        for widget in (
            self.panels[Panel.LIBRARY],
            self.handles[Boundary.LIBRARY_PLAYER],
            self.handles[Boundary.LIBRARY_COMMENTS],
            self.panels[Panel.PLAYER],
            self.handles[Boundary.PLAYER_COMMENTS],
            self.panels[Panel.COMMENTS],
        ):
            layout.addWidget(widget)
        self._layout = layout

    @property
    def store(self) -> LayoutStore:
        return self._store

    def apply_state(self, state: PanelState):
        """Show/hide panels and handles and apply widths."""
        widths = state.widths
        for panel, frame in self.panels.items():
            visible = state.is_visible(panel)
            frame.setVisible(visible)
            stretch = int(round(widths.of(panel) * _STRETCH_SCALE)) if visible else 0
            self._layout.setStretchFactor(frame, stretch)

        active = set(self._store.active_boundaries())
        for boundary, handle in self.handles.items():
            handle.setVisible(boundary in active)

        self.panels[Panel.PLAYER].set_locked(self._store.player_locked and state.player_visible)
        self.panels[Panel.COMMENTS].set_locked(self._store.comments_locked and state.comments_visible)

    def container_rect(self) -> ContainerRect:
        """Container extent in global coordinates (matches pointer events)."""
        left = self.mapToGlobal(QPoint(0, 0)).x()
        return ContainerRect(left=float(left), width=float(self.width()))

    def _on_handle_pressed(self, boundary: Boundary):
        session = self.resize_handler.begin(boundary, self.container_rect())
        if session is not None:
            self.resizeStarted.emit(boundary)

    def shutdown(self):
        """Abort any drag and release global listeners."""
        self.resize_handler.cancel()
        self.scheduler.cancel_all()


class _NotifyingCapture:
    """Pointer capture that also tells the workspace when a drag ends."""

    def __init__(self, workspace: WorkspacePanel):
        self._workspace = workspace

    def acquire(self, on_move, on_release):
        release = self._workspace.pointer_capture.acquire(on_move, on_release)

        def _release():
            release()
            self._workspace.resizeFinished.emit()

        return _release


__all__ = ["WorkspacePanel", "BoundaryHandle", "PanelFrame", "LOCK_MESSAGE"]
