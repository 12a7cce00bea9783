"""LayoutStore - Qt-facing owner of the panel layout.

Wraps PanelLayoutController and turns its state changes into a signal:

    Toolbar click / drag → LayoutStore.toggle_*() / set_*() → layoutChanged → WorkspacePanel

State Policy:
- The controller is the single source of truth; the store holds no copies
  of its flags
- layoutChanged is only emitted when the derived PanelState differs from
  the last emitted one, so repeated drag frames at a clamp limit stay quiet
- The store exposes the same width setters as the controller, which lets
  ResizeHandler drive it directly
"""

from __future__ import annotations
from typing import List
from PySide6.QtCore import QObject, Signal
import logging

from ...layout import Boundary, PanelLayoutController, PanelState

logger = logging.getLogger(__name__)


class LayoutStore(QObject):
    """Single owner of the workspace panel layout.

    Example usage:
        store = LayoutStore(PanelLayoutController())
        store.layoutChanged.connect(workspace.apply_state)
        store.toggle_player()   # layoutChanged emitted with library + player
    """

    layoutChanged = Signal(PanelState)

    def __init__(self, controller: PanelLayoutController | None = None, parent=None):
        super().__init__(parent)
        self._controller = controller or PanelLayoutController()
        self._last_state = self._controller.state
        logger.debug(f"LayoutStore initialized: {self._controller.snapshot()}")

    @property
    def controller(self) -> PanelLayoutController:
        return self._controller

    @property
    def state(self) -> PanelState:
        return self._controller.state

    # Read-through accessors used by ResizeHandler and UiStateController

    @property
    def is_mobile(self) -> bool:
        return self._controller.is_mobile

    @property
    def show_library(self) -> bool:
        return self._controller.show_library

    @property
    def library_width(self) -> float:
        return self._controller.library_width

    @property
    def can_toggle_library(self) -> bool:
        return self._controller.can_toggle_library

    @property
    def can_toggle_player(self) -> bool:
        return self._controller.can_toggle_player

    def can_toggle_comments(self, can_comment: bool = True) -> bool:
        return self._controller.can_toggle_comments(can_comment)

    @property
    def player_locked(self) -> bool:
        return self._controller.player_locked

    @property
    def comments_locked(self) -> bool:
        return self._controller.comments_locked

    def active_boundaries(self) -> List[Boundary]:
        return self._controller.active_boundaries()

    # Mutators

    def toggle_library(self) -> bool:
        changed = self._controller.toggle_library()
        self._publish()
        return changed

    def toggle_player(self) -> bool:
        changed = self._controller.toggle_player()
        self._publish()
        return changed

    def toggle_comments(self, can_comment: bool = True) -> bool:
        changed = self._controller.toggle_comments(can_comment)
        self._publish()
        return changed

    def reveal_comments(self) -> bool:
        changed = self._controller.reveal_comments()
        self._publish()
        return changed

    def set_mobile(self, is_mobile: bool) -> bool:
        changed = self._controller.set_mobile(is_mobile)
        self._publish()
        return changed

    def set_library_width(self, pct: float) -> None:
        self._controller.set_library_width(pct)
        self._publish()

    def set_player_share(self, pct: float) -> None:
        self._controller.set_player_share(pct)
        self._publish()

    def set_player_width(self, pct: float) -> None:
        self._controller.set_player_width(pct)
        self._publish()

    def set_comments_width(self, pct: float) -> None:
        self._controller.set_comments_width(pct)
        self._publish()

    def _publish(self) -> None:
        """Emit layoutChanged if the derived state moved."""
        state = self._controller.state
        if state == self._last_state:
            return
        self._last_state = state
        logger.info(
            "Layout changed: %s (%s)",
            "+".join(panel.value for panel in state.visible_panels),
            "/".join(f"{w:.1f}" for w in (
                state.library_width_pct, state.player_width_pct, state.comments_width_pct
            )),
        )
        self.layoutChanged.emit(state)


__all__ = ["LayoutStore"]
