"""UiStateController - panel toggle button state.

Keeps the toolbar buttons in line with the layout rules so the user can
see which toggles are possible before clicking:

- checked: the panel is currently visible
- enabled: the toggle would be accepted right now
- tooltip: explains why a button is disabled (locked, last panel, mobile)
"""
from __future__ import annotations
from PySide6.QtCore import QSignalBlocker
import logging

logger = logging.getLogger(__name__)

LOCKED_TIP = "Locked - enable the media library to toggle"
LAST_PANEL_TIP = "At least one other panel must stay open"
MOBILE_TIP = "Panels cannot be toggled on small screens"
NEEDS_LIBRARY_TIP = "Open the media library first"
NO_COMMENT_PERMISSION_TIP = "You do not have permission to comment"


class UiStateController:
    """Applies LayoutStore state to the PanelToolbar buttons.

    Usage:
        controller = UiStateController(toolbar, store)
        store.layoutChanged.connect(lambda _: controller.update_all_states())
        controller.set_can_comment(False)
    """

    def __init__(self, toolbar=None, store=None):
        """Initialize UI state controller.

        Args:
            toolbar: PanelToolbar instance
            store: LayoutStore instance
        """
        self._toolbar = toolbar
        self._store = store
        self._can_comment: bool = True

    @property
    def can_comment(self) -> bool:
        return self._can_comment

    def set_can_comment(self, can_comment: bool):
        """Set whether the current user may open the comments panel."""
        self._can_comment = can_comment
        logger.debug(f"UI state: can_comment={can_comment}")
        self.update_all_states()

    def update_all_states(self):
        """Update all toggle buttons from the current layout."""
        if not self._toolbar or not self._store:
            return
        state = self._store.state
        self._apply(self._toolbar.btn_library, state.library_visible,
                    self._store.can_toggle_library, self._library_tip())
        self._apply(self._toolbar.btn_player, state.player_visible,
                    self._store.can_toggle_player, self._side_tip(state.player_visible, self._store.player_locked))
        self._apply(self._toolbar.btn_comments, state.comments_visible,
                    self._store.can_toggle_comments(self._can_comment), self._comments_tip(state.comments_visible))

    def _apply(self, button, checked: bool, enabled: bool, tooltip: str):
        # Programmatic update; keep clicked/toggled listeners quiet
        with QSignalBlocker(button):
            button.setChecked(checked)
        button.setEnabled(enabled)
        button.setToolTip("" if enabled else tooltip)

    def _library_tip(self) -> str:
        if self._store.is_mobile:
            return MOBILE_TIP
        return LAST_PANEL_TIP

    def _side_tip(self, visible: bool, locked: bool) -> str:
        if self._store.is_mobile:
            return MOBILE_TIP
        if locked:
            return LOCKED_TIP
        if not visible:
            return NEEDS_LIBRARY_TIP
        return LAST_PANEL_TIP

    def _comments_tip(self, visible: bool) -> str:
        if not self._can_comment:
            return NO_COMMENT_PERMISSION_TIP
        return self._side_tip(visible, self._store.comments_locked)
