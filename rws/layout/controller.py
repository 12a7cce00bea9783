"""PanelLayoutController - visibility and width rules for the workspace.

The controller owns three visibility flags and the tracked widths used
when panels are shown side by side. Everything the rendering layer needs
(rendered widths, lock flags, which drag handles exist) is derived from
those on demand, so there is no cached state to fall out of sync.

Tracked widths:
- ``library_width``: share of the container taken by the library
- ``player_share``: fraction of the remaining space given to the player;
  the comments panel gets the rest

Storing the player/comments split as a ratio keeps the three tracked
widths summing to 100 no matter which setter was called last.

Toggle policy:
- At least one panel is always visible
- The library can only be hidden while all three panels are open
- Player and comments can only be opened while the library is visible
- Player and comments are locked open while the library is hidden
- On mobile every toggle is ignored and the library fills the screen
"""

from __future__ import annotations
from typing import Any, Dict, List, TYPE_CHECKING
import logging

from .errors import LayoutConfigError
from .panels import Boundary, Panel, PanelState, PanelWidths

if TYPE_CHECKING:
    from ..config_types import LayoutConfig

logger = logging.getLogger(__name__)

DEFAULT_LIBRARY_WIDTH = 30.0
DEFAULT_PLAYER_WIDTH = 45.0
DEFAULT_COMMENTS_WIDTH = 25.0

_WIDTH_TOLERANCE = 1e-6


def _bounded(value: float, low: float, high: float) -> float:
    return max(low, min(high, float(value)))


class PanelLayoutController:
    """Tracks which panels are open and how wide they are.

    Toggle methods return True when the layout changed and False when the
    request was rejected by the toggle policy. Rejections are never errors.

    Example:
        controller = PanelLayoutController()
        controller.toggle_player()      # library + player, 30/70
        controller.toggle_comments()    # all three, 30/45/25
        controller.toggle_player()      # library + comments, 30/70
        controller.widths               # PanelWidths(30.0, 0.0, 70.0)
    """

    def __init__(
        self,
        library_width: float = DEFAULT_LIBRARY_WIDTH,
        player_width: float = DEFAULT_PLAYER_WIDTH,
        comments_width: float = DEFAULT_COMMENTS_WIDTH,
        is_mobile: bool = False,
    ):
        """Initialize with the library open and the other panels closed.

        Args:
            library_width: Initial library width (percent)
            player_width: Initial player width in the three-panel layout
            comments_width: Initial comments width in the three-panel layout
            is_mobile: Start in single-panel mobile mode

        Raises:
            LayoutConfigError: If the widths are negative or do not sum to 100
        """
        widths = (library_width, player_width, comments_width)
        if any(w < 0 for w in widths):
            raise LayoutConfigError(f"Panel widths must not be negative: {widths}")
        if abs(sum(widths) - 100.0) > _WIDTH_TOLERANCE:
            raise LayoutConfigError(f"Default panel widths must sum to 100, got {sum(widths)}")

        self._is_mobile = is_mobile
        self._show_library = True
        self._show_player = False
        self._show_comments = False

        self._library_width = float(library_width)
        rest = player_width + comments_width
        self._player_share = player_width / rest if rest > 0 else 0.5

    @classmethod
    def from_config(cls, config: LayoutConfig, is_mobile: bool = False) -> PanelLayoutController:
        """Build a controller from the ``layout`` configuration section."""
        return cls(
            library_width=config.library_width,
            player_width=config.player_width,
            comments_width=config.comments_width,
            is_mobile=is_mobile,
        )

    # Raw flags

    @property
    def is_mobile(self) -> bool:
        return self._is_mobile

    @property
    def show_library(self) -> bool:
        return self._show_library

    @property
    def show_player(self) -> bool:
        return self._show_player

    @property
    def show_comments(self) -> bool:
        return self._show_comments

    # Tracked widths (three-panel layout)

    @property
    def library_width(self) -> float:
        return self._library_width

    @property
    def player_width(self) -> float:
        return (100.0 - self._library_width) * self._player_share

    @property
    def comments_width(self) -> float:
        return (100.0 - self._library_width) * (1.0 - self._player_share)

    @property
    def player_share(self) -> float:
        """Player share of the non-library space, as a percentage."""
        return self._player_share * 100.0

    # Derived state

    @property
    def open_panels_count(self) -> int:
        if self._is_mobile:
            return 1
        return sum([self._show_library, self._show_player, self._show_comments])

    @property
    def can_toggle_library(self) -> bool:
        if self._is_mobile:
            return False
        if not self._show_library:
            return True
        return self.open_panels_count == 3

    @property
    def player_locked(self) -> bool:
        return not self._show_library and self._show_player

    @property
    def comments_locked(self) -> bool:
        return not self._show_library and self._show_comments

    @property
    def can_toggle_player(self) -> bool:
        return self._can_toggle_side_panel(self._show_player, self.player_locked)

    def can_toggle_comments(self, can_comment: bool = True) -> bool:
        return can_comment and self._can_toggle_side_panel(self._show_comments, self.comments_locked)

    def _can_toggle_side_panel(self, visible: bool, locked: bool) -> bool:
        if self._is_mobile or locked:
            return False
        if not visible:
            return self._show_library
        return self.open_panels_count > 1

    @property
    def widths(self) -> PanelWidths:
        """Rendered widths for the current visibility flags."""
        if self._is_mobile:
            return PanelWidths(library=100.0)

        lib, player, comments = self._show_library, self._show_player, self._show_comments
        count = self.open_panels_count

        if count == 3:
            return PanelWidths(self.library_width, self.player_width, self.comments_width)
        if count == 2:
            if lib and player:
                return PanelWidths(library=self._library_width, player=100.0 - self._library_width)
            if lib and comments:
                return PanelWidths(library=self._library_width, comments=100.0 - self._library_width)
            share = self._player_share * 100.0
            return PanelWidths(player=share, comments=100.0 - share)
        if player:
            return PanelWidths(player=100.0)
        if comments:
            return PanelWidths(comments=100.0)
        return PanelWidths(library=100.0)

    @property
    def state(self) -> PanelState:
        """Immutable snapshot of what the rendering layer should draw."""
        widths = self.widths
        if self._is_mobile:
            return PanelState(True, False, False, widths.library, 0.0, 0.0)
        return PanelState(
            library_visible=self._show_library,
            player_visible=self._show_player,
            comments_visible=self._show_comments,
            library_width_pct=widths.library,
            player_width_pct=widths.player,
            comments_width_pct=widths.comments,
        )

    def active_boundaries(self) -> List[Boundary]:
        """Boundaries that currently have a drag handle."""
        if self._is_mobile:
            return []
        boundaries = []
        if self._show_library and self._show_player:
            boundaries.append(Boundary.LIBRARY_PLAYER)
        if self._show_library and self._show_comments and not self._show_player:
            boundaries.append(Boundary.LIBRARY_COMMENTS)
        if self._show_player and self._show_comments:
            boundaries.append(Boundary.PLAYER_COMMENTS)
        return boundaries

    def is_visible(self, panel: Panel) -> bool:
        return self.state.is_visible(panel)

    # Toggles

    def toggle_library(self) -> bool:
        """Show the library, or hide it when all three panels are open."""
        if self._is_mobile:
            logger.debug("Library toggle ignored: mobile layout")
            return False
        if not self._show_library:
            self._show_library = True
            return True
        if self.can_toggle_library:
            self._show_library = False
            return True
        logger.debug(f"Library toggle rejected: {self.open_panels_count} panel(s) open")
        return False

    def toggle_player(self) -> bool:
        """Show or hide the player panel."""
        if not self.can_toggle_player:
            logger.debug(
                f"Player toggle rejected (mobile={self._is_mobile}, locked={self.player_locked}, "
                f"open={self.open_panels_count})"
            )
            return False
        self._show_player = not self._show_player
        return True

    def toggle_comments(self, can_comment: bool = True) -> bool:
        """Show or hide the comments panel.

        Args:
            can_comment: Whether the current user may comment; the panel
                stays as it is when False
        """
        if not self.can_toggle_comments(can_comment):
            logger.debug(
                f"Comments toggle rejected (mobile={self._is_mobile}, locked={self.comments_locked}, "
                f"can_comment={can_comment}, open={self.open_panels_count})"
            )
            return False
        self._show_comments = not self._show_comments
        return True

    def reveal_comments(self) -> bool:
        """Open the comments panel if it is closed.

        Used when an annotation is drawn on the player so the new comment
        has somewhere to go.
        """
        if self._is_mobile or self._show_comments:
            return False
        self._show_comments = True
        return True

    def set_mobile(self, is_mobile: bool) -> bool:
        if is_mobile == self._is_mobile:
            return False
        self._is_mobile = is_mobile
        logger.debug(f"Mobile layout: {is_mobile}")
        return True

    # Width setters

    def set_library_width(self, pct: float) -> None:
        """Set the library width; player and comments keep their ratio."""
        self._library_width = _bounded(pct, 0.0, 100.0)

    def set_player_share(self, pct: float) -> None:
        """Give the player ``pct`` percent of the non-library space."""
        self._player_share = _bounded(pct, 0.0, 100.0) / 100.0

    def set_player_width(self, pct: float) -> None:
        """Set the three-panel player width; comments take the remainder."""
        available = 100.0 - self._library_width
        if available <= 0:
            return
        self._player_share = _bounded(pct, 0.0, available) / available

    def set_comments_width(self, pct: float) -> None:
        """Set the three-panel comments width; the player takes the remainder."""
        available = 100.0 - self._library_width
        if available <= 0:
            return
        self._player_share = 1.0 - _bounded(pct, 0.0, available) / available

    def snapshot(self) -> Dict[str, Any]:
        """Plain-dict summary for logging and the CLI preview."""
        state = self.state
        return {
            "visible": [panel.value for panel in state.visible_panels],
            "widths": state.widths.as_dict(),
            "mobile": self._is_mobile,
            "can_toggle_library": self.can_toggle_library,
            "player_locked": self.player_locked,
            "comments_locked": self.comments_locked,
            "boundaries": [b.value for b in self.active_boundaries()],
        }


__all__ = [
    "PanelLayoutController",
    "DEFAULT_LIBRARY_WIDTH",
    "DEFAULT_PLAYER_WIDTH",
    "DEFAULT_COMMENTS_WIDTH",
]
