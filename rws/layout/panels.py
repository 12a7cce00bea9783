"""Value types for the three-panel workspace layout.

The workspace is a horizontal strip of up to three panels, left to right:

    ┌──────────┬──────────────┬──────────┐
    │ Library  │    Player    │ Comments │
    └──────────┴──────────────┴──────────┘
               ▲              ▲
        library-player   player-comments

When the player is hidden, the library and comments panels share a
``library-comments`` boundary instead.

All widths are percentages of the container width. State objects are
immutable; the controller always builds a new one.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

from .errors import LayoutConfigError


class Panel(str, Enum):
    """One of the three workspace regions, in left-to-right order."""

    LIBRARY = "library"
    PLAYER = "player"
    COMMENTS = "comments"


class Boundary(str, Enum):
    """Draggable divider between two adjacent panels."""

    LIBRARY_PLAYER = "library-player"
    PLAYER_COMMENTS = "player-comments"
    LIBRARY_COMMENTS = "library-comments"

    @property
    def panels(self) -> Tuple[Panel, Panel]:
        """Panels on the (left, right) side of this boundary."""
        left, right = self.value.split("-")
        return Panel(left), Panel(right)


@dataclass(frozen=True)
class ClampRange:
    """Inclusive [minimum, maximum] percentage range."""

    minimum: float
    maximum: float

    def __post_init__(self):
        if self.minimum > self.maximum:
            raise LayoutConfigError(
                f"Invalid clamp range: minimum {self.minimum} exceeds maximum {self.maximum}"
            )
        if self.minimum < 0 or self.maximum > 100:
            raise LayoutConfigError(
                f"Clamp range must lie within 0-100, got [{self.minimum}, {self.maximum}]"
            )

    def clamp(self, value: float) -> float:
        return max(self.minimum, min(self.maximum, value))

    @classmethod
    def from_pair(cls, pair) -> ClampRange:
        """Build from a two-item sequence (as stored in config)."""
        try:
            low, high = pair
        except (TypeError, ValueError):
            raise LayoutConfigError(f"Clamp range must be a [min, max] pair, got {pair!r}")
        return cls(float(low), float(high))


@dataclass(frozen=True)
class PanelWidths:
    """Rendered width of each panel; hidden panels are 0."""

    library: float = 0.0
    player: float = 0.0
    comments: float = 0.0

    @property
    def total(self) -> float:
        return self.library + self.player + self.comments

    def of(self, panel: Panel) -> float:
        return getattr(self, panel.value)

    def as_dict(self) -> Dict[str, float]:
        return {"library": self.library, "player": self.player, "comments": self.comments}


@dataclass(frozen=True)
class PanelState:
    """Snapshot of panel visibility and rendered widths.

    Invariant: the widths of visible panels sum to 100 and hidden
    panels contribute 0.
    """

    library_visible: bool
    player_visible: bool
    comments_visible: bool
    library_width_pct: float
    player_width_pct: float
    comments_width_pct: float

    @property
    def visible_panels(self) -> Tuple[Panel, ...]:
        flags = (
            (Panel.LIBRARY, self.library_visible),
            (Panel.PLAYER, self.player_visible),
            (Panel.COMMENTS, self.comments_visible),
        )
        return tuple(panel for panel, visible in flags if visible)

    @property
    def open_panels_count(self) -> int:
        return len(self.visible_panels)

    @property
    def widths(self) -> PanelWidths:
        return PanelWidths(self.library_width_pct, self.player_width_pct, self.comments_width_pct)

    def is_visible(self, panel: Panel) -> bool:
        return panel in self.visible_panels


__all__ = ["Panel", "Boundary", "ClampRange", "PanelWidths", "PanelState"]
