"""ResizeHandler - turns boundary drags into panel width updates.

Lifecycle of a drag:

    begin(boundary, rect)  → ResizeSession created, pointer captured
    move(x) ... move(x)    → latest x stored, one frame callback scheduled
    <frame>                → flush(): latest x applied to the layout
    end()                  → pending x applied, capture released, session dropped

Pointer positions are converted to a percentage of the container width
and clamped to the range configured for the dragged boundary before they
reach the layout. Moves arriving faster than the frame rate collapse into
a single update.

The handler knows nothing about Qt. The frame clock and the global
pointer subscription are injected (``FrameScheduler``/``PointerCapture``)
so the Qt shell and the tests can each supply their own.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Protocol, TYPE_CHECKING
import logging

from .panels import Boundary, ClampRange

if TYPE_CHECKING:
    from ..config_types import ResizeConfig

logger = logging.getLogger(__name__)


class FrameScheduler(Protocol):
    """Runs a callback on the next animation frame."""

    def request(self, callback: Callable[[], None]) -> Any:
        """Schedule ``callback`` and return a handle for :meth:`cancel`."""

    def cancel(self, handle: Any) -> None:
        """Drop a previously requested callback if it has not run yet."""


class PointerCapture(Protocol):
    """Application-wide pointer move/release subscription."""

    def acquire(
        self, on_move: Callable[[float], None], on_release: Callable[[], None]
    ) -> Callable[[], None]:
        """Start delivering pointer x-coordinates; returns the release function."""


class ManualFrameScheduler:
    """FrameScheduler that runs callbacks only when told to.

    Used headless (CLI preview) where there is no event loop; call
    :meth:`run_pending` to play the role of the next frame.
    """

    def __init__(self):
        self._next_handle = 0
        self._pending: Dict[int, Callable[[], None]] = {}

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def request(self, callback: Callable[[], None]) -> int:
        self._next_handle += 1
        self._pending[self._next_handle] = callback
        return self._next_handle

    def cancel(self, handle: int) -> None:
        self._pending.pop(handle, None)

    def run_pending(self) -> int:
        """Run every queued callback; returns how many ran."""
        callbacks = list(self._pending.values())
        self._pending.clear()
        for callback in callbacks:
            callback()
        return len(callbacks)


@dataclass(frozen=True)
class ContainerRect:
    """Horizontal extent of the panel container, in pointer coordinates."""

    left: float
    width: float

    def percent_of(self, x: float) -> float:
        return (x - self.left) / self.width * 100.0


@dataclass
class ResizeSession:
    """State of one active drag. Discarded on pointer-up."""

    boundary: Boundary
    rect: ContainerRect
    pending_x: Optional[float] = None
    frame_handle: Any = None
    release: Optional[Callable[[], None]] = field(default=None, repr=False)


@dataclass(frozen=True)
class ResizeBounds:
    """Clamp range applied to each boundary while dragging."""

    library_player: ClampRange = ClampRange(20.0, 60.0)
    player_comments: ClampRange = ClampRange(30.0, 70.0)
    library_comments: ClampRange = ClampRange(20.0, 80.0)

    def for_boundary(self, boundary: Boundary) -> ClampRange:
        return {
            Boundary.LIBRARY_PLAYER: self.library_player,
            Boundary.PLAYER_COMMENTS: self.player_comments,
            Boundary.LIBRARY_COMMENTS: self.library_comments,
        }[boundary]

    @classmethod
    def from_config(cls, config: ResizeConfig) -> ResizeBounds:
        """Build from the ``resize`` configuration section.

        Raises:
            LayoutConfigError: If any range is malformed
        """
        return cls(
            library_player=ClampRange.from_pair(config.library_player),
            player_comments=ClampRange.from_pair(config.player_comments),
            library_comments=ClampRange.from_pair(config.library_comments),
        )


class ResizeHandler:
    """Drives width updates for the boundary currently being dragged.

    Args:
        layout: PanelLayoutController or anything exposing the same width
            setters and derived state (e.g. the Qt LayoutStore)
        scheduler: Frame clock used to coalesce pointer moves
        bounds: Clamp ranges per boundary (defaults 20-60 / 30-70 / 20-80)
        capture: Optional global pointer subscription acquired for the
            duration of each drag
    """

    def __init__(
        self,
        layout,
        scheduler: FrameScheduler,
        bounds: Optional[ResizeBounds] = None,
        capture: Optional[PointerCapture] = None,
    ):
        self._layout = layout
        self._scheduler = scheduler
        self._bounds = bounds or ResizeBounds()
        self._capture = capture
        self._session: Optional[ResizeSession] = None

    @property
    def is_resizing(self) -> bool:
        return self._session is not None

    @property
    def active_boundary(self) -> Optional[Boundary]:
        return self._session.boundary if self._session else None

    @property
    def session(self) -> Optional[ResizeSession]:
        return self._session

    @property
    def bounds(self) -> ResizeBounds:
        return self._bounds

    def begin(self, boundary: Boundary, rect: ContainerRect) -> Optional[ResizeSession]:
        """Start dragging ``boundary``.

        Returns:
            The new session, or None when the drag is not allowed (mobile
            layout, no handle for that boundary, drag already active, or a
            container with no width)
        """
        if self._layout.is_mobile:
            logger.debug("Resize ignored: mobile layout")
            return None
        if self._session is not None:
            logger.debug(f"Resize ignored: {self._session.boundary.value} drag already active")
            return None
        if boundary not in self._layout.active_boundaries():
            logger.debug(f"Resize ignored: no {boundary.value} handle in current layout")
            return None
        if rect.width <= 0:
            logger.debug(f"Resize ignored: container width {rect.width}")
            return None

        session = ResizeSession(boundary=boundary, rect=rect)
        self._session = session
        if self._capture is not None:
            session.release = self._capture.acquire(self.move, self.end)
        logger.debug(f"Resize started: {boundary.value}")
        return session

    def move(self, x: float) -> None:
        """Record a pointer position; applied on the next frame."""
        session = self._session
        if session is None:
            return
        session.pending_x = x
        if session.frame_handle is None:
            session.frame_handle = self._scheduler.request(self.flush)

    def flush(self) -> None:
        """Apply the most recent pointer position (frame callback)."""
        session = self._session
        if session is None:
            return
        session.frame_handle = None
        x, session.pending_x = session.pending_x, None
        if x is not None:
            self._apply(session, x)

    def end(self) -> None:
        """Finish the drag, applying any position still waiting for a frame."""
        session = self._session
        if session is None:
            return
        if session.frame_handle is not None:
            self._scheduler.cancel(session.frame_handle)
            session.frame_handle = None
        if session.pending_x is not None:
            self._apply(session, session.pending_x)
            session.pending_x = None
        self._teardown(session)
        logger.debug(f"Resize finished: {session.boundary.value}")

    def cancel(self) -> None:
        """Abort the drag without applying the pending position."""
        session = self._session
        if session is None:
            return
        if session.frame_handle is not None:
            self._scheduler.cancel(session.frame_handle)
            session.frame_handle = None
        session.pending_x = None
        self._teardown(session)
        logger.debug(f"Resize cancelled: {session.boundary.value}")

    def _teardown(self, session: ResizeSession) -> None:
        self._session = None
        release, session.release = session.release, None
        if release is not None:
            release()

    def _apply(self, session: ResizeSession, x: float) -> None:
        if session.boundary not in self._layout.active_boundaries():
            # Panel toggled mid-drag; the handle is gone.
            return
        mouse_pct = session.rect.percent_of(x)
        limits = self._bounds.for_boundary(session.boundary)

        if session.boundary is Boundary.PLAYER_COMMENTS:
            taken = self._layout.library_width if self._layout.show_library else 0.0
            available = 100.0 - taken
            if available <= 0:
                return
            relative = (mouse_pct - taken) / available * 100.0
            self._layout.set_player_share(limits.clamp(relative))
        else:
            # library-player and library-comments both move the library edge
            self._layout.set_library_width(limits.clamp(mouse_pct))


__all__ = [
    "FrameScheduler",
    "ManualFrameScheduler",
    "PointerCapture",
    "ContainerRect",
    "ResizeSession",
    "ResizeBounds",
    "ResizeHandler",
]
