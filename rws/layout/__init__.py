"""Qt-free layout core: panel visibility rules and drag-resize arithmetic."""

from .errors import LayoutConfigError
from .panels import Boundary, ClampRange, Panel, PanelState, PanelWidths
from .controller import PanelLayoutController
from .resize import (
    ContainerRect,
    FrameScheduler,
    ManualFrameScheduler,
    PointerCapture,
    ResizeBounds,
    ResizeHandler,
    ResizeSession,
)

__all__ = [
    "LayoutConfigError",
    "Boundary",
    "ClampRange",
    "Panel",
    "PanelState",
    "PanelWidths",
    "PanelLayoutController",
    "ContainerRect",
    "FrameScheduler",
    "ManualFrameScheduler",
    "PointerCapture",
    "ResizeBounds",
    "ResizeHandler",
    "ResizeSession",
]
