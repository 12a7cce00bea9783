"""Reusable GUI components."""
from .frame_scheduler import QtFrameScheduler
from .panel_toolbar import PanelToolbar
from .pointer_capture import GlobalPointerCapture

__all__ = ['QtFrameScheduler', 'PanelToolbar', 'GlobalPointerCapture']
