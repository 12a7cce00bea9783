"""GUI module for Review Workspace.

Provides a Qt-based shell around the layout core: panel toggles,
drag-resizable boundaries and the single-panel mobile layout.
"""

__all__ = []
