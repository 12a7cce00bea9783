"""GUI Panel components - Composite UI sections."""

from .workspace_panel import WorkspacePanel

__all__ = ["WorkspacePanel"]
