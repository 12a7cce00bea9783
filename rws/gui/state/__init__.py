"""GUI state stores."""
from .layout_store import LayoutStore

__all__ = ["LayoutStore"]
