"""Typed configuration dataclasses for review-workspace.

Provides strongly-typed configuration objects that can be used throughout
the application for better type safety and IDE support.
"""
from __future__ import annotations
from dataclasses import dataclass, field, asdict
from typing import List, Dict, Any

from .layout.errors import LayoutConfigError


@dataclass
class LayoutConfig:
    """Initial panel widths and the mobile breakpoint.

    Raises:
        LayoutConfigError: If a width is negative or the three widths do
            not sum to 100
    """
    library_width: float = 30.0
    player_width: float = 45.0
    comments_width: float = 25.0
    mobile_breakpoint_px: int = 768  # windows narrower than this use the single-panel layout

    def __post_init__(self):
        widths = (self.library_width, self.player_width, self.comments_width)
        if any(w < 0 for w in widths):
            raise LayoutConfigError(f"Panel widths must not be negative: {widths}")
        if abs(sum(widths) - 100.0) > 1e-6:
            raise LayoutConfigError(f"Default panel widths must sum to 100, got {float(sum(widths))}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)


@dataclass
class ResizeConfig:
    """Drag clamp ranges (percent) and frame coalescing interval."""
    library_player: List[float] = field(default_factory=lambda: [20.0, 60.0])
    player_comments: List[float] = field(default_factory=lambda: [30.0, 70.0])  # relative to non-library space
    library_comments: List[float] = field(default_factory=lambda: [20.0, 80.0])
    frame_interval_ms: int = 16

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)


@dataclass
class WindowConfig:
    """QSettings identity used for window geometry persistence."""
    organization: str = "rws"
    application: str = "ReviewWorkspace"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)


@dataclass
class AppConfig:
    """Root application configuration with all subsections."""
    log_level: str = "INFO"
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    resize: ResizeConfig = field(default_factory=ResizeConfig)
    window: WindowConfig = field(default_factory=WindowConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to nested dictionary.

        Returns:
            Nested dict structure matching config format
        """
        return {
            "log_level": self.log_level,
            "layout": self.layout.to_dict(),
            "resize": self.resize.to_dict(),
            "window": self.window.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> AppConfig:
        """Create typed config from dictionary.

        Args:
            data: Dictionary config (from load_config)

        Returns:
            Typed AppConfig instance
        """
        return cls(
            log_level=data.get("log_level", "INFO"),
            layout=LayoutConfig(**data.get("layout", {})),
            resize=ResizeConfig(**data.get("resize", {})),
            window=WindowConfig(**data.get("window", {})),
        )


__all__ = [
    "AppConfig",
    "LayoutConfig",
    "ResizeConfig",
    "WindowConfig",
]
