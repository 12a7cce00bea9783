"""Errors raised by the layout core."""


class LayoutConfigError(ValueError):
    """Raised when layout defaults or clamp ranges are inconsistent."""


__all__ = ["LayoutConfigError"]
