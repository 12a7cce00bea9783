"""In-memory PointerCapture for driving ResizeHandler without Qt."""
from __future__ import annotations
from typing import Callable, Optional


class FakePointerCapture:
    """Records acquire/release and lets tests push pointer events."""

    def __init__(self):
        self.acquire_count = 0
        self.release_count = 0
        self._on_move: Optional[Callable[[float], None]] = None
        self._on_release: Optional[Callable[[], None]] = None

    @property
    def is_active(self) -> bool:
        return self._on_move is not None

    def acquire(self, on_move, on_release):
        self.acquire_count += 1
        self._on_move = on_move
        self._on_release = on_release
        return self._release

    def _release(self):
        self.release_count += 1
        self._on_move = None
        self._on_release = None

    def pointer_move(self, x: float):
        if self._on_move is not None:
            self._on_move(x)

    def pointer_up(self):
        if self._on_release is not None:
            self._on_release()
