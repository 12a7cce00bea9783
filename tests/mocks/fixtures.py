from __future__ import annotations
import pytest

from rws.layout import ContainerRect, ManualFrameScheduler, PanelLayoutController, ResizeHandler
from .pointer_capture import FakePointerCapture


@pytest.fixture
def controller():
    return PanelLayoutController()


@pytest.fixture
def all_panels(controller):
    """Controller with library, player and comments open (30/45/25)."""
    controller.toggle_player()
    controller.toggle_comments()
    return controller


@pytest.fixture
def scheduler():
    return ManualFrameScheduler()


@pytest.fixture
def capture():
    return FakePointerCapture()


@pytest.fixture
def resize_handler(controller, scheduler, capture):
    return ResizeHandler(controller, scheduler, capture=capture)


@pytest.fixture
def rect():
    """1000px container starting at x=100, so x = 100 + 10 * percent."""
    return ContainerRect(left=100.0, width=1000.0)
