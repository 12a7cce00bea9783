"""Pytest fixtures for test configuration.

Global test safety measures:
 - Force the offscreen Qt platform so GUI tests run without a display
 - Keep .env files out of config loading unless a test opts in
"""
import os

import pytest

os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')

from tests.mocks.fixtures import *  # noqa: F401,F403,E402


def pytest_sessionstart(session):  # type: ignore[no-untyped-def]
    os.environ.pop('RWS_ENABLE_DOTENV', None)


@pytest.fixture
def test_config():
    """Provide a minimal test configuration as a dict.

    Tests should pass this to AppConfig.from_dict() or to the CLI as
    ``obj=`` rather than setting environment variables.
    """
    return {
        'log_level': 'DEBUG',
        'layout': {
            'library_width': 30.0,
            'player_width': 45.0,
            'comments_width': 25.0,
            'mobile_breakpoint_px': 768,
        },
        'resize': {
            'library_player': [20.0, 60.0],
            'player_comments': [30.0, 70.0],
            'library_comments': [20.0, 80.0],
            'frame_interval_ms': 16,
        },
        'window': {'organization': 'TestOrg', 'application': 'TestApp'},
    }
