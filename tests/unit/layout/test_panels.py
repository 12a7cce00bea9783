"""Unit tests for layout value types."""

import pytest

from rws.layout import Boundary, ClampRange, LayoutConfigError, Panel, PanelState, PanelWidths


@pytest.mark.unit
def test_boundary_panels():
    assert Boundary.LIBRARY_PLAYER.panels == (Panel.LIBRARY, Panel.PLAYER)
    assert Boundary.PLAYER_COMMENTS.panels == (Panel.PLAYER, Panel.COMMENTS)
    assert Boundary.LIBRARY_COMMENTS.panels == (Panel.LIBRARY, Panel.COMMENTS)


@pytest.mark.unit
def test_boundary_from_string():
    assert Boundary("library-comments") is Boundary.LIBRARY_COMMENTS


@pytest.mark.unit
def test_clamp_range():
    limits = ClampRange(20.0, 60.0)
    assert limits.clamp(10) == 20.0
    assert limits.clamp(45) == 45
    assert limits.clamp(75) == 60.0


@pytest.mark.unit
def test_clamp_range_rejects_inverted():
    with pytest.raises(LayoutConfigError):
        ClampRange(70.0, 30.0)


@pytest.mark.unit
def test_clamp_range_rejects_out_of_percent():
    with pytest.raises(LayoutConfigError):
        ClampRange(-5.0, 50.0)


@pytest.mark.unit
def test_clamp_range_from_pair():
    assert ClampRange.from_pair([25, 75]) == ClampRange(25.0, 75.0)
    with pytest.raises(LayoutConfigError):
        ClampRange.from_pair([25])
    with pytest.raises(LayoutConfigError):
        ClampRange.from_pair(None)


@pytest.mark.unit
def test_panel_widths():
    widths = PanelWidths(library=30.0, comments=70.0)
    assert widths.total == 100.0
    assert widths.of(Panel.PLAYER) == 0.0
    assert widths.as_dict() == {"library": 30.0, "player": 0.0, "comments": 70.0}


@pytest.mark.unit
def test_panel_state():
    state = PanelState(True, False, True, 30.0, 0.0, 70.0)
    assert state.visible_panels == (Panel.LIBRARY, Panel.COMMENTS)
    assert state.open_panels_count == 2
    assert state.is_visible(Panel.COMMENTS)
    assert not state.is_visible(Panel.PLAYER)
    assert state.widths == PanelWidths(30.0, 0.0, 70.0)


@pytest.mark.unit
def test_panel_state_is_immutable():
    state = PanelState(True, False, False, 100.0, 0.0, 0.0)
    with pytest.raises(AttributeError):
        state.library_visible = False  # type: ignore[misc]
