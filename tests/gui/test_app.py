"""Tests for the GUI bootstrap."""

from PySide6.QtWidgets import QMessageBox

from rws.gui import app as gui_app


def test_startup_error_shows_dialog(qapp, monkeypatch):
    shown = []
    monkeypatch.setattr(QMessageBox, "critical", lambda *args: shown.append(args))
    monkeypatch.setenv("RWS__LAYOUT__LIBRARY_WIDTH", "50")

    assert gui_app.main() == 1
    assert len(shown) == 1
    assert "must sum to 100" in shown[0][2]

