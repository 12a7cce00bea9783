"""Toolbar with the three panel toggle buttons."""

from __future__ import annotations
from PySide6.QtWidgets import QToolBar, QPushButton, QWidget, QSizePolicy, QLabel
from PySide6.QtCore import Signal


class PanelToolbar(QToolBar):
    """Panel visibility toolbar.

    Provides checkable buttons for:
    - Media library
    - Player
    - Comments

    Button enabled/checked state is owned by UiStateController; the
    toolbar only reports clicks.

    Signals:
        libraryToggled: Library button clicked
        playerToggled: Player button clicked
        commentsToggled: Comments button clicked
    """

    libraryToggled = Signal()
    playerToggled = Signal()
    commentsToggled = Signal()

    def __init__(self, title: str = "Workspace", parent=None):
        """Initialize toolbar.

        Args:
            title: Project title shown on the left
            parent: Parent widget
        """
        super().__init__("Panels", parent)
        self.setMovable(False)

        self.title_label = QLabel(title)
        self.title_label.setStyleSheet("font-weight: bold; padding: 0 8px;")
        self.addWidget(self.title_label)

        spacer = QWidget()
        spacer.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.addWidget(spacer)

        self.btn_library = QPushButton("Media Library")
        self.btn_player = QPushButton("Player")
        self.btn_comments = QPushButton("Comments")
        for btn in (self.btn_library, self.btn_player, self.btn_comments):
            btn.setCheckable(True)
            self.addWidget(btn)

        self.btn_library.clicked.connect(self.libraryToggled.emit)
        self.btn_player.clicked.connect(self.playerToggled.emit)
        self.btn_comments.clicked.connect(self.commentsToggled.emit)

    def set_title(self, title: str):
        self.title_label.setText(title)


__all__ = ["PanelToolbar"]
