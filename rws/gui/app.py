"""Qt application bootstrap.

Sets up QApplication, loads configuration and launches the main window.
Logging is configured from ``log_level`` when the configuration loads.
"""

import sys
import logging
from PySide6.QtWidgets import QApplication, QMessageBox

from rws.config import load_typed_config
from .main_window import MainWindow

logger = logging.getLogger(__name__)


def main(title: str = "Review Workspace") -> int:
    """Main entry point for GUI application.

    Args:
        title: Project title shown in the workspace toolbar

    Returns:
        Exit code
    """
    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName("Review Workspace")
    app.setOrganizationName("rws")
    app.setStyle("Fusion")

    try:
        config = load_typed_config()
        logger.info("Starting Review Workspace GUI...")

        window = MainWindow(config, title=title)
        window.show()

        logger.info("GUI ready")
        return app.exec()

    except Exception as e:
        logger.exception("Failed to start GUI")
        QMessageBox.critical(
            None,
            "Startup Error",
            f"Failed to start application:\n\n{str(e)}\n\n"
            f"Check the RWS__ settings in your environment or .env file.",
        )
        return 1


if __name__ == "__main__":
    sys.exit(main())
