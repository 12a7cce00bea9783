"""Entry point for the GUI application.

Usage:
    python -m rws.gui
"""

import sys

if __name__ == "__main__":
    from rws.gui.app import main

    sys.exit(main())
