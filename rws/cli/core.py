"""Core CLI module - GUI launcher.

Command modules are organized by functionality:
- config_cmds: Configuration display
- layout_cmds: Headless layout preview
"""

from __future__ import annotations
import click
import logging

from .helpers import cli

logger = logging.getLogger(__name__)


@cli.command()
@click.option("--title", default="Review Workspace", help="Project title shown in the toolbar.")
def gui(title: str):
    """Launch the desktop workspace.

    Opens the three-panel review workspace (media library, player,
    comments) with toggles and drag-resizable boundaries.

    \b
    Example:
        rws gui --title "Spring Campaign"
    """
    import sys

    try:
        from rws.gui.app import main as gui_main
    except ImportError as e:
        if "PySide6" in str(e):
            click.echo(click.style("Error: PySide6 not installed", fg="red", bold=True))
            click.echo("The GUI requires PySide6. Install it with:")
            click.echo(click.style("  pip install PySide6>=6.6.0", fg="cyan"))
            sys.exit(1)
        raise

    sys.exit(gui_main(title=title))
