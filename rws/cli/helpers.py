from __future__ import annotations
import click

from ..config import load_typed_config
from ..layout import LayoutConfigError
from ..version import __version__


@click.group()
@click.version_option(version=__version__, prog_name="review-workspace")
@click.option('--log-level', type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              default=None, help='Override the configured log level')
@click.pass_context
def cli(ctx: click.Context, log_level: str | None):
    """Review workspace layout tools.

    \b
    TYPICAL WORKFLOWS:

    \b
    Inspect settings:
      rws config                    # Effective configuration as JSON
      rws config -s resize          # One section only

    \b
    Preview a layout without opening a window:
      rws layout --player --comments
      rws layout --player --drag library-player:45
      rws layout --player --comments --hide-library --json

    \b
    Desktop:
      rws gui
    """
    if isinstance(ctx.obj, dict):
        return
    overrides = {'log_level': log_level.upper()} if log_level else None
    try:
        ctx.obj = load_typed_config(overrides).to_dict()
    except LayoutConfigError as e:
        raise click.UsageError(f"Invalid layout configuration: {e}")


__all__ = ["cli"]
