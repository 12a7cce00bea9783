"""Headless layout preview.

Runs panel toggles and boundary drags through the real layout controller
and resize handler, then prints the resulting widths and lock flags.
Useful for checking clamp ranges and default widths before opening the GUI.
"""

from __future__ import annotations
from typing import List, Tuple
import click
import json as _json
import logging

from ..config_types import AppConfig
from ..layout import (
    Boundary,
    ContainerRect,
    LayoutConfigError,
    ManualFrameScheduler,
    PanelLayoutController,
    ResizeBounds,
    ResizeHandler,
)
from .helpers import cli

logger = logging.getLogger(__name__)

# Drags are expressed as a percentage of this container width
_PREVIEW_RECT = ContainerRect(left=0.0, width=100.0)


def parse_drag(value: str) -> Tuple[Boundary, float]:
    """Parse ``BOUNDARY:PERCENT`` (e.g. ``library-player:45``)."""
    name, sep, pct = value.partition(":")
    if not sep:
        raise click.BadParameter(f"Expected BOUNDARY:PERCENT, got '{value}'", param_hint="--drag")
    try:
        boundary = Boundary(name.strip().lower())
    except ValueError:
        choices = ", ".join(b.value for b in Boundary)
        raise click.BadParameter(f"Unknown boundary '{name}'. Choose from: {choices}", param_hint="--drag")
    try:
        return boundary, float(pct)
    except ValueError:
        raise click.BadParameter(f"Invalid percent '{pct}'", param_hint="--drag")


def run_preview(
    config: AppConfig,
    player: bool,
    comments: bool,
    hide_library: bool,
    mobile: bool,
    drags: List[Tuple[Boundary, float]],
    can_comment: bool = True,
) -> Tuple[PanelLayoutController, List[str]]:
    """Apply toggles then drags; returns the controller and rejection notes."""
    controller = PanelLayoutController.from_config(config.layout)
    scheduler = ManualFrameScheduler()
    handler = ResizeHandler(controller, scheduler, ResizeBounds.from_config(config.resize))
    notes: List[str] = []

    if player and not controller.toggle_player():
        notes.append("player toggle rejected")
    if comments and not controller.toggle_comments(can_comment):
        notes.append("comments toggle rejected")
    if hide_library and not controller.toggle_library():
        notes.append("library can only be hidden while all three panels are open")

    for boundary, pct in drags:
        if handler.begin(boundary, _PREVIEW_RECT) is None:
            notes.append(f"drag on {boundary.value} rejected: no handle in this layout")
            continue
        handler.move(_PREVIEW_RECT.left + _PREVIEW_RECT.width * pct / 100.0)
        scheduler.run_pending()
        handler.end()

    if mobile:
        controller.set_mobile(True)

    return controller, notes


@cli.command(name="layout")
@click.option("--player/--no-player", default=False, help="Open the player panel.")
@click.option("--comments/--no-comments", default=False, help="Open the comments panel.")
@click.option("--hide-library", is_flag=True, help="Hide the media library (needs all three panels open).")
@click.option("--mobile", is_flag=True, help="Render the single-panel mobile layout.")
@click.option("--no-comment-permission", is_flag=True, help="Simulate a viewer who may not comment.")
@click.option("--drag", "drags", multiple=True, metavar="BOUNDARY:PERCENT",
              help="Drag a boundary to PERCENT of the container width (repeatable).")
@click.option("--json", "as_json", is_flag=True, help="Print machine-readable JSON.")
@click.pass_context
def layout(ctx: click.Context, player: bool, comments: bool, hide_library: bool, mobile: bool,
           no_comment_permission: bool, drags: Tuple[str, ...], as_json: bool):
    """Preview panel widths for a sequence of toggles and drags."""
    parsed = [parse_drag(d) for d in drags]
    try:
        config = AppConfig.from_dict(ctx.obj)
        controller, notes = run_preview(
            config, player, comments, hide_library, mobile, parsed, can_comment=not no_comment_permission
        )
    except LayoutConfigError as e:
        raise click.UsageError(f"Invalid layout configuration: {e}")

    snapshot = controller.snapshot()
    if as_json:
        snapshot["notes"] = notes
        click.echo(_json.dumps(snapshot, indent=2))
        return

    for note in notes:
        click.echo(click.style(f"! {note}", fg="yellow"))
    widths = snapshot["widths"]
    for name in ("library", "player", "comments"):
        marker = "●" if name in snapshot["visible"] else "○"
        click.echo(f"{marker} {name:<9} {widths[name]:6.2f}%")
    flags = []
    if snapshot["mobile"]:
        flags.append("mobile")
    if snapshot["player_locked"]:
        flags.append("player locked")
    if snapshot["comments_locked"]:
        flags.append("comments locked")
    if flags:
        click.echo(f"  ({', '.join(flags)})")
    if snapshot["boundaries"]:
        click.echo(f"  handles: {', '.join(snapshot['boundaries'])}")


__all__ = ["layout", "parse_drag", "run_preview"]
