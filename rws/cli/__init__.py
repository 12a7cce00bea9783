"""CLI package bootstrap.

Defines root group (`cli`) in helpers and imports submodules so their
decorators register commands.
"""
from rws.cli.helpers import cli  # root group
from rws.cli import core  # noqa: F401
from rws.cli import config_cmds  # noqa: F401
from rws.cli import layout_cmds  # noqa: F401

__all__ = ["cli"]
