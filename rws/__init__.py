"""Top-level package for review-workspace (rws).

Version identifier is defined in :mod:`rws.version` so it can be imported
without pulling in the Qt shell.
"""

from .version import __version__  # re-export

__all__ = ["__version__"]
