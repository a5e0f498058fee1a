"""WCLI: an interactive shell for a remote host over SSH."""

from wcli.wcli_core import __version__

__all__ = ["__version__"]
