"""Terminal I/O used by the command line."""

from bbs_screen.cli.core.terminal import Terminal, TerminalSize

__all__ = ["Terminal", "TerminalSize"]
