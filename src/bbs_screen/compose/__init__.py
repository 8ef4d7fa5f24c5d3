"""Screen composition."""

from bbs_screen.compose.canvas import Canvas

__all__ = ["Canvas"]
