"""Renderers for turning grids back into terminal text."""

from bbs_screen.render.serializer import GridSerializer

__all__ = ["GridSerializer"]
