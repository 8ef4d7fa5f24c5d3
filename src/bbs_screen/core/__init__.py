"""Core data structures for styled character grids."""

from bbs_screen.core.cell import Cell
from bbs_screen.core.grid import CellGrid
from bbs_screen.core.style import Style

__all__ = ["Cell", "CellGrid", "Style"]
