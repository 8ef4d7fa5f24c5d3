"""
bbs-screen: layered ANSI screens with BBS art backgrounds

Decode legacy CP437 art into a styled grid and composite styled text
blocks over it without colors bleeding between regions.

Quick Start:
    >>> import bbs_screen as bbs
    >>> art = bbs.load_art("theme/config.ans")
    >>> canvas = bbs.Canvas(width=100, height=30)
    >>> art.place_on(canvas)
    >>> canvas.place_centered("\\x1b[1;37;44m Main Menu \\x1b[0m", clear_border=1)
    >>> print(canvas.render())

Features:
    - CP437 decoding with newline normalization
    - Rasterizer for SGR colors, cursor position, erase display/line
    - Minimal-SGR serialization of rasterized grids
    - ANSI-aware width, truncation and column splitting
    - Canvas compositing with rectangular clears and centered placement
    - SAUCE metadata stripping
"""

__version__ = "0.1.0"

# Core types
from bbs_screen.core.cell import Cell
from bbs_screen.core.grid import CellGrid
from bbs_screen.core.style import Style
from bbs_screen.core.document import AnsiDocument

# Pipeline
from bbs_screen.codec.cp437 import decode_art
from bbs_screen.codec.rasterizer import rasterize, rasterize_bytes
from bbs_screen.render.serializer import GridSerializer
from bbs_screen.text.ansi_text import split_columns, visible_len
from bbs_screen.compose.canvas import Canvas

# SAUCE metadata
from bbs_screen.sauce.record import SauceRecord

# Convenience functions
from bbs_screen.io.reader import load_art, load_art_bytes, resolve_art_path

__all__ = [
    # Version
    "__version__",
    # Core types
    "Cell",
    "CellGrid",
    "Style",
    "AnsiDocument",
    # Pipeline
    "decode_art",
    "rasterize",
    "rasterize_bytes",
    "GridSerializer",
    "split_columns",
    "visible_len",
    "Canvas",
    # SAUCE
    "SauceRecord",
    # I/O
    "load_art",
    "load_art_bytes",
    "resolve_art_path",
]
