"""ArtDocument - a rasterized art file ready to be placed on screen."""

from dataclasses import dataclass
from functools import cached_property
from pathlib import Path
from typing import TYPE_CHECKING

from bbs_screen.core.constants import ART_TOP_ROW
from bbs_screen.core.grid import CellGrid

if TYPE_CHECKING:
    from bbs_screen.compose.canvas import Canvas
    from bbs_screen.sauce.record import SauceRecord


@dataclass
class AnsiDocument:
    """
    A decoded and rasterized piece of ANSI art with its metadata.

    The grid is treated as read-only once loaded. Its serialized lines are
    computed on first use and then reused by every frame that shows the art.
    """
    grid: CellGrid
    sauce: "SauceRecord | None" = None
    source_path: Path | None = None

    @classmethod
    def load(cls, path: str | Path) -> "AnsiDocument":
        """Load an ANSI file from disk."""
        from bbs_screen.io.reader import load_art
        return load_art(path)

    @cached_property
    def lines(self) -> list[str]:
        """Styled lines, one per grid row, each closed with a reset."""
        from bbs_screen.render.serializer import GridSerializer
        return GridSerializer().render_lines(self.grid)

    def render(self) -> str:
        """Render to a terminal-compatible ANSI string."""
        return '\n'.join(self.lines)

    def place_on(self, canvas: "Canvas", row: int = ART_TOP_ROW) -> None:
        """Overlay the art on a canvas, centered horizontally when it fits."""
        col = 0
        if canvas.width > self.width:
            col = (canvas.width - self.width) // 2
        canvas.place_art_block(self.lines, row, col, self.width)

    @property
    def title(self) -> str:
        """Get title from SAUCE or filename."""
        if self.sauce and self.sauce.title:
            return self.sauce.title
        if self.source_path:
            return self.source_path.stem
        return "Untitled"

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height
