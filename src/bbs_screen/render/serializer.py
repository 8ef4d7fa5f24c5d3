"""Serialize a rasterized grid back into styled text lines."""

from bbs_screen.core.cell import Cell
from bbs_screen.core.constants import RESET
from bbs_screen.core.grid import CellGrid
from bbs_screen.core.style import Style


class GridSerializer:
    """
    Render a CellGrid to one ANSI string per row.

    Optimizes output by only emitting SGR codes when the style changes.
    Every row is self-contained: it opens with a reset, switches style with
    a reset-plus-attributes token, and closes with a reset so nothing bleeds
    into whatever is drawn after it.
    """

    def render_lines(self, grid: CellGrid) -> list[str]:
        """Render each grid row to a styled line."""
        return [self._render_row(row) for row in grid.rows()]

    def render(self, grid: CellGrid) -> str:
        """Render the whole grid, rows joined by newlines."""
        return '\n'.join(self.render_lines(grid))

    @staticmethod
    def _render_row(row: list[Cell]) -> str:
        parts: list[str] = [RESET]
        last = Style.DEFAULT

        for cell in row:
            if cell.style != last:
                parts.append(cell.style.to_sgr())
                last = cell.style
            parts.append(cell.char)

        parts.append(RESET)
        return ''.join(parts)
