"""CellGrid - fixed-size 2D grid of cells produced by the rasterizer."""

from dataclasses import dataclass, field
from typing import Iterator

from bbs_screen.core.cell import BLANK, Cell
from bbs_screen.core.style import Style


@dataclass
class CellGrid:
    """
    A fixed ``width x height`` grid of Cells.

    Unlike a terminal, the grid never grows: the rasterizer discards
    anything written below the last row.
    """
    width: int
    height: int
    _buffer: list[list[Cell]] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError(
                f"Grid size must be positive, got {self.width}x{self.height}"
            )
        if not self._buffer:
            self._buffer = [[BLANK] * self.width for _ in range(self.height)]

    def _check(self, x: int, y: int) -> None:
        if not 0 <= x < self.width:
            raise IndexError(f"x={x} out of bounds (width={self.width})")
        if not 0 <= y < self.height:
            raise IndexError(f"y={y} out of bounds (height={self.height})")

    def get(self, x: int, y: int) -> Cell:
        """Get the cell at position (x, y)."""
        self._check(x, y)
        return self._buffer[y][x]

    def set(self, x: int, y: int, cell: Cell) -> None:
        """Set the cell at position (x, y)."""
        self._check(x, y)
        self._buffer[y][x] = cell

    def __getitem__(self, pos: tuple[int, int]) -> Cell:
        """Get cell using indexing: grid[x, y]."""
        x, y = pos
        return self.get(x, y)

    def __setitem__(self, pos: tuple[int, int], cell: Cell) -> None:
        """Set cell using indexing: grid[x, y] = cell."""
        x, y = pos
        self.set(x, y, cell)

    def fill(self, style: Style) -> None:
        """Blank every cell to a space carrying ``style``."""
        cell = Cell(' ', style)
        for row in self._buffer:
            row[:] = [cell] * self.width

    def clear_to_eol(self, x: int, y: int, style: Style) -> None:
        """Blank row ``y`` from column ``x`` to the right edge."""
        if not 0 <= y < self.height:
            return
        cell = Cell(' ', style)
        for col in range(max(x, 0), self.width):
            self._buffer[y][col] = cell

    def rows(self) -> Iterator[list[Cell]]:
        """Iterate over rows."""
        yield from self._buffer

    def cells(self) -> Iterator[tuple[int, int, Cell]]:
        """Iterate over all cells as (x, y, cell) tuples."""
        for y, row in enumerate(self._buffer):
            for x, cell in enumerate(row):
                yield x, y, cell

    def text_rows(self) -> list[str]:
        """Plain characters of each row, styles dropped."""
        return [''.join(cell.char for cell in row) for row in self._buffer]

