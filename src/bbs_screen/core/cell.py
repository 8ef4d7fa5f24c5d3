"""Cell - atomic unit of a rasterized grid."""

from dataclasses import dataclass

from bbs_screen.core.style import Style


@dataclass(frozen=True, slots=True)
class Cell:
    """
    A single character cell with its style.

    Cells are immutable; writing to a grid replaces the cell object.
    """
    char: str = ' '
    style: Style = Style.DEFAULT

    def is_blank(self) -> bool:
        """Check if this cell is an unstyled space."""
        return self.char == ' ' and self.style.is_default


BLANK = Cell()
