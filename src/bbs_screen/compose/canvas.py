"""Canvas - a screen buffer of styled lines that blocks are composited onto."""

from dataclasses import dataclass, field

from bbs_screen.core.constants import CENTER_BLEED_ROWS, DEFAULT_BORDER, RESET
from bbs_screen.text.ansi_text import (
    active_sgr,
    pad_to_width,
    split_columns,
    strip_ansi,
    truncate,
    visible_len,
)


def _block_size(lines: list[str]) -> tuple[int, int]:
    """Return (height, widest visible line) of a block."""
    return len(lines), max((visible_len(line) for line in lines), default=0)


@dataclass
class Canvas:
    """
    One frame's worth of screen, held as ``height`` styled strings.

    Every row always measures exactly ``width`` visible columns. Overlays
    are applied in call order and later ones win wherever they overlap.
    Geometry outside the screen is clipped or skipped, never an error.
    """
    width: int
    height: int
    _rows: list[str] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError(
                f"Screen size must be positive, got {self.width}x{self.height}"
            )
        self._rows = [' ' * self.width for _ in range(self.height)]

    @property
    def rows(self) -> tuple[str, ...]:
        return tuple(self._rows)

    def row(self, index: int) -> str:
        """Get the styled string for one screen row."""
        return self._rows[index]

    def plain_rows(self) -> list[str]:
        """Rows with all styling stripped."""
        return [strip_ansi(r) for r in self._rows]

    # ------------------------------------------------------------------
    # Primitives
    # ------------------------------------------------------------------

    def _splice(self, row: int, col: int, content: str, content_width: int) -> None:
        """Replace columns ``[col, col + content_width)`` of a row.

        The content starts from the default style, and the untouched
        right-hand side gets back the style it had before.
        """
        left, mid, right = split_columns(self._rows[row], col, col + content_width)
        tail = RESET
        if right:
            tail += active_sgr(left + mid)
        self._rows[row] = left + RESET + content + tail + right

    def place_block(self, text: str, row: int, col: int) -> None:
        """
        Overlay a multi-line styled block with its top-left at (row, col).

        With ``col <= 0`` each covered row is replaced outright and filled
        to the screen edge. Otherwise only the block's own columns are
        replaced and the rest of the row is kept as it was.
        """
        if not text:
            return

        for i, line in enumerate(text.split('\n')):
            r = row + i
            if r < 0 or r >= self.height:
                continue

            if col <= 0:
                self._rows[r] = pad_to_width(truncate(line, self.width) + RESET, self.width)
                continue

            line = truncate(line, self.width - col, reset=False)
            line_width = visible_len(line)
            if line_width == 0:
                continue
            self._splice(r, col, line, line_width)

    def place_art_block(self, lines: list[str], row: int, col: int, max_width: int) -> None:
        """Overlay pre-rendered art lines, each cut to at most ``max_width`` columns."""
        fixed = [
            truncate(line, max_width) if visible_len(line) > max_width else line
            for line in lines
        ]
        self.place_block('\n'.join(fixed), row, col)

    def clear_rect(self, row: int, col: int, width: int, height: int) -> None:
        """Blank a rectangle to default-styled spaces, clipped to the screen."""
        start = max(col, 0)
        stop = min(col + width, self.width)
        if stop <= start:
            return

        for r in range(max(row, 0), min(row + height, self.height)):
            self._splice(r, start, ' ' * (stop - start), stop - start)

    # ------------------------------------------------------------------
    # Placement helpers
    # ------------------------------------------------------------------

    def place_centered(self, text: str, clear_border: int = 0) -> None:
        """
        Overlay a block in the middle of the screen.

        Args:
            text: Styled block, lines separated by newlines
            clear_border: When positive, first blank the full-width rows
                covering the block plus this many rows above and below,
                and a few extra rows underneath to absorb bleed from
                taller decorations. ``True`` counts as 1.
        """
        if not text:
            return

        lines = text.split('\n')
        block_height, block_width = _block_size(lines)
        start_row = max((self.height - block_height) // 2, 0)
        start_col = max((self.width - block_width) // 2, 0)

        border = int(clear_border)
        if border > 0:
            self.clear_rect(start_row - border, 0, self.width, block_height + 2 * border)
            self.clear_rect(start_row + block_height, 0, self.width, CENTER_BLEED_ROWS)

        self.place_block(text, start_row, start_col)

    def place_with_border_clear(
        self,
        text: str,
        row: int,
        col: int,
        border: int = DEFAULT_BORDER,
    ) -> None:
        """Blank a ``border``-cell margin around the block, then overlay it."""
        if not text:
            return

        border = max(border, 0)
        block_height, block_width = _block_size(text.split('\n'))
        self.clear_rect(
            row - border,
            col - border,
            block_width + 2 * border,
            block_height + 2 * border,
        )
        self.place_block(text, row, col)

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def render(self) -> str:
        """Join rows into the final frame, ending in the default style."""
        return '\n'.join(self._rows) + RESET

    def __str__(self) -> str:
        return self.render()
