"""Tests for the Canvas compositor."""

import pytest

from bbs_screen.codec.rasterizer import rasterize
from bbs_screen.compose.canvas import Canvas
from bbs_screen.core.cell import Cell
from bbs_screen.core.style import Style
from bbs_screen.text.ansi_text import visible_len


def row_cells(canvas: Canvas, row: int) -> list[Cell]:
    """How a canvas row looks on screen, cell by cell."""
    grid = rasterize(canvas.row(row), canvas.width, 1)
    return [grid.get(x, 0) for x in range(canvas.width)]


def filled(width: int, height: int, char: str = '#', sgr: str = "") -> Canvas:
    canvas = Canvas(width, height)
    canvas.place_block('\n'.join([sgr + char * width] * height), 0, 0)
    return canvas


def assert_full_width(canvas: Canvas) -> None:
    assert all(visible_len(r) == canvas.width for r in canvas.rows)


class TestConstruction:
    """Tests for Canvas construction."""

    def test_blank_rows(self) -> None:
        canvas = Canvas(6, 3)
        assert canvas.plain_rows() == ["      "] * 3

    @pytest.mark.parametrize("width,height", [(0, 10), (10, 0), (-1, 5), (5, -2)])
    def test_rejects_non_positive_size(self, width: int, height: int) -> None:
        with pytest.raises(ValueError):
            Canvas(width, height)


class TestPlaceBlock:
    """Tests for place_block."""

    def test_overlay_in_middle_of_row(self) -> None:
        canvas = Canvas(5, 1)
        canvas.place_block("ab cd", 0, 0)
        canvas.place_block("XY", 0, 2)
        assert canvas.plain_rows()[0] == "abXYd"
        assert all(cell.style == Style.DEFAULT for cell in row_cells(canvas, 0))

    def test_surrounding_styles_are_preserved(self) -> None:
        canvas = filled(10, 1, ' ', "\x1b[44m")
        canvas.place_block("\x1b[31mXY", 0, 3)
        cells = row_cells(canvas, 0)
        assert cells[:3] == [Cell(' ', Style(bg=44))] * 3
        assert cells[3:5] == [Cell('X', Style(fg=31)), Cell('Y', Style(fg=31))]
        assert cells[5:] == [Cell(' ', Style(bg=44))] * 5

    def test_block_style_does_not_leak_right(self) -> None:
        canvas = Canvas(3, 1)
        canvas.place_block("abc", 0, 0)
        canvas.place_block("\x1b[41mZ", 0, 1)
        cells = row_cells(canvas, 0)
        assert cells[1] == Cell('Z', Style(bg=41))
        assert cells[2] == Cell('c')

    def test_full_row_replacement_pads_with_reset(self) -> None:
        canvas = Canvas(6, 1)
        canvas.place_block("\x1b[41mhi", 0, 0)
        assert canvas.plain_rows()[0] == "hi    "
        cells = row_cells(canvas, 0)
        assert cells[2:] == [Cell()] * 4

    def test_negative_column_replaces_row(self) -> None:
        canvas = filled(4, 1)
        canvas.place_block("ab", 0, -3)
        assert canvas.plain_rows()[0] == "ab  "

    def test_long_line_is_clipped(self) -> None:
        canvas = Canvas(5, 2)
        canvas.place_block("abcdefgh", 0, 0)
        canvas.place_block("XYZ", 1, 3)
        assert canvas.plain_rows() == ["abcde", "   XY"]
        assert_full_width(canvas)

    def test_column_past_right_edge_is_skipped(self) -> None:
        canvas = filled(5, 1)
        before = canvas.rows
        canvas.place_block("XY", 0, 5)
        assert canvas.rows == before

    def test_rows_outside_screen_are_skipped(self) -> None:
        canvas = Canvas(3, 2)
        canvas.place_block("a\nb\nc", -1, 0)
        assert canvas.plain_rows() == ["b  ", "c  "]
        canvas.place_block("zzz", 7, 0)
        assert canvas.plain_rows() == ["b  ", "c  "]

    @pytest.mark.parametrize("col", [0, 2])
    def test_empty_block_changes_nothing(self, col: int) -> None:
        canvas = filled(5, 2, '#', "\x1b[42m")
        before = canvas.rows
        canvas.place_block("", 1, col)
        assert canvas.rows == before

    def test_later_overlays_win(self) -> None:
        canvas = filled(6, 1, '.')
        canvas.place_block("AAA", 0, 2)
        canvas.place_block("B", 0, 3)
        assert canvas.plain_rows()[0] == "..ABA."

    def test_width_invariant_after_many_overlays(self) -> None:
        canvas = filled(20, 6, '░', "\x1b[1;34;47m")
        canvas.place_block("\x1b[31mhello\nworld", 1, 3)
        canvas.place_block("\x1b[42m" + "x" * 30, 2, 15)
        canvas.clear_rect(3, 5, 4, 2)
        canvas.place_centered("\x1b[7mmodal\x1b[0m", clear_border=1)
        canvas.place_with_border_clear("tip", 0, 17)
        assert_full_width(canvas)


class TestPlaceArtBlock:
    """Tests for place_art_block."""

    def test_lines_are_truncated_not_padded(self) -> None:
        canvas = filled(8, 2, '.')
        canvas.place_art_block(["0123456789", "ab"], 0, 2, 4)
        assert canvas.plain_rows() == ["..0123..", "..ab...."]

    def test_truncated_art_style_does_not_bleed(self) -> None:
        canvas = filled(6, 1, '.')
        canvas.place_art_block(["\x1b[45mABCDEF"], 0, 1, 2)
        cells = row_cells(canvas, 0)
        assert cells[1:3] == [Cell('A', Style(bg=45)), Cell('B', Style(bg=45))]
        assert cells[3:] == [Cell('.')] * 3


class TestClearRect:
    """Tests for clear_rect."""

    def test_clears_full_row(self) -> None:
        canvas = filled(6, 3, '▓', "\x1b[1;33;41m")
        canvas.clear_rect(1, 0, canvas.width, 1)
        assert row_cells(canvas, 1) == [Cell()] * 6
        assert row_cells(canvas, 0)[0] == Cell('▓', Style(fg=33, bg=41, bold=True))

    def test_clears_span_and_keeps_rest(self) -> None:
        canvas = Canvas(8, 1)
        canvas.place_block("\x1b[44mabcdefgh", 0, 0)
        canvas.clear_rect(0, 2, 3, 1)
        assert canvas.plain_rows()[0] == "ab   fgh"
        cells = row_cells(canvas, 0)
        assert cells[2:5] == [Cell()] * 3
        assert cells[5] == Cell('f', Style(bg=44))

    def test_clipped_to_screen(self) -> None:
        canvas = filled(5, 2)
        canvas.clear_rect(-1, -2, 4, 10)
        assert canvas.plain_rows() == ["  ###", "  ###"]
        assert_full_width(canvas)

    def test_empty_span_is_noop(self) -> None:
        canvas = filled(5, 2)
        before = canvas.rows
        canvas.clear_rect(0, 5, 3, 2)
        canvas.clear_rect(0, 1, 0, 2)
        assert canvas.rows == before


class TestPlaceCentered:
    """Tests for place_centered."""

    def test_centered_position(self) -> None:
        canvas = Canvas(10, 5)
        canvas.place_centered("ab\ncd")
        assert canvas.plain_rows() == [
            " " * 10,
            "    ab    ",
            "    cd    ",
            " " * 10,
            " " * 10,
        ]

    def test_without_border_keeps_background(self) -> None:
        canvas = filled(10, 5)
        canvas.place_centered("ab\ncd")
        assert canvas.plain_rows()[1] == "####ab####"
        assert canvas.plain_rows()[0] == "#" * 10

    def test_border_clears_full_width_and_rows_below(self) -> None:
        canvas = filled(10, 8)
        canvas.place_centered("ab\ncd", clear_border=1)
        rows = canvas.plain_rows()
        # block at rows 3-4; rows 2-5 cleared, plus 3 rows from row 5
        assert rows[0:2] == ["#" * 10] * 2
        assert rows[2] == " " * 10
        assert rows[3] == "    ab    "
        assert rows[4] == "    cd    "
        assert rows[5:8] == [" " * 10] * 3

    def test_true_means_one_row(self) -> None:
        canvas = filled(10, 8)
        canvas.place_centered("ab\ncd", clear_border=True)
        assert canvas.plain_rows()[1] == "#" * 10
        assert canvas.plain_rows()[2] == " " * 10

    def test_oversized_block_clamps_to_origin(self) -> None:
        canvas = Canvas(4, 2)
        canvas.place_centered("abcdef\n1\n2\n3")
        assert canvas.plain_rows() == ["abcd", "1   "]


class TestPlaceWithBorderClear:
    """Tests for place_with_border_clear."""

    def test_border_around_block(self) -> None:
        canvas = filled(10, 5)
        canvas.place_with_border_clear("ab", 2, 4)
        assert canvas.plain_rows() == [
            "#" * 10,
            "###    ###",
            "### ab ###",
            "###    ###",
            "#" * 10,
        ]

    def test_negative_border_is_zero(self) -> None:
        canvas = filled(10, 3)
        canvas.place_with_border_clear("ab", 1, 4, border=-2)
        assert canvas.plain_rows() == ["#" * 10, "####ab####", "#" * 10]


class TestRender:
    """Tests for frame output."""

    def test_rows_joined_and_reset_at_end(self) -> None:
        canvas = filled(4, 3, '#', "\x1b[41m")
        frame = canvas.render()
        assert frame.count('\n') == 2
        assert frame.endswith("\x1b[0m")
        assert str(canvas) == frame
