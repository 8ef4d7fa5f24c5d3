"""ANSI escape sequence rasterizer for fixed-size art grids.

Interprets the subset of ANSI that BBS art relies on (SGR colors, cursor
position, erase display, erase line) and writes the result into a
``CellGrid``. Everything else is consumed and ignored so that a corrupt
or exotic file degrades to missing styling instead of a broken render.
"""

import logging
from enum import Enum, auto
from functools import reduce
from typing import NamedTuple

from bbs_screen.codec.cp437 import decode_art
from bbs_screen.codec.sequences import is_final_byte, parse_params
from bbs_screen.core.cell import Cell
from bbs_screen.core.constants import ART_HEIGHT, ART_WIDTH, ESC
from bbs_screen.core.grid import CellGrid
from bbs_screen.core.style import Style

logger = logging.getLogger(__name__)


class Mode(Enum):
    """Parser state between characters."""
    NORMAL = auto()
    ESCAPE_SEEN = auto()
    COLLECTING_PARAMETERS = auto()


class TerminalState(NamedTuple):
    """Virtual terminal registers carried from one character to the next."""
    mode: Mode = Mode.NORMAL
    x: int = 0
    y: int = 0
    style: Style = Style.DEFAULT
    params: str = ''


def rasterize(text: str, width: int = ART_WIDTH, height: int = ART_HEIGHT) -> CellGrid:
    """
    Rasterize decoded art text into a ``width x height`` grid.

    Args:
        text: Unicode text with embedded escape sequences
        width: Grid columns
        height: Grid rows

    Returns:
        A new CellGrid; characters past the bottom edge are dropped.
    """
    grid = CellGrid(width, height)
    state = reduce(lambda st, ch: step(st, ch, grid), text, TerminalState())
    if state.mode is not Mode.NORMAL:
        logger.debug("Dropping unterminated escape sequence at end of input")
    return grid


def rasterize_bytes(
    data: bytes,
    width: int = ART_WIDTH,
    height: int = ART_HEIGHT,
) -> CellGrid:
    """Decode CP437 bytes and rasterize them."""
    return rasterize(decode_art(data), width, height)


def step(state: TerminalState, char: str, grid: CellGrid) -> TerminalState:
    """Advance the terminal by one character, writing into ``grid``."""
    if state.mode is Mode.ESCAPE_SEEN:
        if char == '[':
            return state._replace(mode=Mode.COLLECTING_PARAMETERS, params='')
        # Not a CSI: drop the ESC, treat this character as ordinary input
        return step(state._replace(mode=Mode.NORMAL), char, grid)

    if state.mode is Mode.COLLECTING_PARAMETERS:
        if is_final_byte(char):
            return _dispatch(
                state._replace(mode=Mode.NORMAL, params=''),
                char,
                parse_params(state.params),
                grid,
            )
        return state._replace(params=state.params + char)

    if char == ESC:
        return state._replace(mode=Mode.ESCAPE_SEEN)
    if char == '\n':
        return state._replace(x=0, y=state.y + 1)
    if char == '\r':
        return state._replace(x=0)
    return _put_char(state, char, grid)


def _put_char(state: TerminalState, char: str, grid: CellGrid) -> TerminalState:
    x, y = state.x, state.y
    if x >= grid.width:
        x, y = 0, y + 1
    if y >= grid.height:
        return state._replace(x=x, y=y)
    grid.set(x, y, Cell(char, state.style))
    return state._replace(x=x + 1, y=y)


def _dispatch(
    state: TerminalState,
    command: str,
    params: list[int],
    grid: CellGrid,
) -> TerminalState:
    """Apply a complete CSI sequence."""
    if command == 'm':
        return state._replace(style=state.style.apply_sgr(params))

    if command in ('H', 'f'):
        # Cursor position, 1-based
        row = params[0] if params else 1
        col = params[1] if len(params) > 1 else 1
        return state._replace(x=max(col - 1, 0), y=max(row - 1, 0))

    if command == 'J':
        mode = params[0] if params else 0
        if mode == 2:
            grid.fill(state.style)
            return state._replace(x=0, y=0)
        logger.debug("Ignoring erase-display mode %d", mode)
        return state

    if command == 'K':
        grid.clear_to_eol(state.x, state.y, state.style)
        return state

    logger.debug("Ignoring CSI sequence with final byte %r", command)
    return state
