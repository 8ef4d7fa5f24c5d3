"""ANSI text utilities - measuring, splitting and truncating styled strings.

A styled line interleaves ordinary characters with CSI tokens. Tokens are
zero-width and indivisible; every other code point is one column. An ESC
that does not start a complete token is ordinary content and counts as
one column, so nothing legitimate is ever swallowed.
"""

from typing import Iterator

from bbs_screen.codec.sequences import CSI_TOKEN, match_token, parse_params
from bbs_screen.core.constants import ESC, RESET


def iter_pieces(s: str) -> Iterator[tuple[str, bool]]:
    """Yield ``(piece, is_token)`` pairs: whole tokens or single characters."""
    i = 0
    n = len(s)
    while i < n:
        if s[i] == ESC:
            end = match_token(s, i)
            if end is not None:
                yield s[i:end], True
                i = end
                continue
        yield s[i], False
        i += 1


def visible_len(s: str) -> int:
    """Get visible length of string (excluding ANSI escape codes)."""
    return len(CSI_TOKEN.sub('', s))


def strip_ansi(s: str) -> str:
    """Remove every complete CSI token."""
    return CSI_TOKEN.sub('', s)


def split_columns(s: str, start: int, end: int) -> tuple[str, str, str]:
    """
    Split a styled line into ``[0, start)``, ``[start, end)`` and ``[end, ...)``.

    Columns are counted in visible characters. A token goes to the segment
    the running column has already reached, so a token sitting exactly on a
    boundary travels with the characters after it. Joining the three parts
    gives back ``s`` unchanged.

    Args:
        s: Styled line
        start: First column of the middle segment (clamped to >= 0)
        end: First column of the right segment (clamped to >= start)
    """
    start = max(start, 0)
    end = max(end, start)

    left: list[str] = []
    mid: list[str] = []
    right: list[str] = []
    col = 0

    for piece, is_token in iter_pieces(s):
        if col < start:
            left.append(piece)
        elif col < end:
            mid.append(piece)
        else:
            right.append(piece)
        if not is_token:
            col += 1

    return ''.join(left), ''.join(mid), ''.join(right)


def truncate(s: str, max_width: int, reset: bool = True) -> str:
    """
    Truncate an ANSI-escaped string to max visible width.

    Preserves ANSI codes but counts only visible characters. Never pads.

    Args:
        s: String to truncate
        max_width: Maximum visible width
        reset: If True, append reset sequence to prevent color bleed
    """
    if max_width <= 0:
        return ""

    result: list[str] = []
    vis_len = 0
    was_truncated = False

    for piece, is_token in iter_pieces(s):
        if vis_len >= max_width:
            was_truncated = True
            break
        result.append(piece)
        if not is_token:
            vis_len += 1

    output = ''.join(result)

    # Append reset if truncated to prevent color bleed
    if reset and was_truncated:
        output += RESET

    return output


def pad_to_width(s: str, width: int, char: str = ' ') -> str:
    """Pad string with char to reach exactly width visible characters."""
    current = visible_len(s)
    if current >= width:
        return s
    return s + char * (width - current)


def active_sgr(s: str) -> str:
    """
    Return the SGR tokens still in effect at the end of ``s``.

    Tokens before the most recent reset are dropped. The result, emitted
    after a reset, reproduces the style a terminal would be in after
    printing ``s`` from the default state.
    """
    tokens: list[str] = []
    for piece, is_token in iter_pieces(s):
        if not is_token or not piece.endswith('m'):
            continue
        params = parse_params(piece[2:-1])
        if not params or all(p == 0 for p in params):
            tokens = []
        elif 0 in params:
            tokens = [piece]
        else:
            tokens.append(piece)
    return ''.join(tokens)
