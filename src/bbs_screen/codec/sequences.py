"""CSI token grammar shared by the rasterizer and the ANSI text helpers.

The two sides read a sequence differently on purpose. The rasterizer
consumes every byte up to the first final byte, so a stray control
character inside a sequence is swallowed along with it. The text helpers
only treat a run as zero-width when it matches CSI_TOKEN exactly, and
anything else after the ESC is counted as visible content.
"""

import re

# ESC [ <parameter bytes 0x30-0x3F>* <intermediate bytes 0x20-0x2F>* <final byte 0x40-0x7E>
CSI_TOKEN = re.compile(r'\x1b\[[0-?]*[ -/]*[@-~]')


def is_final_byte(char: str) -> bool:
    """True for characters that terminate a CSI sequence."""
    return '@' <= char <= '~'


def match_token(s: str, pos: int) -> int | None:
    """Return the end index of a complete CSI token starting at ``pos``.

    Returns None when ``s[pos]`` does not begin a well-formed token, in
    which case the ESC is ordinary content.
    """
    match = CSI_TOKEN.match(s, pos)
    return match.end() if match else None


def parse_params(params: str) -> list[int]:
    """Split a CSI parameter string into integers.

    Empty fields count as 0, a leading '?' is ignored and anything
    non-numeric is dropped.
    """
    if not params:
        return []
    values: list[int] = []
    for part in params.split(';'):
        if part == '':
            values.append(0)
            continue
        part = part.removeprefix('?')
        if part.isascii() and part.isdigit():
            values.append(int(part))
    return values
