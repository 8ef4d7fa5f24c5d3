"""SAUCE trailer detection and removal."""

import logging
from datetime import datetime

from bbs_screen.codec.cp437 import cp437_to_unicode
from bbs_screen.core.constants import EOF_MARKER
from bbs_screen.sauce.record import DataType, SauceRecord

logger = logging.getLogger(__name__)

SAUCE_ID = b"SAUCE"
COMNT_ID = b"COMNT"
SAUCE_RECORD_SIZE = 128
COMMENT_LINE_SIZE = 64


def _field(data: bytes) -> str:
    return cp437_to_unicode(data.rstrip(b'\x00 '))


def parse_sauce_bytes(data: bytes) -> SauceRecord | None:
    """Parse a 128-byte SAUCE record. Returns None if the signature is missing."""
    if len(data) < SAUCE_RECORD_SIZE or data[0:5] != SAUCE_ID:
        return None

    date = None
    date_str = data[82:90].decode('ascii', errors='replace')
    if date_str.isdigit():
        try:
            date = datetime.strptime(date_str, "%Y%m%d")
        except ValueError:
            logger.debug("Ignoring malformed SAUCE date %r", date_str)

    return SauceRecord(
        title=_field(data[7:42]),
        author=_field(data[42:62]),
        group=_field(data[62:82]),
        date=date,
        file_size=int.from_bytes(data[90:94], 'little'),
        data_type=DataType(data[94]) if data[94] < 9 else DataType.NONE,
        file_type=data[95],
        tinfo1=int.from_bytes(data[96:98], 'little'),
        tinfo2=int.from_bytes(data[98:100], 'little'),
    )


def split_sauce(data: bytes) -> tuple[bytes, SauceRecord | None]:
    """
    Separate artwork bytes from SAUCE metadata.

    Removes the SAUCE record, its optional COMNT block and the EOF marker.
    Files without SAUCE are still cut at the first EOF marker.

    Returns:
        Tuple of (art_bytes, SauceRecord or None)
    """
    body = data
    sauce = parse_sauce_bytes(data[-SAUCE_RECORD_SIZE:])

    if sauce is not None:
        body = data[:-SAUCE_RECORD_SIZE]
        num_comments = data[-SAUCE_RECORD_SIZE + 104]
        if num_comments:
            start = len(body) - (len(COMNT_ID) + num_comments * COMMENT_LINE_SIZE)
            if start >= 0 and body[start:start + len(COMNT_ID)] == COMNT_ID:
                block = body[start + len(COMNT_ID):]
                sauce.comments = [
                    _field(block[i:i + COMMENT_LINE_SIZE])
                    for i in range(0, len(block), COMMENT_LINE_SIZE)
                ]
                body = body[:start]
        logger.debug("Stripped SAUCE record (%d comment lines)", len(sauce.comments))

    eof = body.find(bytes([EOF_MARKER]))
    if eof != -1:
        body = body[:eof]

    return body, sauce
