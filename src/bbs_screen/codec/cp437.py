"""CP437 (IBM PC) character set decoding."""

from bbs_screen.core.constants import CP437_TO_UNICODE


def cp437_to_unicode(data: bytes) -> str:
    """Convert CP437-encoded bytes to a Unicode string.

    Every byte maps to exactly one code point, so this never fails.
    """
    return ''.join(CP437_TO_UNICODE[b] for b in data)


def normalize_newlines(text: str) -> str:
    """Fold CR+LF and bare CR line endings into LF."""
    return text.replace('\r\n', '\n').replace('\r', '\n')


def decode_art(data: bytes) -> str:
    """Decode an art byte stream into text ready for rasterizing."""
    return normalize_newlines(cp437_to_unicode(data))
