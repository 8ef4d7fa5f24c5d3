"""Helpers for measuring and cutting styled text."""

from bbs_screen.text.ansi_text import (
    active_sgr,
    pad_to_width,
    split_columns,
    strip_ansi,
    truncate,
    visible_len,
)

__all__ = [
    "active_sgr",
    "pad_to_width",
    "split_columns",
    "strip_ansi",
    "truncate",
    "visible_len",
]
