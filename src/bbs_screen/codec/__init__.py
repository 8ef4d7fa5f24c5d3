"""Decoding and rasterizing of legacy ANSI art."""

from bbs_screen.codec.cp437 import cp437_to_unicode, decode_art
from bbs_screen.codec.rasterizer import rasterize, rasterize_bytes

__all__ = ["cp437_to_unicode", "decode_art", "rasterize", "rasterize_bytes"]
