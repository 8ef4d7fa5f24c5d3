"""File I/O for ANSI art."""

from bbs_screen.io.reader import load_art, load_art_bytes, resolve_art_path

__all__ = ["load_art", "load_art_bytes", "resolve_art_path"]
