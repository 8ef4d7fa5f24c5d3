"""SAUCE metadata handling."""

from bbs_screen.sauce.record import SauceRecord
from bbs_screen.sauce.reader import parse_sauce_bytes, split_sauce

__all__ = ["SauceRecord", "parse_sauce_bytes", "split_sauce"]
