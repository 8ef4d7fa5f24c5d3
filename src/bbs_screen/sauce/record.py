"""SAUCE record data structure."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum


class DataType(IntEnum):
    """SAUCE data types."""
    NONE = 0
    CHARACTER = 1
    BITMAP = 2
    VECTOR = 3
    AUDIO = 4
    BINARYTEXT = 5
    XBIN = 6
    ARCHIVE = 7
    EXECUTABLE = 8


@dataclass
class SauceRecord:
    """
    SAUCE (Standard Architecture for Universal Comment Extensions) record.

    SAUCE is a metadata trailer used by the BBS/ANSI art scene. It is not
    part of the picture and must be removed before rasterizing.
    See: https://www.acid.org/info/sauce/sauce.htm
    """
    title: str = ""
    author: str = ""
    group: str = ""
    date: datetime | None = None
    file_size: int = 0
    data_type: DataType = DataType.CHARACTER
    file_type: int = 1
    tinfo1: int = 0  # Width for character data
    tinfo2: int = 0  # Height for character data
    comments: list[str] = field(default_factory=list)

    @property
    def width(self) -> int:
        """Get width (alias for tinfo1)."""
        return self.tinfo1

    @property
    def height(self) -> int:
        """Get height (alias for tinfo2)."""
        return self.tinfo2

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "author": self.author,
            "group": self.group,
            "date": self.date.isoformat() if self.date else None,
            "width": self.tinfo1,
            "height": self.tinfo2,
            "comments": list(self.comments),
        }

    def __str__(self) -> str:
        """Human-readable representation."""
        parts = []
        if self.title:
            parts.append(f"Title: {self.title}")
        if self.author:
            parts.append(f"Author: {self.author}")
        if self.group:
            parts.append(f"Group: {self.group}")
        if self.date:
            parts.append(f"Date: {self.date.strftime('%Y-%m-%d')}")
        if self.tinfo1:
            parts.append(f"Width: {self.tinfo1}")
        if self.tinfo2:
            parts.append(f"Height: {self.tinfo2}")
        return "\n".join(parts) if parts else "(No SAUCE metadata)"
