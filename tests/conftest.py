"""Pytest configuration and shared builders for art files."""

from pathlib import Path
from typing import Callable

import pytest


def build_sauce(
    title: str = "Test Art",
    author: str = "Tester",
    group: str = "Group",
    date: str = "19960704",
    width: int = 80,
    height: int = 25,
    comments: tuple[str, ...] = (),
) -> bytes:
    """Build an EOF marker, optional COMNT block and SAUCE record."""
    record = bytearray(128)
    record[0:7] = b"SAUCE00"
    record[7:42] = title.encode("ascii").ljust(35, b" ")
    record[42:62] = author.encode("ascii").ljust(20, b" ")
    record[62:82] = group.encode("ascii").ljust(20, b" ")
    record[82:90] = date.encode("ascii")
    record[94] = 1  # CHARACTER
    record[95] = 1  # ANSI
    record[96:98] = width.to_bytes(2, "little")
    record[98:100] = height.to_bytes(2, "little")
    record[104] = len(comments)

    block = b""
    if comments:
        block = b"COMNT" + b"".join(c.encode("ascii").ljust(64, b" ") for c in comments)
    return b"\x1a" + block + bytes(record)


@pytest.fixture
def sauce_builder() -> Callable[..., bytes]:
    """Fixture exposing the SAUCE trailer builder."""
    return build_sauce


@pytest.fixture
def art_bytes() -> bytes:
    """A small two-line CP437 art body: red title over a blue bar."""
    return (
        b"\x1b[2J\x1b[1;31mBBS\x1b[0m \xdb\xdb\r\n"
        b"\x1b[44m    \x1b[0m"
    )


@pytest.fixture
def art_file(tmp_path: Path, art_bytes: bytes) -> Path:
    """Art body plus SAUCE trailer written to disk."""
    path = tmp_path / "menu.ans"
    path.write_bytes(art_bytes + build_sauce(comments=("first comment",)))
    return path
