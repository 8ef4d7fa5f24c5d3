"""Locate and load ANSI art files."""

import logging
from pathlib import Path

from bbs_screen.codec.rasterizer import rasterize_bytes
from bbs_screen.core.constants import ART_HEIGHT, ART_WIDTH
from bbs_screen.core.document import AnsiDocument
from bbs_screen.sauce.reader import split_sauce

logger = logging.getLogger(__name__)

ART_EXTENSIONS = (".ans", ".asc")


def art_candidates(name: str) -> list[str]:
    """Filenames to try for an art name; bare names get the usual extensions."""
    name = name.strip()
    if Path(name).suffix:
        return [name]
    return [name] + [name + ext for ext in ART_EXTENSIONS]


def resolve_art_path(theme_dir: str | Path, name: str) -> Path:
    """
    Find an art file inside a theme directory.

    Raises:
        FileNotFoundError: if none of the candidate names exist
    """
    theme_dir = Path(theme_dir)
    candidates = art_candidates(name)
    for candidate in candidates:
        path = theme_dir / candidate
        if path.is_file():
            logger.debug("Resolved art %r to %s", name, path)
            return path
    raise FileNotFoundError(
        f"ANSI art {name!r} not found in {theme_dir} (tried {', '.join(candidates)})"
    )


def load_art(
    path: str | Path,
    width: int = ART_WIDTH,
    height: int = ART_HEIGHT,
) -> AnsiDocument:
    """
    Load an ANSI art file from disk.

    Strips SAUCE metadata, decodes CP437 and rasterizes into a fixed grid.
    Read errors propagate to the caller unchanged.
    """
    path = Path(path)
    data = path.read_bytes()
    doc = load_art_bytes(data, width, height)
    doc.source_path = path
    return doc


def load_art_bytes(
    data: bytes,
    width: int = ART_WIDTH,
    height: int = ART_HEIGHT,
) -> AnsiDocument:
    """Load ANSI art from raw bytes."""
    body, sauce = split_sauce(data)
    return AnsiDocument(
        grid=rasterize_bytes(body, width, height),
        sauce=sauce,
    )
