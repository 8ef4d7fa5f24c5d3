"""Typer CLI application."""

import json
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

from bbs_screen.cli.core.terminal import Terminal
from bbs_screen.compose.canvas import Canvas
from bbs_screen.core.constants import ART_TOP_ROW, DEFAULT_BORDER
from bbs_screen.core.document import AnsiDocument
from bbs_screen.io.reader import load_art, resolve_art_path


def _open_art(path: Path, theme_dir: Optional[Path], console: Console) -> AnsiDocument:
    """Load art by path, or by name inside a theme directory."""
    try:
        if theme_dir is not None:
            path = resolve_art_path(theme_dir, str(path))
        return load_art(path)
    except OSError as e:
        console.print(f"[red]Cannot load art: {e}[/]")
        raise typer.Exit(1)


def _new_canvas(width: Optional[int], height: Optional[int], console: Console) -> Canvas:
    """Canvas sized from options, falling back to the live terminal."""
    size = Terminal.size()
    try:
        return Canvas(
            width=width if width is not None else size.cols,
            height=height if height is not None else size.rows,
        )
    except ValueError as e:
        console.print(f"[red]{e}[/]")
        raise typer.Exit(1)


def _parse_position(value: str) -> tuple[int, int]:
    try:
        row, col = (int(part) for part in value.split(','))
    except ValueError:
        raise typer.BadParameter("expected ROW,COL") from None
    return row, col


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="bbs-screen",
        help="Render BBS ANSI art and composite styled text over it.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console(stderr=True)

    @app.callback()
    def common(
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug details to stderr")] = False,
    ) -> None:
        """Shared options."""
        if verbose:
            logging.basicConfig(
                level=logging.DEBUG,
                format="%(asctime)s %(name)s %(levelname)s %(message)s",
            )

    @app.command()
    def view(
        path: Annotated[Path, typer.Argument(help="Art file, or art name with --theme-dir")],
        theme_dir: Annotated[Optional[Path], typer.Option("--theme-dir", "-t", help="Directory to look the art up in")] = None,
        width: Annotated[Optional[int], typer.Option("--width", "-W", help="Screen width (default: terminal)")] = None,
        height: Annotated[Optional[int], typer.Option("--height", "-H", help="Screen height (default: terminal)")] = None,
        row: Annotated[int, typer.Option("--row", "-r", help="Screen row of the art's top line")] = ART_TOP_ROW,
        clear: Annotated[bool, typer.Option("--clear", "-c", help="Clear the screen before drawing")] = False,
    ) -> None:
        """Show ANSI art as a background frame."""
        doc = _open_art(path, theme_dir, console)
        canvas = _new_canvas(width, height, console)
        doc.place_on(canvas, row=row)
        if clear:
            Terminal.clear()
        Terminal.write(canvas.render() + "\n")

    @app.command()
    def info(
        path: Annotated[Path, typer.Argument(help="ANSI file to inspect")],
        json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
    ) -> None:
        """Show SAUCE metadata for an ANSI file."""
        doc = _open_art(path, None, console)

        if not doc.sauce:
            console.print(f"[yellow]No SAUCE metadata found in {path}[/]")
            raise typer.Exit(1)

        if json_output:
            print(json.dumps(doc.sauce.to_dict(), indent=2))
            return

        out = Console()
        out.print(f"[bold cyan]SAUCE Metadata for {path.name}[/]")
        out.print(f"  [bold]Title:[/]  {doc.sauce.title or '(none)'}")
        out.print(f"  [bold]Author:[/] {doc.sauce.author or '(none)'}")
        out.print(f"  [bold]Group:[/]  {doc.sauce.group or '(none)'}")
        if doc.sauce.date:
            out.print(f"  [bold]Date:[/]   {doc.sauce.date.strftime('%Y-%m-%d')}")
        out.print(f"  [bold]Size:[/]   {doc.sauce.tinfo1}x{doc.sauce.tinfo2}")
        for comment in doc.sauce.comments:
            out.print(f"    {comment}")

    @app.command()
    def compose(
        path: Annotated[Path, typer.Argument(help="Background art file")],
        text: Annotated[str, typer.Option("--text", "-x", help="Block to overlay; '\\n' separates lines")],
        at: Annotated[Optional[str], typer.Option("--at", help="ROW,COL of the block (default: centered)")] = None,
        border: Annotated[int, typer.Option("--border", "-b", help="Blank margin around the block")] = DEFAULT_BORDER,
        theme_dir: Annotated[Optional[Path], typer.Option("--theme-dir", "-t", help="Directory to look the art up in")] = None,
        width: Annotated[Optional[int], typer.Option("--width", "-W", help="Screen width (default: terminal)")] = None,
        height: Annotated[Optional[int], typer.Option("--height", "-H", help="Screen height (default: terminal)")] = None,
        clear: Annotated[bool, typer.Option("--clear", "-c", help="Clear the screen before drawing")] = False,
    ) -> None:
        """Overlay a text block on an art background."""
        block = text.replace("\\n", "\n")
        doc = _open_art(path, theme_dir, console)
        canvas = _new_canvas(width, height, console)
        doc.place_on(canvas)

        if at is None:
            canvas.place_centered(block, clear_border=border)
        else:
            row, col = _parse_position(at)
            canvas.place_with_border_clear(block, row, col, border=border)

        if clear:
            Terminal.clear()
        Terminal.write(canvas.render() + "\n")

    return app
