"""
Info command - display YM5 header and song information.
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from ym5view.formats.ym5.container import YM5File
from ym5view.formats.ym5.reader import YM5Reader
from ym5view.utils.validation import YM5Error
from cli.display.tables import display_ym5_info, display_frame_detail

console = Console()
app = typer.Typer()
logger = logging.getLogger(__name__)


def load_file(file: Path) -> YM5File:
    """
    Read and parse a YM5 file for a command, exiting with status 1 on failure.
    """
    if not file.exists():
        console.print(f"[red]Error: File not found: {file}[/red]")
        raise typer.Exit(1)

    try:
        return YM5Reader.read(file)
    except YM5Error as e:
        logger.debug("Failed to parse %s", file, exc_info=True)
        console.print(f"[red]Error: {file}: {e}[/red]")
        if YM5Reader.get_file_info(file).get("compressed"):
            console.print(
                "[yellow]This looks like an LHA compressed YM file. "
                "Extract the inner file first.[/yellow]"
            )
        raise typer.Exit(1)


@app.command()
def info(
    file: Path = typer.Argument(..., help="YM5 file to inspect"),
    frame: Optional[int] = typer.Option(
        None, "--frame", "-f", help="Also decode this frame in detail"
    ),
) -> None:
    """
    Display YM5 header fields, song metadata and layout.

    Examples:

        ym5view info song.ym

        ym5view info song.ym --frame 100
    """
    ym = load_file(file)

    display_ym5_info(ym, str(file))

    if frame is not None:
        console.print()
        try:
            display_frame_detail(ym.frame(frame))
        except YM5Error as e:
            console.print(f"[red]Error: {e}[/red]")
            raise typer.Exit(1)


if __name__ == "__main__":
    app()
