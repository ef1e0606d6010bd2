"""
Frames command - decoded register frames, one row per VBL.
"""

from pathlib import Path

import typer
from rich.console import Console

from cli.commands.info import load_file
from cli.display.tables import display_frames_table
from cli.display.hex_view import display_frames_hex

console = Console()
app = typer.Typer()


@app.command()
def frames(
    file: Path = typer.Argument(..., help="YM5 file to decode"),
    start: int = typer.Option(0, "--start", "-s", help="First frame to show"),
    count: int = typer.Option(32, "--count", "-c", help="Number of frames (0=all)"),
    hex_view: bool = typer.Option(False, "--hex", "-x", help="Show raw register bytes"),
    plain: bool = typer.Option(
        False, "--plain", "-p", help="Print one repr() line per frame instead of a table"
    ),
) -> None:
    """
    Decode register frames from a YM5 file.

    Examples:

        ym5view frames song.ym

        ym5view frames song.ym --start 500 --count 50

        ym5view frames song.ym --count 0 --plain
    """
    ym = load_file(file)
    total = ym.num_registers()

    if total == 0:
        console.print("[yellow]File contains no register frames[/yellow]")
        return

    if not 0 <= start < total:
        console.print(f"[red]Error: Start frame must be 0-{total - 1}, got {start}[/red]")
        raise typer.Exit(1)

    end = total if count <= 0 else min(start + count, total)
    selected = (ym.frame(i) for i in range(start, end))
    title = f"Frames {start}-{end - 1} of {total}"

    if plain:
        for frame in selected:
            console.print(
                f"Register {frame.index}: {frame!r}", markup=False, highlight=False, soft_wrap=True
            )
    elif hex_view:
        display_frames_hex(selected, title=title)
    else:
        display_frames_table(selected, title=title)


if __name__ == "__main__":
    app()
