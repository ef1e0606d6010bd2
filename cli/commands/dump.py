"""
Dump command - annotated hex dump of a YM5 file.
"""

from pathlib import Path
from typing import List, Tuple

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich import box

from ym5view.formats.ym5.container import YM5File, YM5Offsets
from ym5view.formats.ym5.frame import FRAME_SIZE
from cli.commands.info import load_file

console = Console()
app = typer.Typer()

Region = Tuple[int, int, str, str, str]


def build_regions(ym: YM5File, size: int) -> List[Region]:
    """
    Build the region list (start, end, name, description, color) for a file.

    Fixed header fields come first; metadata, registers and the end marker
    follow at the boundaries the parser computed.
    """
    registers_end = ym.registers_offset + ym.num_registers() * FRAME_SIZE
    return [
        (0x00, 0x04, "MAGIC", "File signature", "bright_blue"),
        (0x04, 0x0C, "CHECK", "Check string", "bright_blue"),
        (0x0C, 0x10, "NUM_VBL", "Declared frame count", "cyan"),
        (0x10, 0x14, "ATTRIBS", "Song attributes", "cyan"),
        (0x14, 0x16, "DIGIDRUMS", "Digi-drum count", "cyan"),
        (0x16, 0x1A, "EXT_FREQ", "External frequency", "yellow"),
        (0x1A, 0x1C, "PLAY_FREQ", "Player frequency", "yellow"),
        (0x1C, 0x20, "LOOP", "VBL loop number", "cyan"),
        (0x20, 0x22, "EXTRA", "Additional data size", "dim"),
        (YM5Offsets.METADATA_START, ym.registers_offset, "METADATA", "Name/author/comment", "green"),
        (ym.registers_offset, registers_end, "REGISTERS", "Register frames (28 bytes each)", "red"),
        (registers_end, size, "END", "Loop-point marker", "magenta"),
    ]


def get_region_for_offset(regions: List[Region], offset: int) -> Tuple[str, str, str]:
    """Get region name, description, and color for an offset."""
    for start, end, name, desc, color in regions:
        if start <= offset < end:
            return name, desc, color
    return "UNKNOWN", "Unknown region", "white"


def format_hex_line(regions: List[Region], data: bytes, offset: int, bytes_per_line: int = 16) -> Text:
    """
    Format a single line of hex dump with colors and annotations.

    Returns Rich Text object with colored output.
    """
    region_name, _, region_color = get_region_for_offset(regions, offset)

    text = Text()
    text.append(f"0x{offset:06X} ", style="dim")
    text.append(f"[{region_name:10s}] ", style=region_color)

    for i, byte in enumerate(data):
        byte_color = get_region_for_offset(regions, offset + i)[2]
        style = "dim" if byte == 0x00 else byte_color
        text.append(f"{byte:02X}", style=style)
        text.append(" ")

    if len(data) < bytes_per_line:
        text.append("   " * (bytes_per_line - len(data)))

    text.append(" ", style="dim")
    for byte in data:
        if 32 <= byte < 127:
            text.append(chr(byte), style="green")
        elif byte == 0x00:
            text.append(".", style="dim")
        else:
            text.append(".", style="yellow")

    return text


def create_legend(regions: List[Region]) -> Table:
    """Create a legend for the hex dump colors."""
    table = Table(title="Legend", box=box.SIMPLE, show_header=False, expand=False)
    table.add_column("Region", width=12)
    table.add_column("Description", width=44)

    for start, end, name, desc, color in regions:
        size = end - start
        if size <= 0:
            continue
        table.add_row(
            Text(name, style=color),
            f"{desc} ({size} bytes, 0x{start:X}-0x{end - 1:X})",
        )

    return table


@app.command()
def dump(
    file: Path = typer.Argument(..., help="YM5 file to dump"),
    start: int = typer.Option(0, "--start", "-s", help="Start offset"),
    length: int = typer.Option(256, "--length", "-l", help="Number of bytes (0=all)"),
    width: int = typer.Option(16, "--width", "-w", help="Bytes per line"),
    no_legend: bool = typer.Option(False, "--no-legend", help="Hide the legend"),
    region: str = typer.Option(
        "", "--region", "-r", help="Show only specific region (e.g., METADATA, END)"
    ),
) -> None:
    """
    Annotated hex dump of a YM5 file.

    Regions are located with the same boundary computation used for
    decoding, so the dump shows exactly where the parser finds the
    metadata, the register table and the end marker.

    Examples:

        ym5view dump song.ym

        ym5view dump song.ym --region METADATA

        ym5view dump song.ym --start 34 --length 64
    """
    ym = load_file(file)

    with open(file, "rb") as f:
        data = f.read()

    regions = build_regions(ym, len(data))

    if region:
        region_upper = region.upper()
        for r_start, r_end, r_name, r_desc, r_color in regions:
            if r_name == region_upper:
                start = r_start
                length = r_end - r_start
                console.print(f"[{r_color}]Showing region: {r_name} - {r_desc}[/{r_color}]")
                break
        else:
            console.print(f"[red]Unknown region: {region}[/red]")
            console.print("Available regions: " + ", ".join(r[2] for r in regions))
            raise typer.Exit(1)

    if length == 0:
        length = len(data) - start

    end = min(start + length, len(data))

    if not no_legend and not region:
        console.print(create_legend(regions))
        console.print()

    console.print(
        Panel(
            f"[bold]File:[/bold] {file}\n"
            f"[bold]Size:[/bold] {len(data)} bytes\n"
            f"[bold]Showing:[/bold] 0x{start:X} - 0x{max(end - 1, start):X} ({max(end - start, 0)} bytes)",
            title="[bold]YM5 Hex Dump[/bold]",
            border_style="blue",
        )
    )

    lines_shown = 0
    for offset in range(start, end, width):
        chunk = data[offset : min(offset + width, end)]
        console.print(format_hex_line(regions, chunk, offset, width))
        lines_shown += 1

    console.print()
    console.print(f"[dim]Total: {lines_shown} lines displayed[/dim]")


if __name__ == "__main__":
    app()
