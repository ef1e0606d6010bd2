"""
Rich table displays for YM5 file information.

Provides formatted output for header fields and decoded register frames.
"""

from typing import Iterable

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich import box

from ym5view.formats.ym5.container import YM5File
from ym5view.formats.ym5.frame import RegisterFrame
from ym5view.models.song import SongAttributes
from cli.display.formatters import (
    format_duration,
    format_flag,
    format_frequency,
    format_hz,
    format_level,
)


console = Console()


def display_ym5_info(ym: YM5File, filepath: str = "") -> None:
    """Display header fields and song metadata with Rich formatting."""

    meta = ym.metadata
    attributes = ym.attributes

    header_content = f"""[bold]File:[/bold] {filepath or "N/A"}
[bold]Song:[/bold] {meta.song_name or "N/A"}
[bold]Author:[/bold] {meta.author or "N/A"}
[bold]Comment:[/bold] {meta.comment or "N/A"}
[bold]Frames:[/bold] {ym.num_registers()}
[bold]Duration:[/bold] {format_duration(ym.num_registers(), ym.player_frequency())}"""

    console.print(
        Panel(
            header_content,
            title="[bold blue]YM5 Song Info[/bold blue]",
            border_style="blue",
            expand=False,
        )
    )

    header_table = Table(
        title="Header Fields", box=box.ROUNDED, show_header=True, header_style="bold cyan"
    )
    header_table.add_column("Field", style="cyan", width=20)
    header_table.add_column("Offset", style="dim", width=8)
    header_table.add_column("Value", width=30)

    header_table.add_row("Num VBL", "0x0C", str(ym.num_vbl()))
    header_table.add_row("Song Attributes", "0x10", f"0x{ym.song_attributes():08X}")
    header_table.add_row("Num Digi Drums", "0x14", str(ym.num_digi_drums()))
    header_table.add_row(
        "External Frequency",
        "0x16",
        f"{ym.external_frequency()} Hz ({format_frequency(ym.external_frequency())})",
    )
    header_table.add_row("Player Frequency", "0x1A", f"{ym.player_frequency()} Hz")
    header_table.add_row("VBL Loop Number", "0x1C", str(ym.vbl_loop_number()))
    header_table.add_row("Extra Data Size", "0x20", str(ym.extra_data_size()))

    console.print(header_table)

    flag_table = Table(title="Song Attributes", box=box.SIMPLE, show_header=False)
    flag_table.add_column("Flag", style="cyan", width=20)
    flag_table.add_column("State", width=10)

    flag_table.add_row("Interleaved", format_flag(bool(attributes & SongAttributes.INTERLEAVED)))
    flag_table.add_row("DD Signed", format_flag(bool(attributes & SongAttributes.DD_SIGNED)))
    flag_table.add_row("DD ST 4-bit", format_flag(bool(attributes & SongAttributes.DD_ST_FORMAT)))

    console.print(flag_table)

    layout = f"""[bold]Metadata:[/bold] 0x22 ({ym.metadata_length} bytes)
[bold]Registers:[/bold] 0x{ym.registers_offset:X} ({ym.num_registers()} x 28 bytes)
[bold]End Marker:[/bold] {ym.end_marker!r}"""

    console.print(Panel(layout, title="[bold]Layout[/bold]", border_style="dim", expand=False))

    if ym.num_vbl() != ym.num_registers():
        console.print(
            f"[yellow]Note: header declares {ym.num_vbl()} VBLs, "
            f"register table holds {ym.num_registers()} frames[/yellow]"
        )


def display_frames_table(frames: Iterable[RegisterFrame], title: str = "Register Frames") -> None:
    """Display decoded frames, one row per VBL."""

    table = Table(title=title, box=box.SIMPLE_HEAD, show_header=True, header_style="bold green")
    table.add_column("VBL", style="dim", justify="right")
    for name in ("A", "B", "C"):
        table.add_column(f"Tone {name}", justify="right")
        table.add_column(f"Lvl {name}")
    table.add_column("Mix", style="dim")
    table.add_column("Noise", justify="right")
    table.add_column("Env", justify="right")
    table.add_column("Shape")

    for frame in frames:
        state = frame.decode()
        row = [str(state.index)]
        for channel in state.channels:
            tone = f"{channel.tone_period:4d}" if channel.tone_enabled else "[dim]----[/dim]"
            row.append(tone)
            row.append(format_level(channel.envelope, channel.volume))

        mix = "".join(
            [
                "T" if state.channel_a.tone_enabled else ".",
                "T" if state.channel_b.tone_enabled else ".",
                "T" if state.channel_c.tone_enabled else ".",
                "N" if state.channel_a.noise_enabled else ".",
                "N" if state.channel_b.noise_enabled else ".",
            ]
        )
        row.append(mix)
        row.append(str(state.noise_period))
        row.append(str(state.envelope_period))
        row.append(state.envelope_shape.to_bits())
        table.add_row(*row)

    console.print(table)


def display_frame_detail(frame: RegisterFrame) -> None:
    """Display every decoded field of a single frame."""

    state = frame.decode()

    channel_table = Table(
        title=f"Frame {state.index}", box=box.ROUNDED, show_header=True, header_style="bold"
    )
    channel_table.add_column("Ch", width=3)
    channel_table.add_column("Period", justify="right", width=7)
    channel_table.add_column("Frequency", justify="right", width=14)
    channel_table.add_column("Tone", width=5)
    channel_table.add_column("Noise", width=5)
    channel_table.add_column("Level", width=16)

    for channel in state.channels:
        channel_table.add_row(
            channel.name,
            str(channel.tone_period),
            format_hz(channel.tone_hz),
            format_flag(channel.tone_enabled),
            format_flag(channel.noise_enabled),
            format_level(channel.envelope, channel.volume),
        )

    console.print(channel_table)

    shape = state.envelope_shape
    console.print(
        f"[bold]Noise period:[/bold] {state.noise_period}   "
        f"[bold]Envelope period:[/bold] {state.envelope_period}   "
        f"[bold]Shape:[/bold] CONT={int(shape.cont)} ATT={int(shape.attack)} "
        f"ALT={int(shape.alternate)} HOLD={int(shape.hold)}"
    )
    console.print(f"[dim]Raw: {frame.raw().hex(' ').upper()}[/dim]")
