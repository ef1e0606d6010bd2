"""
Hex views of register frames.
"""

from typing import Iterable

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from ym5view.formats.ym5.frame import FRAME_SIZE, RegisterFrame

console = Console()

# Decoded registers R00-R13, rest of the frame is shown dimmed
DECODED_REGISTERS = 14

REGISTER_STYLES = {
    0: "cyan", 1: "cyan", 2: "green", 3: "green", 4: "yellow", 5: "yellow",
    6: "magenta", 7: "bold white",
    8: "cyan", 9: "green", 10: "yellow",
    11: "blue", 12: "blue", 13: "bright_blue",
}


def format_frame_line(frame: RegisterFrame) -> Text:
    """
    Format one frame as a colored row of 28 hex bytes.

    Registers of the same channel share a color.
    """
    label = "?" if frame.index is None else str(frame.index)

    text = Text()
    text.append(f"{label:>6} ", style="dim")

    for i, byte in enumerate(frame.raw()):
        if i == DECODED_REGISTERS:
            text.append("| ", style="dim")
        style = REGISTER_STYLES.get(i, "dim")
        text.append(f"{byte:02X}", style=style)
        text.append(" ")

    return text


def register_header() -> Text:
    """Column headers R00..R13 followed by the undecoded byte positions."""
    text = Text()
    text.append("   VBL ", style="dim")
    for i in range(FRAME_SIZE):
        if i == DECODED_REGISTERS:
            text.append("| ", style="dim")
        label = f"{i:02d}" if i < DECODED_REGISTERS else f"{i:02X}"
        text.append(label + " ", style=REGISTER_STYLES.get(i, "dim"))
    return text


def display_frames_hex(frames: Iterable[RegisterFrame], title: str = "Register Hex") -> None:
    """Display frames as a register-aligned hex grid with Rich."""

    lines = [register_header()]
    for frame in frames:
        lines.append(format_frame_line(frame))

    content = Text("\n").join(lines)
    console.print(Panel(content, title=title, border_style="blue", expand=False))
