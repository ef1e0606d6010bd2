"""
Display formatting utilities for CLI output.

Provides bar graphics and register value formatting helpers.
"""

from typing import Optional

# PSG level registers are 5 bits wide
MAX_VOLUME = 31


def value_bar(
    value: int,
    max_value: int = MAX_VOLUME,
    width: int = 8,
    filled_char: str = "█",
    empty_char: str = "░",
    show_value: bool = True,
) -> str:
    """
    Create a text-based bar graphic for a register value.

    Args:
        value: Current value
        max_value: Maximum value (default 31 for PSG levels)
        width: Bar width in characters
        filled_char: Character for filled portion
        empty_char: Character for empty portion
        show_value: Show numeric value

    Returns:
        Formatted string like "15 [███░░░░░]"
    """
    if max_value <= 0:
        max_value = 1

    clamped = max(0, min(value, max_value))
    fill_count = int((clamped / max_value) * width)
    bar = filled_char * fill_count + empty_char * (width - fill_count)

    if show_value:
        return f"{value:2d} [{bar}]"
    return f"[{bar}]"


def format_hz(hz: Optional[float]) -> str:
    """
    Format a tone frequency.

    Returns:
        "440.00 Hz", or "-" when undefined
    """
    if hz is None:
        return "-"
    return f"{hz:.2f} Hz"


def format_flag(enabled: bool, on: str = "On", off: str = "Off") -> str:
    """Format a boolean register flag with Rich markup."""
    return f"[green]{on}[/green]" if enabled else f"[dim]{off}[/dim]"


def format_level(envelope: bool, volume: int) -> str:
    """
    Format a channel level register.

    Returns:
        "ENV" when envelope mode is set, else a volume bar
    """
    if envelope:
        return f"[magenta]ENV[/magenta] {volume:2d}"
    return value_bar(volume)


def format_frequency(hz: int) -> str:
    """
    Format a clock frequency in a readable unit.

    Returns:
        "2.000 MHz", "50 Hz"
    """
    if hz >= 1_000_000:
        return f"{hz / 1_000_000:.3f} MHz"
    if hz >= 1_000:
        return f"{hz / 1_000:.3f} kHz"
    return f"{hz} Hz"


def format_duration(frames: int, player_frequency: int) -> str:
    """
    Format song length from frame count.

    Returns:
        "3:25.40" (minutes:seconds)
    """
    if player_frequency <= 0:
        return "-"
    seconds = frames / player_frequency
    minutes = int(seconds // 60)
    return f"{minutes}:{seconds - minutes * 60:05.2f}"
