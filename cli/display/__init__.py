"""
CLI display modules.
"""

from cli.display.tables import (
    display_ym5_info,
    display_frames_table,
    display_frame_detail,
)
from cli.display.hex_view import display_frames_hex

__all__ = [
    "display_ym5_info",
    "display_frames_table",
    "display_frame_detail",
    "display_frames_hex",
]
