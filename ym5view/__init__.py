"""
ym5view - Decoder for YM5 chiptune register dumps.

This library provides tools to:
- Validate YM5 containers and locate their register table
- Decode per-VBL PSG register frames (tone, noise, mixer, levels, envelope)
- Inspect files from the command line (see the ym5view CLI)

Example usage:
    from ym5view import YM5Reader

    ym = YM5Reader.read("song.ym")
    frame = ym.frame(0)
    print(frame.tone_a(), frame.envelope_period())
"""

__version__ = "0.1.0"
__author__ = "ym5view Contributors"

from ym5view.formats.ym5.container import YM5File
from ym5view.formats.ym5.frame import RegisterFrame
from ym5view.formats.ym5.reader import YM5Reader
from ym5view.models.frame_state import EnvelopeShape, FrameState
from ym5view.models.song import SongAttributes, SongMetadata
from ym5view.utils.validation import (
    YM5Error,
    BadHeaderError,
    TruncatedHeaderError,
    MetadataError,
    RegisterTableError,
    FrameIndexError,
    ZeroTonePeriodError,
)

__all__ = [
    "YM5File",
    "RegisterFrame",
    "YM5Reader",
    "EnvelopeShape",
    "FrameState",
    "SongAttributes",
    "SongMetadata",
    "YM5Error",
    "BadHeaderError",
    "TruncatedHeaderError",
    "MetadataError",
    "RegisterTableError",
    "FrameIndexError",
    "ZeroTonePeriodError",
]
