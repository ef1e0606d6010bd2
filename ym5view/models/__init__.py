"""Data models for decoded YM5 content."""

from ym5view.models.song import SongAttributes, SongMetadata
from ym5view.models.frame_state import ChannelState, EnvelopeShape, FrameState

__all__ = [
    "SongAttributes",
    "SongMetadata",
    "ChannelState",
    "EnvelopeShape",
    "FrameState",
]
