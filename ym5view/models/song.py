"""
Song-level data models for YM5 files.
"""

from dataclasses import dataclass
from enum import IntFlag


class SongAttributes(IntFlag):
    """
    Song attribute bits from the YM5 header.

    Only the low three bits carry a documented meaning; any other bits
    are kept as-is when the raw value is converted.
    """

    NONE = 0
    INTERLEAVED = 0x01  # Register data stored register-by-register
    DD_SIGNED = 0x02  # Digi-drum samples are signed
    DD_ST_FORMAT = 0x04  # Digi-drums already in ST 4-bit format

    @property
    def is_interleaved(self) -> bool:
        """Check if the interleaved bit is set."""
        return bool(self & SongAttributes.INTERLEAVED)


@dataclass(frozen=True)
class SongMetadata:
    """
    The three free-text fields stored after the header.
    """

    song_name: str
    author: str
    comment: str

    def to_dict(self) -> dict:
        """Convert to dictionary representation."""
        return {
            "song_name": self.song_name,
            "author": self.author,
            "comment": self.comment,
        }
