"""
Error types and validation helpers for YM5 data.
"""

YM5_MAGIC = b"YM5!"
YM5_CHECK_STRING = b"LeOnArD!"


class YM5Error(ValueError):
    """Base class for every structural problem found in YM5 data."""

    pass


class BadHeaderError(YM5Error):
    """Raised when the file signature or check string does not match."""

    pass


class TruncatedHeaderError(BadHeaderError):
    """Raised when the buffer ends before the fixed header block does."""

    pass


class MetadataError(YM5Error):
    """Raised when the metadata block is missing one of its three terminators."""

    pass


class RegisterTableError(YM5Error):
    """Raised when the register table cannot be sliced into whole frames."""

    pass


class FrameIndexError(YM5Error, IndexError):
    """Raised when a frame index falls outside the register table."""

    pass


class ZeroTonePeriodError(YM5Error, ZeroDivisionError):
    """Raised when a frequency is requested for a tone period of zero."""

    pass


def validate_ym5_header(data: bytes) -> bool:
    """
    Check the YM5 signature and check string.

    Args:
        data: File data (at least 12 bytes)

    Returns:
        True if both markers match
    """
    if len(data) < 12:
        return False

    return bytes(data[0:4]) == YM5_MAGIC and bytes(data[4:12]) == YM5_CHECK_STRING


def validate_frame_index(index: int, num_frames: int) -> None:
    """
    Validate a frame index against the number of frames.

    Args:
        index: Requested frame index
        num_frames: Frames available in the register table

    Raises:
        FrameIndexError: If index is outside [0, num_frames)
    """
    if not 0 <= index < num_frames:
        raise FrameIndexError(f"Frame index {index} out of range ({num_frames} frames)")
