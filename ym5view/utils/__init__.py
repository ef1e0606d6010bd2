"""Utility functions for ym5view."""

from ym5view.utils.validation import (
    YM5Error,
    BadHeaderError,
    TruncatedHeaderError,
    MetadataError,
    RegisterTableError,
    FrameIndexError,
    ZeroTonePeriodError,
    validate_ym5_header,
    validate_frame_index,
)

__all__ = [
    "YM5Error",
    "BadHeaderError",
    "TruncatedHeaderError",
    "MetadataError",
    "RegisterTableError",
    "FrameIndexError",
    "ZeroTonePeriodError",
    "validate_ym5_header",
    "validate_frame_index",
]
