"""YM5 format handlers."""

from ym5view.formats.ym5.container import YM5File, YM5Offsets
from ym5view.formats.ym5.frame import FRAME_SIZE, RegisterFrame, RegisterOffsets
from ym5view.formats.ym5.reader import YM5Reader

__all__ = [
    "YM5File",
    "YM5Offsets",
    "RegisterFrame",
    "RegisterOffsets",
    "FRAME_SIZE",
    "YM5Reader",
]
