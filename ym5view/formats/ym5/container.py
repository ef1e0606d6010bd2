"""
YM5 container parser.

File Structure:
    Offset  Size    Description
    0x00    4       Magic "YM5!"
    0x04    8       Check string "LeOnArD!"
    0x0C    4       Number of VBLs (header-declared, informational)
    0x10    4       Song attributes
    0x14    2       Number of digi-drums
    0x16    4       External (chip) frequency in Hz
    0x1A    2       Player frequency in Hz
    0x1C    4       VBL loop number
    0x20    2       Additional data size
    0x22    ...     Song name, author, comment (NUL-terminated)
    ...     N*28    Register frames
    end-4   4       Loop-point marker

All header integers are big-endian.
"""

import logging
import struct
from typing import Iterator, Union

from ym5view.formats.ym5.frame import FRAME_SIZE, RegisterFrame
from ym5view.models.song import SongAttributes, SongMetadata
from ym5view.utils.validation import (
    YM5_CHECK_STRING,
    YM5_MAGIC,
    BadHeaderError,
    MetadataError,
    RegisterTableError,
    TruncatedHeaderError,
    validate_frame_index,
)

logger = logging.getLogger(__name__)


class YM5Offsets:
    """
    Offset map for the fixed part of a YM5 file.
    """

    MAGIC = (0x00, 4)
    CHECK_STRING = (0x04, 8)

    NUM_VBL = 0x0C  # u32
    SONG_ATTRIBUTES = 0x10  # u32
    NUM_DIGI_DRUMS = 0x14  # u16
    EXTERNAL_FREQUENCY = 0x16  # u32
    PLAYER_FREQUENCY = 0x1A  # u16
    VBL_LOOP_NUMBER = 0x1C  # u32
    EXTRA_DATA_SIZE = 0x20  # u16

    HEADER_BLOCK_SIZE = 22
    METADATA_START = 0x22  # magic + check string + header block
    METADATA_FIELDS = 3
    LOOP_MARKER_SIZE = 4


class YM5File:
    """
    Validated read-only view over a YM5 register dump.

    The container keeps a memoryview of the buffer it was given and never
    copies it. Callers passing a mutable buffer must not modify it while
    the container or any frame taken from it is in use.

    Example:
        ym = YM5File(data)
        print(f"{ym.num_registers()} frames at {ym.player_frequency()} Hz")
        for frame in ym.frames():
            print(frame.tone_a())
    """

    def __init__(self, data: Union[bytes, bytearray, memoryview]):
        """
        Validate the container structure.

        Args:
            data: Complete file contents

        Raises:
            BadHeaderError: Signature or check string mismatch
            TruncatedHeaderError: Buffer ends inside the fixed header
            MetadataError: Fewer than three metadata terminators
            RegisterTableError: Register table is not a whole number of frames
        """
        self._data = memoryview(data).cast("B")

        start, size = YM5Offsets.MAGIC
        if self._data[start : start + size].tobytes() != YM5_MAGIC:
            raise BadHeaderError("Invalid YM5 signature")

        start, size = YM5Offsets.CHECK_STRING
        if self._data[start : start + size].tobytes() != YM5_CHECK_STRING:
            raise BadHeaderError("Invalid YM5 check string")

        if len(self._data) < YM5Offsets.METADATA_START:
            raise TruncatedHeaderError(
                f"YM5 header truncated: {len(self._data)} bytes "
                f"(need at least {YM5Offsets.METADATA_START})"
            )

        self._metadata_len = self._scan_metadata()
        registers_start = YM5Offsets.METADATA_START + self._metadata_len

        table_len = len(self._data) - registers_start - YM5Offsets.LOOP_MARKER_SIZE
        if table_len < 0:
            raise RegisterTableError(
                f"No room for the {YM5Offsets.LOOP_MARKER_SIZE}-byte loop marker "
                f"after metadata (short by {-table_len} bytes)"
            )
        if table_len % FRAME_SIZE != 0:
            raise RegisterTableError(
                f"Register table size {table_len} is not a multiple of {FRAME_SIZE}"
            )

        self._registers = self._data[registers_start : registers_start + table_len]

        logger.debug(
            "Parsed YM5: metadata %d bytes, register table at 0x%X, %d frames",
            self._metadata_len,
            registers_start,
            self.num_registers(),
        )
        if self.num_vbl() != self.num_registers():
            logger.debug(
                "Header declares %d VBLs but register table holds %d frames",
                self.num_vbl(),
                self.num_registers(),
            )

    def _scan_metadata(self) -> int:
        """Return the metadata length, ending just past the third NUL."""
        terminators = 0
        for idx in range(YM5Offsets.METADATA_START, len(self._data)):
            if self._data[idx] == 0:
                terminators += 1
                if terminators == YM5Offsets.METADATA_FIELDS:
                    return idx + 1 - YM5Offsets.METADATA_START

        raise MetadataError(
            f"Metadata has {terminators} of {YM5Offsets.METADATA_FIELDS} terminators "
            f"before end of data"
        )

    def _read_u16(self, offset: int) -> int:
        return struct.unpack(">H", self._data[offset : offset + 2])[0]

    def _read_u32(self, offset: int) -> int:
        return struct.unpack(">I", self._data[offset : offset + 4])[0]

    # Header fields

    def num_vbl(self) -> int:
        """Frame count declared in the header. Not checked against the data."""
        return self._read_u32(YM5Offsets.NUM_VBL)

    def song_attributes(self) -> int:
        return self._read_u32(YM5Offsets.SONG_ATTRIBUTES)

    def num_digi_drums(self) -> int:
        return self._read_u16(YM5Offsets.NUM_DIGI_DRUMS)

    def external_frequency(self) -> int:
        return self._read_u32(YM5Offsets.EXTERNAL_FREQUENCY)

    def player_frequency(self) -> int:
        return self._read_u16(YM5Offsets.PLAYER_FREQUENCY)

    def vbl_loop_number(self) -> int:
        return self._read_u32(YM5Offsets.VBL_LOOP_NUMBER)

    def extra_data_size(self) -> int:
        return self._read_u16(YM5Offsets.EXTRA_DATA_SIZE)

    @property
    def attributes(self) -> SongAttributes:
        """Song attributes as flags."""
        return SongAttributes(self.song_attributes())

    @property
    def metadata(self) -> SongMetadata:
        """Decode the song name, author and comment strings."""
        start = YM5Offsets.METADATA_START
        raw = self._data[start : start + self._metadata_len].tobytes()
        fields = [
            text.decode("ascii", errors="replace")
            for text in raw.split(b"\x00")[: YM5Offsets.METADATA_FIELDS]
        ]
        return SongMetadata(song_name=fields[0], author=fields[1], comment=fields[2])

    @property
    def metadata_length(self) -> int:
        """Length of the metadata block including its terminators."""
        return self._metadata_len

    @property
    def registers_offset(self) -> int:
        """Absolute offset of the first register frame."""
        return YM5Offsets.METADATA_START + self._metadata_len

    @property
    def end_marker(self) -> bytes:
        """The trailing loop-point marker bytes (not validated)."""
        return self._data[len(self._data) - YM5Offsets.LOOP_MARKER_SIZE :].tobytes()

    # Frames

    def num_registers(self) -> int:
        """Number of frames in the register table."""
        return len(self._registers) // FRAME_SIZE

    def frame(self, index: int) -> RegisterFrame:
        """
        Get the register frame at index.

        Args:
            index: Frame index, 0 <= index < num_registers()

        Returns:
            RegisterFrame view paired with the external frequency

        Raises:
            FrameIndexError: If index is out of range
        """
        validate_frame_index(index, self.num_registers())

        offset = index * FRAME_SIZE
        return RegisterFrame(
            self._registers[offset : offset + FRAME_SIZE],
            self.external_frequency(),
            index=index,
        )

    def frames(self) -> Iterator[RegisterFrame]:
        """Yield every frame in order."""
        for index in range(self.num_registers()):
            yield self.frame(index)

    def __len__(self) -> int:
        return self.num_registers()

    def __repr__(self) -> str:
        return (
            f"YM5File(frames={self.num_registers()}, "
            f"external_frequency={self.external_frequency()}, "
            f"player_frequency={self.player_frequency()})"
        )
