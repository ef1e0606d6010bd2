"""Test configuration and fixtures."""

import struct

import pytest

HEADER_FIELDS = {
    "num_vbl": 2,
    "song_attributes": 0x00000001,
    "num_digi_drums": 0,
    "external_frequency": 2000000,
    "player_frequency": 50,
    "vbl_loop_number": 0,
    "extra_data_size": 0,
}


def build_ym5(
    frames=(),
    metadata=b"Song\x00Author\x00Comment\x00",
    end_marker=b"End!",
    magic=b"YM5!",
    check=b"LeOnArD!",
    **fields,
):
    """
    Build a YM5 buffer from header values, metadata and 28-byte frames.

    Any header field from HEADER_FIELDS can be overridden by keyword.
    """
    values = dict(HEADER_FIELDS, **fields)
    header = struct.pack(
        ">IIHIHIH",
        values["num_vbl"],
        values["song_attributes"],
        values["num_digi_drums"],
        values["external_frequency"],
        values["player_frequency"],
        values["vbl_loop_number"],
        values["extra_data_size"],
    )
    registers = b"".join(bytes(frame).ljust(28, b"\x00") for frame in frames)
    return magic + check + header + metadata + registers + end_marker


@pytest.fixture
def ym5_builder():
    """Return the YM5 buffer builder."""
    return build_ym5


@pytest.fixture
def sample_frames():
    """Two frames with distinct, known register values."""
    first = bytearray(28)
    first[0:2] = b"\x34\x02"  # tone A = 0x234
    first[2:4] = b"\xfe\x0f"  # tone B = 0xFFE
    first[4:6] = b"\x00\x00"  # tone C = 0
    first[6] = 0x1F
    first[7] = 0b00000111
    first[8] = 0x0F
    first[9] = 0x2A
    first[10] = 0x3F
    first[11] = 0x12
    first[12] = 0x34
    first[13] = 0b00001010

    second = bytearray(28)
    second[7] = 0b00011000
    second[27] = 0xAA
    return [bytes(first), bytes(second)]


@pytest.fixture
def ym5_data(sample_frames):
    """Return a valid two-frame YM5 buffer."""
    return build_ym5(frames=sample_frames, num_vbl=len(sample_frames))


@pytest.fixture
def ym5_file(tmp_path, ym5_data):
    """Return path to a valid YM5 file on disk."""
    path = tmp_path / "song.ym"
    path.write_bytes(ym5_data)
    return path
