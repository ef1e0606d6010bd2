"""
YM5 file reader.

Loads .ym files from disk and hands the bytes to the container parser.
"""

import logging
from pathlib import Path
from typing import Union

from ym5view.formats.ym5.container import YM5File
from ym5view.utils.validation import YM5Error, validate_ym5_header

logger = logging.getLogger(__name__)

# LHA archives start with a method id at offset 2
LHA_METHOD_IDS = (b"-lh5-", b"-lh0-")


class YM5Reader:
    """
    Reader for YM5 register dump files.

    Example:
        ym = YM5Reader.read("song.ym")
        print(f"Frames: {ym.num_registers()}")
    """

    def __init__(self):
        self._raw_data: bytes = b""

    @classmethod
    def read(cls, filepath: Union[str, Path]) -> YM5File:
        """
        Read a YM5 file and return a validated container.

        Args:
            filepath: Path to .ym file

        Returns:
            Parsed YM5File
        """
        reader = cls()
        return reader.parse_file(filepath)

    def parse_file(self, filepath: Union[str, Path]) -> YM5File:
        """
        Parse a YM5 file.

        Args:
            filepath: Path to .ym file

        Returns:
            Parsed YM5File
        """
        filepath = Path(filepath)

        if not filepath.exists():
            raise FileNotFoundError(f"File not found: {filepath}")

        with open(filepath, "rb") as f:
            self._raw_data = f.read()

        logger.debug("Read %d bytes from %s", len(self._raw_data), filepath)
        return self.parse_bytes(self._raw_data)

    def parse_bytes(self, data: bytes) -> YM5File:
        """
        Parse YM5 data from bytes.

        The returned container references data directly.
        """
        self._raw_data = data
        return YM5File(data)

    @classmethod
    def can_read(cls, filepath: Union[str, Path]) -> bool:
        """
        Check if a file starts with the YM5 signature and check string.

        Args:
            filepath: Path to check

        Returns:
            True if the file looks like an uncompressed YM5 file
        """
        filepath = Path(filepath)

        if not filepath.is_file():
            return False

        with open(filepath, "rb") as f:
            header = f.read(12)

        return validate_ym5_header(header)

    @classmethod
    def get_file_info(cls, filepath: Union[str, Path]) -> dict:
        """
        Get basic information about a YM5 file without raising on bad data.

        Args:
            filepath: Path to .ym file

        Returns:
            Dictionary with file info
        """
        filepath = Path(filepath)

        with open(filepath, "rb") as f:
            data = f.read()

        info = {
            "valid": False,
            "size": len(data),
            "compressed": len(data) >= 7 and data[2:7] in LHA_METHOD_IDS,
        }

        if len(data) >= 4:
            info["header"] = data[:4].decode("ascii", errors="replace")

        try:
            ym = YM5File(data)
        except YM5Error as e:
            info["error"] = str(e)
            return info

        info.update(
            {
                "valid": True,
                "frames": ym.num_registers(),
                "num_vbl": ym.num_vbl(),
                "external_frequency": ym.external_frequency(),
                "player_frequency": ym.player_frequency(),
                "song_name": ym.metadata.song_name,
            }
        )
        return info

