"""
TD-3 .seq file reader.

Reads TD-3 sequencer pattern files and converts them to the common
Sequence model.

File layout (146 bytes):
    Offset  Size    Description
    0x00    32      Header (device id + firmware version string)
    0x20    4       Unused
    0x24    32      Note table, 2 bytes per step (MSB, LSB nibbles)
    0x44    32      Accent table, 2 bytes per step (flag in second byte)
    0x64    32      Slide table, 2 bytes per step (flag in second byte)
    0x84    2       Unused
    0x86    2       Sequence length nibble pair
    0x88    2       Unused
    0x8A    4       Step mask, nibble interleaved, stored negated
    0x8E    4       Unused

The tables are fixed at 32 bytes, so a pattern holds at most 16 steps.
"""

import logging
from pathlib import Path
from typing import Union

from seqconv.models.sequence import Note, Sequence
from seqconv.utils.byte_reader import ByteReader
from seqconv.utils.validation import (
    SequenceIOError,
    check_header,
    validate_sequence_length,
)

logger = logging.getLogger(__name__)

TD3_HEADER = bytes(
    [
        0x23, 0x98, 0x54, 0x76, 0x00, 0x00, 0x00, 0x08,
        0x00, 0x54, 0x00, 0x44, 0x00, 0x2D, 0x00, 0x33,
        0x00, 0x00, 0x00, 0x0A, 0x00, 0x31, 0x00, 0x2E,
        0x00, 0x32, 0x00, 0x2E, 0x00, 0x36, 0x00, 0x00,
    ]
)

TD3_HEADER_COMPARE = 16


def unpack_mask(raw: bytes) -> int:
    """
    Rebuild the 16-bit step enable mask.

    The device splits the mask across four bytes, one nibble per byte, in
    the order (bits 4-7, bits 0-3, bits 12-15, bits 8-11). The combined
    value is stored negated; after inverting it bit ``i`` is the rest flag
    of step ``i``.

    Args:
        raw: The 4 mask bytes as stored in the file

    Returns:
        16-bit mask, least significant bit = step 0
    """
    mask = raw[1] + (raw[0] << 4) + (raw[3] << 8) + (raw[2] << 12)
    return ~mask & 0xFFFF


class TD3Reader:
    """
    Reader for TD-3 sequencer pattern files.

    Example:
        sequence = TD3Reader.read("pattern.seq")
        print(f"Length: {sequence.length}")
    """

    HEADER = TD3_HEADER
    HEADER_SIZE = 32
    HEADER_COMPARE = TD3_HEADER_COMPARE
    FILE_SIZE = 146
    TABLE_SIZE = 32
    MAX_STEPS = 16

    # Offset table
    OFFSETS = {
        "header": 0x00,
        "fill_1": 0x20,
        "notes": 0x24,
        "accents": 0x44,
        "slides": 0x64,
        "fill_2": 0x84,
        "length": 0x86,
        "fill_3": 0x88,
        "mask": 0x8A,
        "fill_4": 0x8E,
    }

    def __init__(self):
        self._raw_data: bytes = b""

    @classmethod
    def read(cls, filepath: Union[str, Path]) -> Sequence:
        """
        Read a TD-3 file and return a Sequence.

        Args:
            filepath: Path to .seq file

        Returns:
            Parsed Sequence object
        """
        reader = cls()
        return reader.parse_file(filepath)

    def parse_file(self, filepath: Union[str, Path]) -> Sequence:
        """
        Parse a TD-3 file.

        Args:
            filepath: Path to .seq file

        Returns:
            Parsed Sequence object

        Raises:
            SequenceIOError: If the file cannot be read
            FormatError: If the file is not a valid TD-3 pattern
        """
        filepath = Path(filepath)

        try:
            with open(filepath, "rb") as f:
                data = f.read()
        except OSError as e:
            raise SequenceIOError(filepath, e) from e

        logger.debug("Read %d bytes from %s", len(data), filepath)
        return self.parse_bytes(data)

    def parse_bytes(self, data: bytes) -> Sequence:
        """
        Parse TD-3 data from bytes.

        Args:
            data: Raw file contents

        Returns:
            Parsed Sequence object
        """
        self._raw_data = data

        check_header(data, self.HEADER, self.HEADER_COMPARE)

        reader = ByteReader(data)
        reader.require(self.FILE_SIZE, "TD-3 pattern")

        reader.seek(self.OFFSETS["notes"])
        notes_table = reader.read(self.TABLE_SIZE)
        accents = reader.read(self.TABLE_SIZE)
        slides = reader.read(self.TABLE_SIZE)

        reader.seek(self.OFFSETS["length"])
        length = reader.read_nibbles()
        validate_sequence_length(length, self.MAX_STEPS)

        reader.seek(self.OFFSETS["mask"])
        mask = unpack_mask(reader.read(4))

        logger.debug("TD-3 info: length=%d mask=0x%04X", length, mask)

        notes = []
        for step in range(length):
            i = step * 2
            value = notes_table[i] * 0x10 + notes_table[i + 1]
            octave = value // 12
            notes.append(
                Note(
                    note=(value - octave * 12) % 12,
                    octave=octave,
                    slide=bool(slides[i + 1] & 0x01),
                    accent=bool(accents[i + 1] & 0x01),
                    rest=bool((mask >> step) & 0x01),
                )
            )

        return Sequence(swing=50, length=length, notes=notes, source_format="td3")

    @classmethod
    def can_read(cls, filepath: Union[str, Path]) -> bool:
        """
        Check if a file can be read as a TD-3 pattern.

        Args:
            filepath: Path to check

        Returns:
            True if the file starts with the TD-3 header
        """
        filepath = Path(filepath)

        if not filepath.exists():
            return False

        try:
            with open(filepath, "rb") as f:
                header = f.read(cls.HEADER_COMPARE)
        except OSError:
            return False

        return header == cls.HEADER[: cls.HEADER_COMPARE]

    @classmethod
    def get_file_info(cls, filepath: Union[str, Path]) -> dict:
        """
        Get basic information about a TD-3 file without decoding notes.

        Args:
            filepath: Path to .seq file

        Returns:
            Dictionary with file info
        """
        filepath = Path(filepath)

        try:
            with open(filepath, "rb") as f:
                data = f.read()
        except OSError as e:
            raise SequenceIOError(filepath, e) from e

        info = {
            "valid": False,
            "size": len(data),
            "expected_size": cls.FILE_SIZE,
        }

        if len(data) >= cls.HEADER_SIZE:
            info["header"] = " ".join(f"{b:02X}" for b in data[: cls.HEADER_SIZE])
            info["valid"] = data[: cls.HEADER_COMPARE] == cls.HEADER[: cls.HEADER_COMPARE]

        if len(data) >= cls.FILE_SIZE:
            offset = cls.OFFSETS["length"]
            info["length"] = data[offset] * 0x10 + data[offset + 1]
            mask_offset = cls.OFFSETS["mask"]
            info["mask"] = unpack_mask(data[mask_offset : mask_offset + 4])

        return info


def decode_td3(data: bytes) -> Sequence:
    """
    Decode a TD-3 pattern from raw bytes.

    Raises:
        UnknownHeaderError: If the header is not a TD-3 header
        TruncatedError: If the buffer is shorter than the TD-3 layout
        FormatError: If the sequence length is out of range
    """
    return TD3Reader().parse_bytes(data)
