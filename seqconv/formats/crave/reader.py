"""
Crave .seq file reader.

Reads Crave sequencer pattern files and converts them to the common
Sequence model.

File layout:
    Offset  Size    Description
    0x00    32      Header (device id + firmware version string)
    0x20    2       Unused (0x00 0x00)
    0x22    2       Byte length, big-endian (0x0E + (length - 1) * 8)
    0x24    2       Swing nibble pair (value = swing - 50)
    0x26    4       Sequence length (00 MSB 00 LSB, length = MSB * 8 + LSB + 1)
    0x2A    8 * N   Note records

Note record (8 bytes):
    note[2]     Note value nibble pair (12 * (octave + 1) + note)
    gate        Gate length 0-7
    ratchet     Ratchet count - 1
    velocity[2] Velocity nibble pair
    effects     Glide 0x01, Accent 0x04, Rest 0x08
    unused
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

# Header as written by firmware 1.1.1
CRAVE_HEADER = bytes(
    [
        0x23, 0x98, 0x54, 0x76, 0x00, 0x00, 0x00, 0x0A,
        0x00, 0x43, 0x00, 0x52, 0x00, 0x41, 0x00, 0x56,
        0x00, 0x45, 0x00, 0x00, 0x00, 0x0A, 0x00, 0x31,
        0x00, 0x2E, 0x00, 0x31, 0x00, 0x2E, 0x00, 0x31,
    ]
)

# Only the device id is compared, the version string after it may change
CRAVE_HEADER_COMPARE = 18


class CraveReader:
    """
    Reader for Crave sequencer pattern files.

    Example:
        sequence = CraveReader.read("pattern.seq")
        print(f"Length: {sequence.length}, Swing: {sequence.swing}%")
    """

    HEADER = CRAVE_HEADER
    HEADER_SIZE = 32
    HEADER_COMPARE = CRAVE_HEADER_COMPARE
    INFO_SIZE = 10
    NOTE_SIZE = 8
    MAX_STEPS = 32

    # Effects bits
    GLIDE = 0x01
    ACCENT = 0x04
    REST = 0x08

    def __init__(self):
        self._raw_data: bytes = b""

    @classmethod
    def read(cls, filepath: Union[str, Path]) -> Sequence:
        """
        Read a Crave file and return a Sequence.

        Args:
            filepath: Path to .seq file

        Returns:
            Parsed Sequence object
        """
        reader = cls()
        return reader.parse_file(filepath)

    def parse_file(self, filepath: Union[str, Path]) -> Sequence:
        """
        Parse a Crave file.

        Args:
            filepath: Path to .seq file

        Returns:
            Parsed Sequence object

        Raises:
            SequenceIOError: If the file cannot be read
            FormatError: If the file is not a valid Crave pattern
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
        Parse Crave data from bytes.

        Args:
            data: Raw file contents

        Returns:
            Parsed Sequence object
        """
        self._raw_data = data

        check_header(data, self.HEADER, self.HEADER_COMPARE)

        reader = ByteReader(data, self.HEADER_SIZE)
        reader.skip(2)
        byte_length = reader.read_u16()
        swing = 50 + reader.read_nibbles()
        seqlength = reader.read(4)

        length = seqlength[1] * 8 + seqlength[3] + 1
        validate_sequence_length(length, self.MAX_STEPS)

        logger.debug(
            "Crave info: length=%d swing=%d byte_length=0x%04X", length, swing, byte_length
        )

        # Check the whole note table before reading any record
        reader.require(length * self.NOTE_SIZE, "note records")

        notes = [self._parse_note(reader) for _ in range(length)]

        return Sequence(swing=swing, length=length, notes=notes, source_format="crave")

    def _parse_note(self, reader: ByteReader) -> Note:
        """Decode one 8-byte note record at the cursor."""
        value = reader.read_nibbles()
        gate = reader.read_u8()
        ratchet = reader.read_u8()
        velocity = reader.read_nibbles()
        effects = reader.read_u8()
        reader.skip(1)

        octave = value // 12 - 1
        note = (value - octave * 12) % 12

        return Note(
            note=note,
            octave=octave,
            ratchet=ratchet + 1,
            velocity=velocity,
            gate=gate,
            glide=bool(effects & self.GLIDE),
            accent=bool(effects & self.ACCENT),
            rest=bool(effects & self.REST),
        )

    @classmethod
    def can_read(cls, filepath: Union[str, Path]) -> bool:
        """
        Check if a file can be read as a Crave pattern.

        Args:
            filepath: Path to check

        Returns:
            True if the file starts with the Crave header
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
        Get basic information about a Crave file without decoding notes.

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
        }

        if len(data) >= cls.HEADER_SIZE:
            info["header"] = " ".join(f"{b:02X}" for b in data[: cls.HEADER_SIZE])
            info["valid"] = data[: cls.HEADER_COMPARE] == cls.HEADER[: cls.HEADER_COMPARE]
            # Version string is UTF-16BE after the device id
            info["version"] = (
                data[cls.HEADER_COMPARE + 4 : cls.HEADER_SIZE]
                .decode("utf-16-be", errors="replace")
                .strip("\x00")
            )

        if len(data) >= cls.HEADER_SIZE + cls.INFO_SIZE:
            seqlength = data[0x26:0x2A]
            length = seqlength[1] * 8 + seqlength[3] + 1
            info["length"] = length
            info["swing"] = 50 + data[0x24] * 0x10 + data[0x25]
            info["expected_size"] = cls.HEADER_SIZE + cls.INFO_SIZE + length * cls.NOTE_SIZE

        return info


def decode_crave(data: bytes) -> Sequence:
    """
    Decode a Crave pattern from raw bytes.

    Raises:
        UnknownHeaderError: If the header is not a Crave header
        TruncatedError: If the buffer is shorter than the declared length
        FormatError: If the sequence length is out of range
    """
    return CraveReader().parse_bytes(data)

