"""
Crave .seq file writer.

Writes Sequence objects to the Crave pattern layout. This writer is the
target of TD-3 -> Crave conversion and reproduces the byte mapping the
Crave expects from converted patterns:

- octave is written with a +1 origin shift (TD-3 octave 0 is Crave octave -1)
- gate is 0x07 when the step slides, 0x03 otherwise
- ratchet is stored as count - 1 (a TD-3 step writes 0x00, one trigger)
- velocity is always 0x40 (nibble pair 0x04 0x00)
- effects carry slide/accent/rest; glide is never written
"""

import logging
from pathlib import Path
from typing import Union

from seqconv.formats.crave.reader import CRAVE_HEADER
from seqconv.models.sequence import Note, Sequence
from seqconv.utils.validation import SequenceIOError, validate_byte

logger = logging.getLogger(__name__)


class CraveWriter:
    """
    Writer for Crave sequencer pattern files.

    Example:
        sequence = TD3Reader.read("td3.seq")
        CraveWriter.write(sequence, "crave.seq")
    """

    HEADER = CRAVE_HEADER

    # Byte length base value for a single-step sequence
    BYTE_LENGTH_BASE = 0x0E
    NOTE_SIZE = 8

    GATE_SLIDE = 0x07
    GATE_DEFAULT = 0x03
    VELOCITY = (0x04, 0x00)

    def __init__(self):
        self._buffer: bytearray = bytearray()

    @classmethod
    def write(cls, sequence: Sequence, filepath: Union[str, Path]) -> None:
        """
        Write a Sequence to a Crave file.

        Args:
            sequence: Sequence to write
            filepath: Output file path

        Raises:
            SequenceIOError: If the file cannot be written
        """
        writer = cls()
        data = writer.to_bytes(sequence)

        filepath = Path(filepath)

        try:
            filepath.parent.mkdir(parents=True, exist_ok=True)
            with open(filepath, "wb") as f:
                f.write(data)
        except OSError as e:
            raise SequenceIOError(filepath, e) from e

        logger.debug("Wrote %d bytes to %s", len(data), filepath)

    def to_bytes(self, sequence: Sequence) -> bytes:
        """
        Convert a Sequence to Crave binary format.

        Args:
            sequence: Sequence to convert

        Returns:
            Complete file data (42 + 8 * length bytes)

        Raises:
            FormatError: If a field does not fit its byte
        """
        self._buffer = bytearray()

        self._write_header()
        self._write_info(sequence)

        for note in sequence.notes:
            self._write_note(note)

        return bytes(self._buffer)

    def _write_header(self) -> None:
        """Write the 32-byte file header."""
        self._buffer += self.HEADER

    def _write_info(self, sequence: Sequence) -> None:
        """Write the sequence info block (byte length, swing, length)."""
        self._buffer += b"\x00\x00"

        byte_length = self.BYTE_LENGTH_BASE + (sequence.length - 1) * self.NOTE_SIZE
        self._buffer.append(byte_length >> 8)
        self._buffer.append(byte_length & 0xFF)

        swing = sequence.swing - 50
        self._buffer.append(validate_byte(swing // 0x10, "swing"))
        self._buffer.append(swing % 0x10)

        steps = sequence.length - 1
        self._buffer += bytes([0x00, steps // 8, 0x00, steps % 8])

        logger.debug(
            "Crave info: length=%d swing=%d byte_length=0x%04X",
            sequence.length,
            sequence.swing,
            byte_length,
        )

    def _write_note(self, note: Note) -> None:
        """Write one 8-byte note record."""
        # TD-3 octaves start at 0, Crave octaves at -1
        value = validate_byte(note.note + 12 * (note.octave + 1), "note value")
        self._buffer.append(value // 0x10)
        self._buffer.append(value % 0x10)

        # Slide fully opens the gate
        self._buffer.append(self.GATE_SLIDE if note.slide else self.GATE_DEFAULT)
        # Stored as retriggers - 1, so a single trigger is 0x00
        self._buffer.append(validate_byte(note.ratchet - 1, "ratchet"))
        self._buffer += bytes(self.VELOCITY)

        effects = int(note.slide) | (int(note.accent) << 2) | (int(note.rest) << 3)
        self._buffer.append(effects)
        self._buffer.append(0x00)


def encode_crave(sequence: Sequence) -> bytes:
    """Encode a Sequence into the Crave byte layout."""
    return CraveWriter().to_bytes(sequence)
