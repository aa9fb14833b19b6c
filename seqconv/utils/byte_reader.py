"""
Bounds-checked cursor over a raw file buffer.

Every read is checked against the real size of the buffer, so a short file
raises TruncatedError instead of silently yielding fewer bytes.
"""

import struct

from seqconv.utils.validation import TruncatedError


class ByteReader:
    """
    Sequential reader for fixed-layout binary records.

    Example:
        reader = ByteReader(data)
        reader.skip(32)
        size = reader.read_u16()
        swing = reader.read_nibbles()
    """

    def __init__(self, data: bytes, offset: int = 0):
        self.data = data
        self.pos = offset

    @property
    def remaining(self) -> int:
        """Bytes left after the cursor."""
        return max(0, len(self.data) - self.pos)

    def require(self, size: int, what: str = "data") -> None:
        """Fail unless at least ``size`` bytes are left after the cursor."""
        if size > self.remaining:
            raise TruncatedError(self.pos + size, len(self.data), what)

    def seek(self, offset: int) -> None:
        """Move the cursor to an absolute offset."""
        self.pos = offset

    def skip(self, size: int) -> None:
        """Advance past ``size`` bytes."""
        self.require(size)
        self.pos += size

    def read(self, size: int) -> bytes:
        """Read ``size`` raw bytes."""
        self.require(size)
        chunk = self.data[self.pos : self.pos + size]
        self.pos += size
        return bytes(chunk)

    def read_u8(self) -> int:
        """Read one unsigned byte."""
        self.require(1)
        value = self.data[self.pos]
        self.pos += 1
        return value

    def read_u16(self) -> int:
        """Read a big-endian unsigned 16-bit word."""
        return struct.unpack(">H", self.read(2))[0]

    def read_nibbles(self) -> int:
        """
        Read a high/low nibble pair stored in two bytes.

        The devices store an 8-bit value as ``MSB * 16 + LSB`` spread over
        two bytes, one nibble per byte.
        """
        high, low = self.read(2)
        return high * 0x10 + low
