"""Tests for header validation and the byte cursor."""

import pytest

from seqconv.formats.crave.reader import CRAVE_HEADER, CRAVE_HEADER_COMPARE
from seqconv.formats.td3.reader import TD3_HEADER, TD3_HEADER_COMPARE
from seqconv.utils.byte_reader import ByteReader
from seqconv.utils.validation import (
    FormatError,
    SequenceIOError,
    TruncatedError,
    UnknownHeaderError,
    check_header,
    validate_byte,
    validate_sequence_length,
)


class TestCheckHeader:
    """Test cases for signature comparison."""

    def test_exact_header_accepted(self):
        """Test that the full signature passes."""
        check_header(CRAVE_HEADER, CRAVE_HEADER, CRAVE_HEADER_COMPARE)
        check_header(TD3_HEADER, TD3_HEADER, TD3_HEADER_COMPARE)

    @pytest.mark.parametrize("offset", range(CRAVE_HEADER_COMPARE))
    def test_crave_single_byte_mutation_rejected(self, offset):
        """Test that flipping any compared Crave byte is rejected."""
        data = bytearray(CRAVE_HEADER + bytes(64))
        data[offset] ^= 0xFF

        with pytest.raises(UnknownHeaderError) as exc_info:
            check_header(bytes(data), CRAVE_HEADER, CRAVE_HEADER_COMPARE)

        assert exc_info.value.offset == offset
        assert exc_info.value.expected == CRAVE_HEADER[offset]

    @pytest.mark.parametrize("offset", range(TD3_HEADER_COMPARE))
    def test_td3_single_byte_mutation_rejected(self, offset):
        """Test that flipping any compared TD-3 byte is rejected."""
        data = bytearray(TD3_HEADER + bytes(114))
        data[offset] = (data[offset] + 1) & 0xFF

        with pytest.raises(UnknownHeaderError):
            check_header(bytes(data), TD3_HEADER, TD3_HEADER_COMPARE)

    @pytest.mark.parametrize("offset", range(CRAVE_HEADER_COMPARE, 32))
    def test_crave_version_bytes_ignored(self, offset):
        """Test that the Crave firmware version string is not compared."""
        data = bytearray(CRAVE_HEADER)
        data[offset] ^= 0xFF

        check_header(bytes(data), CRAVE_HEADER, CRAVE_HEADER_COMPARE)

    def test_trailing_bytes_ignored(self):
        """Test that bytes after the header do not matter."""
        check_header(CRAVE_HEADER + b"\xff" * 100, CRAVE_HEADER, CRAVE_HEADER_COMPARE)

    def test_short_buffer_rejected(self):
        """Test that a buffer shorter than the compare length is rejected."""
        with pytest.raises(TruncatedError):
            check_header(CRAVE_HEADER[:10], CRAVE_HEADER, CRAVE_HEADER_COMPARE)

    def test_errors_are_format_errors(self):
        """Test the error hierarchy."""
        assert issubclass(UnknownHeaderError, FormatError)
        assert issubclass(TruncatedError, FormatError)
        assert issubclass(FormatError, ValueError)


class TestValidators:
    """Test cases for value validators."""

    def test_validate_byte(self):
        assert validate_byte(0) == 0
        assert validate_byte(255) == 255

        with pytest.raises(FormatError, match="swing must be 0-255"):
            validate_byte(-1, "swing")
        with pytest.raises(FormatError):
            validate_byte(256)

    def test_validate_sequence_length(self):
        assert validate_sequence_length(1) == 1
        assert validate_sequence_length(32) == 32

        with pytest.raises(FormatError, match="1-32"):
            validate_sequence_length(33)
        with pytest.raises(FormatError, match="1-16"):
            validate_sequence_length(0, 16)

    def test_io_error_keeps_cause(self, tmp_path):
        cause = FileNotFoundError(2, "No such file or directory")
        error = SequenceIOError(tmp_path / "missing.seq", cause)

        assert error.cause is cause
        assert error.path.name == "missing.seq"
        assert "No such file or directory" in str(error)


class TestByteReader:
    """Test cases for the bounds-checked cursor."""

    def test_sequential_reads(self):
        reader = ByteReader(bytes([0x01, 0x00, 0x2E, 0x03, 0x07, 0xAA]))

        assert reader.read_u8() == 0x01
        assert reader.read_u16() == 0x002E
        assert reader.read_nibbles() == 0x37
        assert reader.remaining == 1

    def test_read_past_end(self):
        reader = ByteReader(bytes(4), offset=2)

        with pytest.raises(TruncatedError) as exc_info:
            reader.read(3)

        assert exc_info.value.needed == 5
        assert exc_info.value.available == 4
        # Cursor does not move on failure
        assert reader.pos == 2

    def test_require_does_not_advance(self):
        reader = ByteReader(bytes(8))

        reader.require(8)
        assert reader.pos == 0

        with pytest.raises(TruncatedError):
            reader.require(9)

    def test_skip_and_seek(self):
        reader = ByteReader(bytes(range(10)))

        reader.skip(4)
        assert reader.read_u8() == 4

        reader.seek(8)
        assert reader.read(2) == bytes([8, 9])
        assert reader.remaining == 0

        with pytest.raises(TruncatedError):
            reader.skip(1)
