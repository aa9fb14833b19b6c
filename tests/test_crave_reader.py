"""Tests for Crave pattern reader."""

import pytest

from conftest import build_crave
from seqconv.formats.crave.reader import CRAVE_HEADER, CraveReader, decode_crave
from seqconv.utils.validation import (
    FormatError,
    SequenceIOError,
    TruncatedError,
    UnknownHeaderError,
)


def _rest_notes(count):
    return [(48, 3, 0, 64, 0x00)] * count


class TestCraveInfoBlock:
    """Test cases for the sequence info block."""

    @pytest.mark.parametrize("high", range(4))
    @pytest.mark.parametrize("low", range(8))
    def test_length_nibbles(self, high, low):
        """Test that length = MSB * 8 + LSB + 1 over the whole range."""
        length = high * 8 + low + 1
        data = build_crave(_rest_notes(length))

        assert data[0x27] == high
        assert data[0x29] == low

        sequence = decode_crave(data)
        assert sequence.length == length
        assert len(sequence.notes) == length

    def test_length_example(self):
        """Test (0x00, 0x04) decodes to length 5."""
        data = bytearray(build_crave(_rest_notes(5)))
        assert data[0x26:0x2A] == bytes([0x00, 0x00, 0x00, 0x04])

        assert decode_crave(bytes(data)).length == 5

    @pytest.mark.parametrize(
        "swing_bytes, expected",
        [
            ((0x00, 0x00), 50),
            ((0x00, 0x05), 55),
            ((0x00, 0x0F), 65),
            ((0x01, 0x02), 68),
        ],
    )
    def test_swing(self, swing_bytes, expected):
        """Test swing = 50 + MSB * 16 + LSB."""
        data = build_crave(_rest_notes(1), swing=swing_bytes)

        assert decode_crave(data).swing == expected

    def test_length_out_of_range(self):
        """Test that a length above 32 is rejected."""
        data = bytearray(build_crave(_rest_notes(1)))
        data[0x27] = 0x04  # 4 * 8 + 0 + 1 = 33

        with pytest.raises(FormatError, match="1-32"):
            decode_crave(bytes(data) + bytes(33 * 8))


class TestCraveNotes:
    """Test cases for note record decoding."""

    def test_decode_fixture(self, crave_data):
        """Test decoding of all note fields."""
        sequence = decode_crave(crave_data)

        assert sequence.source_format == "crave"
        assert sequence.swing == 55
        assert sequence.length == 4

        first, second, third, fourth = sequence.notes

        assert (first.note, first.octave) == (0, 3)
        assert first.gate == 3
        assert first.ratchet == 1
        assert first.velocity == 100
        assert not (first.glide or first.accent or first.rest)

        assert second.label == "C#4"
        assert second.gate == 7
        assert second.ratchet == 2
        assert second.velocity == 64
        assert second.glide
        assert not second.slide

        assert (third.note, third.octave) == (0, 1)
        assert third.ratchet == 4
        assert third.velocity == 127
        assert third.accent

        assert (fourth.note, fourth.octave) == (0, 0)
        assert fourth.rest
        assert fourth.ratchet == 3

    @pytest.mark.parametrize("value", range(0, 128, 7))
    def test_octave_origin(self, value):
        """Test octave = value // 12 - 1 and class = value mod 12."""
        sequence = decode_crave(build_crave([(value, 0, 0, 0, 0)]))
        note = sequence.notes[0]

        assert note.octave == value // 12 - 1
        assert note.note == value % 12

    def test_lowest_note_octave(self):
        """Test that note value 0 decodes to octave -1."""
        note = decode_crave(build_crave([(0, 0, 0, 0, 0)])).notes[0]

        assert note.octave == -1
        assert note.label == "C-1"

    def test_trailing_records_ignored(self, crave_data):
        """Test that bytes past the declared length are not decoded."""
        sequence = decode_crave(crave_data + bytes(28 * 8))

        assert sequence.length == 4


class TestCraveErrors:
    """Test cases for malformed Crave data."""

    def test_invalid_header_rejected(self, crave_data):
        """Test that a wrong header is rejected."""
        data = bytearray(crave_data)
        data[9] = 0x44

        with pytest.raises(UnknownHeaderError):
            decode_crave(bytes(data))

    def test_td3_header_rejected(self, td3_data):
        """Test that a TD-3 file is not read as a Crave file."""
        with pytest.raises(UnknownHeaderError):
            decode_crave(td3_data)

    def test_version_suffix_tolerated(self, crave_data):
        """Test that another firmware version string still decodes."""
        data = bytearray(crave_data)
        data[22:32] = "2.0.0".encode("utf-16-be")

        assert decode_crave(bytes(data)).length == 4

    @pytest.mark.parametrize("length", [1, 2, 8, 32])
    def test_truncated_note_table(self, length):
        """Test that one missing byte raises TruncatedError."""
        data = build_crave(_rest_notes(length))
        assert len(data) == 42 + length * 8

        with pytest.raises(TruncatedError):
            decode_crave(data[:-1])

    def test_truncated_before_notes(self):
        """Test a file that ends right after the info block."""
        data = build_crave(_rest_notes(3))[:42]

        with pytest.raises(TruncatedError, match="note records"):
            decode_crave(data)

    def test_truncated_info_block(self):
        """Test a file that ends inside the info block."""
        with pytest.raises(TruncatedError):
            decode_crave(CRAVE_HEADER + b"\x00\x00\x00")

    def test_header_only_prefix(self):
        """Test a buffer shorter than the compared header."""
        with pytest.raises(TruncatedError):
            decode_crave(CRAVE_HEADER[:8])


class TestCraveReader:
    """Test cases for file-level reading."""

    def test_read_file(self, crave_file):
        """Test reading a Crave file into a Sequence."""
        sequence = CraveReader.read(crave_file)

        assert sequence.length == 4
        assert sequence.source_format == "crave"

    def test_read_missing_file(self, tmp_path):
        """Test that a missing file raises SequenceIOError."""
        with pytest.raises(SequenceIOError) as exc_info:
            CraveReader.read(tmp_path / "missing.seq")

        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_can_read(self, crave_file, td3_file, tmp_path):
        """Test file format detection."""
        assert CraveReader.can_read(crave_file) is True
        assert CraveReader.can_read(td3_file) is False
        assert CraveReader.can_read(tmp_path / "missing.seq") is False

    def test_get_file_info(self, crave_file):
        """Test getting file info without decoding notes."""
        info = CraveReader.get_file_info(crave_file)

        assert info["valid"] is True
        assert info["size"] == 74
        assert info["expected_size"] == 74
        assert info["length"] == 4
        assert info["swing"] == 55
        assert info["version"] == "1.1.1"
