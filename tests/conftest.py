"""Test configuration and fixtures."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from seqconv.formats.crave.reader import CRAVE_HEADER
from seqconv.formats.td3.reader import TD3_HEADER


def build_crave(notes, swing=(0x00, 0x00), length=None, header=CRAVE_HEADER):
    """
    Build a Crave file from raw note records.

    Each note is a tuple (value, gate, ratchet_raw, velocity, effects).
    ``length`` overrides the declared length (defaults to len(notes)).
    """
    if length is None:
        length = len(notes)
    steps = length - 1

    data = bytearray(header)
    data += b"\x00\x00"
    byte_length = 0x0E + steps * 8
    data += bytes([byte_length >> 8, byte_length & 0xFF])
    data += bytes(swing)
    data += bytes([0x00, steps // 8, 0x00, steps % 8])

    for value, gate, ratchet, velocity, effects in notes:
        data += bytes(
            [value // 16, value % 16, gate, ratchet, velocity // 16, velocity % 16, effects, 0]
        )

    return bytes(data)


def build_td3(values, accents=None, slides=None, mask=(0x00, 0x00, 0x00, 0x00), length=None):
    """
    Build a 146-byte TD-3 file.

    ``values`` are note values per step; ``accents``/``slides`` are lists of
    step indexes with the flag set; ``mask`` is the raw 4-byte mask field.
    """
    accents = accents or []
    slides = slides or []
    if length is None:
        length = len(values)

    data = bytearray(146)
    data[0:32] = TD3_HEADER

    for step, value in enumerate(values):
        data[0x24 + step * 2] = value // 16
        data[0x24 + step * 2 + 1] = value % 16
    for step in accents:
        data[0x44 + step * 2 + 1] = 0x01
    for step in slides:
        data[0x64 + step * 2 + 1] = 0x01

    data[0x86] = length // 16
    data[0x87] = length % 16
    data[0x8A:0x8E] = bytes(mask)

    return bytes(data)


@pytest.fixture
def crave_data():
    """Return a 4-step Crave pattern with mixed notes and effects."""
    return build_crave(
        [
            (48, 3, 0, 100, 0x00),  # C3
            (61, 7, 1, 64, 0x01),  # C#4 glide
            (24, 0, 3, 127, 0x04),  # C1 accent
            (12, 5, 2, 0, 0x08),  # C0 rest
        ],
        swing=(0x00, 0x05),
    )


@pytest.fixture
def crave_file(tmp_path, crave_data):
    """Return path to a Crave pattern file."""
    path = tmp_path / "crave.seq"
    path.write_bytes(crave_data)
    return path


@pytest.fixture
def td3_data():
    """Return a 4-step TD-3 pattern with slide, accent and a rested step."""
    # Mask bits stored for steps 0, 1 and 3; step 2 reads back as a rest
    return build_td3(
        [36, 40, 43, 48],
        accents=[1],
        slides=[2],
        mask=(0x00, 0x0B, 0x00, 0x00),
    )


@pytest.fixture
def td3_file(tmp_path, td3_data):
    """Return path to a TD-3 pattern file."""
    path = tmp_path / "td3.seq"
    path.write_bytes(td3_data)
    return path
