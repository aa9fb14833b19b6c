"""
SeqConv - Reader and converter for Crave and TD-3 sequencer pattern files.

This library provides tools to:
- Read Crave pattern files (.seq)
- Read TD-3 pattern files (.seq)
- Write Crave pattern files, e.g. from a converted TD-3 pattern

Example usage:
    from seqconv import TD3Reader, CraveWriter

    # Read TD-3 pattern
    sequence = TD3Reader.read("td3.seq")

    # Write it as a Crave pattern
    CraveWriter.write(sequence, "crave.seq")
"""

__version__ = "0.2.0"
__author__ = "SeqConv Contributors"

from seqconv.formats.crave.reader import CraveReader, decode_crave
from seqconv.formats.crave.writer import CraveWriter, encode_crave
from seqconv.formats.td3.reader import TD3Reader, decode_td3
from seqconv.models.sequence import Note, Sequence
from seqconv.utils.validation import (
    FormatError,
    SeqConvError,
    SequenceIOError,
    TruncatedError,
    UnknownHeaderError,
)

__all__ = [
    "CraveReader",
    "CraveWriter",
    "TD3Reader",
    "decode_crave",
    "decode_td3",
    "encode_crave",
    "Note",
    "Sequence",
    "FormatError",
    "SeqConvError",
    "SequenceIOError",
    "TruncatedError",
    "UnknownHeaderError",
]
