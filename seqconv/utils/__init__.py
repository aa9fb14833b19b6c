"""Utility functions for seqconv."""

from seqconv.utils.byte_reader import ByteReader
from seqconv.utils.validation import (
    FormatError,
    SeqConvError,
    SequenceIOError,
    TruncatedError,
    UnknownHeaderError,
    check_header,
)

__all__ = [
    "ByteReader",
    "FormatError",
    "SeqConvError",
    "SequenceIOError",
    "TruncatedError",
    "UnknownHeaderError",
    "check_header",
]
