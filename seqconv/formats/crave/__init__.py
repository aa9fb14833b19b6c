"""Crave format handlers."""

from seqconv.formats.crave.reader import CraveReader, decode_crave
from seqconv.formats.crave.writer import CraveWriter, encode_crave

__all__ = ["CraveReader", "CraveWriter", "decode_crave", "encode_crave"]
