"""Format handlers for Crave and TD-3."""

from seqconv.formats.crave import CraveReader, CraveWriter
from seqconv.formats.td3 import TD3Reader

__all__ = ["CraveReader", "CraveWriter", "TD3Reader"]
