"""TD-3 format handlers."""

from seqconv.formats.td3.reader import TD3Reader, decode_td3, unpack_mask

__all__ = ["TD3Reader", "decode_td3", "unpack_mask"]
