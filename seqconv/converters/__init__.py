"""
Pattern converters between TD-3 and Crave formats.

Example:
    from seqconv.converters import convert_td3_to_crave

    # Convert a TD-3 pattern to a Crave pattern
    convert_td3_to_crave("td3.seq", "crave.seq")
"""

from seqconv.converters.td3_to_crave import (
    CONVERSION_LIMITATIONS,
    TD3ToCraveConverter,
    convert_td3_to_crave,
)

__all__ = [
    "CONVERSION_LIMITATIONS",
    "TD3ToCraveConverter",
    "convert_td3_to_crave",
]
