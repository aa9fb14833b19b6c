"""
Error types and validation helpers for sequencer pattern data.
"""

from pathlib import Path
from typing import Optional, Union


class SeqConvError(Exception):
    """Base class for all seqconv errors."""

    pass


class FormatError(SeqConvError, ValueError):
    """Raised when a buffer does not follow the expected byte layout."""

    pass


class UnknownHeaderError(FormatError):
    """Raised when the file signature does not match the expected device."""

    def __init__(self, offset: int, expected: int, actual: int):
        self.offset = offset
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Unknown header: byte 0x{offset:02X} is 0x{actual:02X}, expected 0x{expected:02X}"
        )


class TruncatedError(FormatError):
    """Raised when the buffer is shorter than its declared layout."""

    def __init__(self, needed: int, available: int, what: str = "data"):
        self.needed = needed
        self.available = available
        super().__init__(f"Truncated {what}: need {needed} bytes, got {available}")


class SequenceIOError(SeqConvError):
    """Raised when a pattern file cannot be read or written."""

    def __init__(self, path: Union[str, Path], cause: Optional[OSError] = None):
        self.path = Path(path)
        self.cause = cause
        reason = cause.strerror if cause is not None and cause.strerror else str(cause)
        super().__init__(f"Can't access {self.path}: {reason}")


def check_header(data: bytes, signature: bytes, compare_length: int) -> None:
    """
    Compare the leading bytes of a buffer against a device signature.

    Only the first ``compare_length`` bytes take part in the comparison,
    anything after that (e.g. a firmware version string) is ignored.

    Args:
        data: Raw file contents
        signature: Expected signature bytes
        compare_length: Number of leading bytes to compare

    Raises:
        TruncatedError: If the buffer is shorter than ``compare_length``
        UnknownHeaderError: If any compared byte differs
    """
    if len(data) < compare_length:
        raise TruncatedError(compare_length, len(data), "header")

    for offset in range(compare_length):
        if data[offset] != signature[offset]:
            raise UnknownHeaderError(offset, signature[offset], data[offset])


def validate_byte(value: int, name: str = "value") -> int:
    """
    Validate that a value fits in a single unsigned byte.

    Args:
        value: The value to validate
        name: Name of the value for error messages

    Returns:
        The value, unchanged

    Raises:
        FormatError: If value is out of range
    """
    if not 0 <= value <= 0xFF:
        raise FormatError(f"{name} must be 0-255, got {value}")
    return value


def validate_sequence_length(length: int, max_steps: int = 32) -> int:
    """
    Validate a decoded sequence length.

    Args:
        length: Number of steps
        max_steps: Maximum steps the format can hold

    Raises:
        FormatError: If length is invalid
    """
    if not 1 <= length <= max_steps:
        raise FormatError(f"Sequence length must be 1-{max_steps}, got {length}")
    return length
