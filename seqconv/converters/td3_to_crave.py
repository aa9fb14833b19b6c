"""
TD-3 to Crave format converter.

Converts TD-3 .seq patterns to the Crave .seq layout.

The conversion is lossy in both directions of information:
- TD-3 has no swing, ratchet, velocity or gate length; the Crave file gets
  swing 50%, a single trigger per step, a fixed velocity and a gate derived from
  the slide flag
- TD-3 slide is written to the Crave glide bit and opens the gate fully

The conversion process:
1. Decode the TD-3 pattern into a Sequence
2. Encode the Sequence with the Crave writer (octave origin +1)
3. Write the Crave file
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from seqconv.formats.crave.writer import CraveWriter
from seqconv.formats.td3.reader import TD3Reader
from seqconv.models.sequence import Sequence
from seqconv.utils.validation import SequenceIOError

logger = logging.getLogger(__name__)

# Shown by the CLI after a conversion
CONVERSION_LIMITATIONS: List[str] = [
    "TD-3 has no swing, the Crave pattern plays straight (50%)",
    "Velocity is fixed to 64 on every step",
    "Gate length is 3 on normal steps and 7 on slide steps",
    "Slide is written as Crave glide",
]


class TD3ToCraveConverter:
    """
    Converter from TD-3 pattern files to Crave pattern files.

    Attributes:
        sequence: The last decoded TD-3 sequence
    """

    def __init__(self):
        self.sequence: Optional[Sequence] = None
        self._reader = TD3Reader()
        self._writer = CraveWriter()

    def convert(self, source_path: Union[str, Path]) -> bytes:
        """
        Convert a TD-3 file to Crave format.

        Args:
            source_path: Path to TD-3 .seq file

        Returns:
            Crave file data

        Raises:
            SequenceIOError: If the file cannot be read
        """
        source_path = Path(source_path)

        try:
            with open(source_path, "rb") as f:
                td3_data = f.read()
        except OSError as e:
            raise SequenceIOError(source_path, e) from e

        logger.debug("Read %d bytes from %s", len(td3_data), source_path)
        return self.convert_bytes(td3_data)

    def convert_bytes(self, td3_data: bytes) -> bytes:
        """
        Convert TD-3 bytes to Crave format.

        Args:
            td3_data: Raw TD-3 file data

        Returns:
            Crave file data
        """
        self.sequence = self._reader.parse_bytes(td3_data)
        logger.debug(
            "Converting %d steps (%d active)", self.sequence.length, self.sequence.active_steps
        )
        return self._writer.to_bytes(self.sequence)

    def convert_and_save(
        self, source_path: Union[str, Path], output_path: Union[str, Path]
    ) -> Sequence:
        """
        Convert a TD-3 file and save the Crave result.

        Args:
            source_path: Path to source TD-3 file
            output_path: Path for output Crave file

        Returns:
            The decoded TD-3 sequence
        """
        crave_data = self.convert(source_path)

        output_path = Path(output_path)

        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, "wb") as f:
                f.write(crave_data)
        except OSError as e:
            raise SequenceIOError(output_path, e) from e

        logger.debug("Wrote %d bytes to %s", len(crave_data), output_path)
        return self.sequence


def convert_td3_to_crave(
    source_path: Union[str, Path],
    output_path: Union[str, Path],
) -> Sequence:
    """
    Convert a TD-3 pattern file to a Crave pattern file.

    Convenience function for simple conversion.

    Args:
        source_path: Path to source TD-3 file
        output_path: Path for output Crave file

    Returns:
        The decoded TD-3 sequence

    Example:
        convert_td3_to_crave("td3.seq", "crave.seq")
    """
    converter = TD3ToCraveConverter()
    return converter.convert_and_save(source_path, output_path)
