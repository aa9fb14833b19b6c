"""
Sequence data model - the decoded form of a single step-sequencer pattern.

Both the Crave and the TD-3 decoders produce this model. The two devices
disagree on where octave zero sits, so the octave stored on a Note depends
on which decoder built it:

    Crave:  octave = value // 12 - 1
    TD-3:   octave = value // 12
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

NOTE_NAMES = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")

MIN_LENGTH = 1
MAX_LENGTH = 32


def note_name(note: int) -> str:
    """Return the chromatic name for a pitch class (0 = C)."""
    return NOTE_NAMES[note % 12]


@dataclass(frozen=True)
class Note:
    """
    A single sequencer step.

    Attributes:
        note: Pitch class 0-11 (0 = C)
        octave: Octave index, origin depends on the source device
        ratchet: Retriggers per step (1-4)
        velocity: Note velocity 0-127 (Crave only)
        gate: Gate length 0-7 (Crave only)
        glide: Crave legato flag
        slide: TD-3 legato flag
        accent: Accent flag
        rest: Step is muted/disabled
    """

    note: int = 0
    octave: int = 0
    ratchet: int = 1
    velocity: int = 0
    gate: int = 0
    glide: bool = False
    slide: bool = False
    accent: bool = False
    rest: bool = False

    @property
    def name(self) -> str:
        """Pitch class name, e.g. 'C#'."""
        return note_name(self.note)

    @property
    def label(self) -> str:
        """Pitch class name followed by the octave, e.g. 'C#3'."""
        return f"{self.name}{self.octave}"

    @property
    def flags(self) -> str:
        """Single-letter effect flags (Glide, Slide, Accent, Rest)."""
        return "".join(
            letter if active else " "
            for letter, active in (
                ("G", self.glide),
                ("S", self.slide),
                ("A", self.accent),
                ("R", self.rest),
            )
        )


@dataclass(frozen=True)
class Sequence:
    """
    Complete pattern.

    Attributes:
        swing: Swing percentage (50 = straight)
        length: Number of active steps (1-32)
        notes: Exactly ``length`` notes in step order
        source_format: Decoder that produced the pattern ("crave" or "td3")
    """

    swing: int = 50
    length: int = 1
    notes: Tuple[Note, ...] = field(default_factory=lambda: (Note(),))
    source_format: Optional[str] = None

    def __post_init__(self):
        # Lists are accepted for convenience but stored as a tuple
        object.__setattr__(self, "notes", tuple(self.notes))

        if not MIN_LENGTH <= self.length <= MAX_LENGTH:
            raise ValueError(
                f"Sequence length must be {MIN_LENGTH}-{MAX_LENGTH}, got {self.length}"
            )
        if len(self.notes) != self.length:
            raise ValueError(
                f"Sequence length {self.length} does not match {len(self.notes)} notes"
            )

    @property
    def active_steps(self) -> int:
        """Number of steps that are not rested."""
        return sum(1 for n in self.notes if not n.rest)

    def __repr__(self) -> str:
        return (
            f"Sequence(length={self.length}, swing={self.swing}, "
            f"source_format={self.source_format!r})"
        )
