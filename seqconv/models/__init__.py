"""Data models for sequencer pattern representation."""

from seqconv.models.sequence import Note, Sequence, NOTE_NAMES, note_name

__all__ = [
    "Note",
    "Sequence",
    "NOTE_NAMES",
    "note_name",
]
