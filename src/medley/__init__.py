"""
medley - pitches, durations and note notation.

    >>> from medley import Note
    >>> note = Note.parse("C#4")
    >>> note.midi_number
    61
"""

from medley.core import (
    Accidental,
    Duration,
    Letter,
    NoteValue,
    Tone,
    parse_note,
)
from medley.errors import FormatError, MedleyError, RangeError
from medley.score import Note, Rest

__version__ = "0.1.0"

__all__ = [
    "Accidental",
    "Duration",
    "FormatError",
    "Letter",
    "MedleyError",
    "Note",
    "NoteValue",
    "RangeError",
    "Rest",
    "Tone",
    "parse_note",
]
