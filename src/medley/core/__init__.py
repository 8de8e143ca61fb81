"""
Core music values - the layer everything else composes on.

- frequency: Hz <-> MIDI number <-> piano key <-> cents conversions
- Letter / Accidental: the parts of a spelled note name
- Tone: one of the 24 registered spellings of the 12 pitch classes
- NoteValue / Duration: note lengths with up to three dots
- parse_note: 'C#4' -> (Tone, octave)
"""

from medley.core.duration import DEFAULT_DURATION, Duration, NoteValue
from medley.core.frequency import (
    cents_between,
    frequency_from_midi_number,
    frequency_from_piano_key,
    frequency_from_semitones,
    midi_number_from_frequency,
    piano_key_from_frequency,
    semitones_between,
    semitones_from_cents,
)
from medley.core.parser import parse_accidental, parse_letter, parse_note
from medley.core.tone import (
    TONE_TABLE,
    Accidental,
    Letter,
    Tone,
    octave_shift_for_switch,
    pitch_class_for,
)

__all__ = [
    # Frequency
    "cents_between",
    "frequency_from_midi_number",
    "frequency_from_piano_key",
    "frequency_from_semitones",
    "midi_number_from_frequency",
    "piano_key_from_frequency",
    "semitones_between",
    "semitones_from_cents",
    # Tone
    "TONE_TABLE",
    "Accidental",
    "Letter",
    "Tone",
    "octave_shift_for_switch",
    "pitch_class_for",
    # Duration
    "DEFAULT_DURATION",
    "Duration",
    "NoteValue",
    # Parsing
    "parse_accidental",
    "parse_letter",
    "parse_note",
]
