"""
Constants and defaults for the medley library.

No magic numbers - ranges and defaults live here.
"""

# Reference pitches for A4 (Hz)
A432 = 432.0
A435 = 435.0
A440 = 440.0
A442 = 442.0
A443 = 443.0
A444 = 444.0

# Frequency bounds (Hz), published to 3 decimal places
MIDI_MIN_FREQUENCY = 8.176
MIDI_MAX_FREQUENCY = 12543.854
PIANO_MIN_FREQUENCY = 27.5
PIANO_MAX_FREQUENCY = 4186.01
FREQUENCY_PRECISION = 3

MIDI_MIN_NUMBER = 0
MIDI_MAX_NUMBER = 127
MIDI_A4 = 69

PIANO_MIN_KEY = 1
PIANO_MAX_KEY = 88
PIANO_A4 = 49

VOLUME_MIN = 0
VOLUME_MAX = 127

DOTS_MIN = 0
DOTS_MAX = 3

PITCH_CLASS_MIN = 0
PITCH_CLASS_MAX = 11

# Column of the tone table a spelling sits in
SPELLING_PRIMARY = 0
SPELLING_ALTERNATE = 1

SEMITONES_PER_OCTAVE = 12
CENTS_PER_SEMITONE = 100
CENTS_PER_OCTAVE = 1200

# Score element defaults
DEFAULT_OCTAVE = 4
DEFAULT_VOLUME = 98
DEFAULT_DOTS = 0


class ErrorMessages:
    """Standardized error messages."""

    INVALID_FREQUENCY = (
        "Invalid frequency value: {value}. It must be between {min:.2f} and {max:.2f} Hz."
    )
    INVALID_MIDI_NUMBER = (
        "Invalid MIDI note number: {value}. It must be an integer between {min} and {max}."
    )
    INVALID_PIANO_KEY = (
        "Invalid piano key number: {value}. It must be an integer between {min} and {max}."
    )
    INVALID_VOLUME = "Invalid volume: {value}. It must be an integer between {min} and {max}."
    INVALID_DOTS = "Invalid dots number: {value}. It must be an integer between {min} and {max}."
    INVALID_PITCH_CLASS = (
        "Invalid pitch class: {value}. It must be an integer between {min} and {max}."
    )
    INVALID_SPELLING = "Invalid spelling index: {value}. It must be {primary} or {alternate}."
    INVALID_REFERENCE = "Invalid frequency value: {value}. It must be a positive number of Hz."
    INVALID_SEMITONES = "Invalid semitones value: {value}. It must be between {min} and {max}."
    INVALID_TRANSPOSE = (
        "Invalid semitones value: {value}. For MIDI note {midi} it must be between "
        "-{down} and +{up}."
    )
    INVALID_NOTE = "Invalid note: '{note}'. Expected a notation like 'C4', 'C#4', 'Bb' or 'A-1'."
    INVALID_NAME = "Invalid note name: '{name}'. Expected one of A-G."
    INVALID_ACCIDENTAL = "Invalid note accidental: '{accidental}'. Expected 'b' or '#'."
    INVALID_OCTAVE = "Invalid octave: '{octave}' in note '{note}'."
    REST_VOLUME = "The volume of a rest cannot be edited."
