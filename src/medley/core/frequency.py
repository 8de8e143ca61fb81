"""
Frequency math - conversions between Hz, MIDI numbers, piano keys and cents.

All functions are pure. Equal temperament throughout:
    f(n) = 440 * 2^((n - 69) / 12)

MIDI 69 and piano key 49 are both A4 (440 Hz).
"""

from __future__ import annotations

import math

from medley.constants import (
    A440,
    CENTS_PER_OCTAVE,
    CENTS_PER_SEMITONE,
    MIDI_A4,
    MIDI_MAX_FREQUENCY,
    MIDI_MIN_FREQUENCY,
    PIANO_A4,
    PIANO_MAX_FREQUENCY,
    PIANO_MIN_FREQUENCY,
    SEMITONES_PER_OCTAVE,
)
from medley.core.validator import (
    validate_frequency,
    validate_midi_number,
    validate_piano_key,
    validate_reference,
)


def round_half_away(value: float) -> int:
    """
    Round to the nearest integer, halves away from zero.

    Python's round() uses banker's rounding (round(2.5) == 2), which is not
    what pitch quantization wants.
    """
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def frequency_from_semitones(semitones: int, pitch: float = A440) -> float:
    """
    Frequency at a distance of `semitones` from a reference pitch.

    Args:
        semitones: Distance in semitones (negative is below the reference)
        pitch: Reference frequency in Hz (default A440)

    Returns:
        Frequency in Hz
    """
    return 2 ** (semitones / SEMITONES_PER_OCTAVE) * pitch


def cents_between(reference: float, frequency: float) -> float:
    """
    Distance in cents from `reference` up to `frequency` (negative if below).

    Raises:
        RangeError: If either frequency is not a positive finite number
    """
    validate_reference(reference)
    validate_reference(frequency)
    return CENTS_PER_OCTAVE * math.log2(frequency / reference)


def semitones_from_cents(cents: float) -> int:
    """
    Whole semitones contained in a cent distance.

    The cents are rounded first, then divided by 100 and truncated toward
    zero: 250 -> 2, 299.6 -> 3, -250 -> -2.
    """
    return int(round_half_away(cents) / CENTS_PER_SEMITONE)


def semitones_between(reference: float, frequency: float) -> int:
    """Whole semitones from `reference` to `frequency`."""
    return semitones_from_cents(cents_between(reference, frequency))


def midi_number_from_frequency(frequency: float) -> int:
    """
    Nearest MIDI note number for a frequency.

    Raises:
        RangeError: If frequency is outside 8.176-12543.854 Hz
    """
    validate_frequency(frequency, MIDI_MIN_FREQUENCY, MIDI_MAX_FREQUENCY)
    return round_half_away(MIDI_A4 + SEMITONES_PER_OCTAVE * math.log2(frequency / A440))


def frequency_from_midi_number(midi_number: int) -> float:
    """
    Frequency of a MIDI note number.

    Raises:
        RangeError: If midi_number is outside 0-127
    """
    validate_midi_number(midi_number)
    return A440 * 2 ** ((midi_number - MIDI_A4) / SEMITONES_PER_OCTAVE)


def piano_key_from_frequency(frequency: float) -> int:
    """
    Nearest piano key (1-88) for a frequency.

    Raises:
        RangeError: If frequency is outside 27.5-4186.01 Hz
    """
    validate_frequency(frequency, PIANO_MIN_FREQUENCY, PIANO_MAX_FREQUENCY)
    return round_half_away(SEMITONES_PER_OCTAVE * math.log2(frequency / A440) + PIANO_A4)


def frequency_from_piano_key(piano_key: int) -> float:
    """
    Frequency of a piano key.

    Raises:
        RangeError: If piano_key is outside 1-88
    """
    validate_piano_key(piano_key)
    return 2 ** ((piano_key - PIANO_A4) / SEMITONES_PER_OCTAVE) * A440
