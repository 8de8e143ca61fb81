"""
Range validation for numeric inputs.

Each check raises RangeError when its argument is out of bounds and returns
nothing otherwise. Callers run these before touching any state.

Counts (MIDI numbers, keys, volumes, dots, pitch classes) must be real
integers: floats and bools are rejected even when they fall in range.
"""

from __future__ import annotations

import math

from medley.constants import (
    DOTS_MAX,
    DOTS_MIN,
    FREQUENCY_PRECISION,
    MIDI_MAX_NUMBER,
    MIDI_MIN_NUMBER,
    PIANO_MAX_KEY,
    PIANO_MIN_KEY,
    PITCH_CLASS_MAX,
    PITCH_CLASS_MIN,
    SPELLING_ALTERNATE,
    SPELLING_PRIMARY,
    VOLUME_MAX,
    VOLUME_MIN,
    ErrorMessages,
)
from medley.errors import RangeError


def _is_count(value: object, minimum: int, maximum: int) -> bool:
    """True for a non-bool int within [minimum, maximum]."""
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return minimum <= value <= maximum


def validate_frequency(frequency: float, minimum: float, maximum: float) -> None:
    """
    Check that a frequency lies within [minimum, maximum].

    The bounds are published to 3 decimal places, so the frequency is
    compared at that precision. This keeps the exact MIDI 0 frequency
    (8.1757...) inside the 8.176 lower bound. NaN and infinities are
    always rejected.
    """
    if not math.isfinite(frequency):
        raise RangeError(
            ErrorMessages.INVALID_FREQUENCY.format(value=frequency, min=minimum, max=maximum)
        )

    rounded = round(frequency, FREQUENCY_PRECISION)
    if rounded < minimum or rounded > maximum:
        raise RangeError(
            ErrorMessages.INVALID_FREQUENCY.format(value=frequency, min=minimum, max=maximum)
        )


def validate_reference(frequency: float) -> None:
    """Check that a frequency is finite and above 0 Hz (usable in a ratio)."""
    if not math.isfinite(frequency) or frequency <= 0:
        raise RangeError(ErrorMessages.INVALID_REFERENCE.format(value=frequency))


def validate_midi_number(midi_number: int) -> None:
    """Check that a MIDI note number is within 0-127."""
    if not _is_count(midi_number, MIDI_MIN_NUMBER, MIDI_MAX_NUMBER):
        raise RangeError(
            ErrorMessages.INVALID_MIDI_NUMBER.format(
                value=midi_number, min=MIDI_MIN_NUMBER, max=MIDI_MAX_NUMBER
            )
        )


def validate_piano_key(piano_key: int) -> None:
    """Check that a piano key number is within 1-88."""
    if not _is_count(piano_key, PIANO_MIN_KEY, PIANO_MAX_KEY):
        raise RangeError(
            ErrorMessages.INVALID_PIANO_KEY.format(
                value=piano_key, min=PIANO_MIN_KEY, max=PIANO_MAX_KEY
            )
        )


def validate_volume(volume: int) -> None:
    """Check that a volume is within 0-127."""
    if not _is_count(volume, VOLUME_MIN, VOLUME_MAX):
        raise RangeError(
            ErrorMessages.INVALID_VOLUME.format(value=volume, min=VOLUME_MIN, max=VOLUME_MAX)
        )


def validate_dots(dots: int) -> None:
    """Check that a dot count is an integer within 0-3."""
    if not _is_count(dots, DOTS_MIN, DOTS_MAX):
        raise RangeError(ErrorMessages.INVALID_DOTS.format(value=dots, min=DOTS_MIN, max=DOTS_MAX))


def validate_pitch_class(pitch_class: int) -> None:
    """Check that a pitch class is within 0-11."""
    if not _is_count(pitch_class, PITCH_CLASS_MIN, PITCH_CLASS_MAX):
        raise RangeError(
            ErrorMessages.INVALID_PITCH_CLASS.format(
                value=pitch_class, min=PITCH_CLASS_MIN, max=PITCH_CLASS_MAX
            )
        )


def validate_spelling(spelling: int) -> None:
    """Check that a spelling index selects one of the two table columns."""
    if not _is_count(spelling, SPELLING_PRIMARY, SPELLING_ALTERNATE):
        raise RangeError(
            ErrorMessages.INVALID_SPELLING.format(
                value=spelling, primary=SPELLING_PRIMARY, alternate=SPELLING_ALTERNATE
            )
        )


def validate_semitones(semitones: int, minimum: int, maximum: int) -> None:
    """Check that a semitone count lies within [minimum, maximum]."""
    if not minimum <= semitones <= maximum:
        raise RangeError(
            ErrorMessages.INVALID_SEMITONES.format(value=semitones, min=minimum, max=maximum)
        )


def validate_transpose(midi_number: int, semitones: int) -> None:
    """
    Check that transposing a MIDI note keeps it within 0-127.

    Args:
        midi_number: The note being transposed
        semitones: Shift to apply (positive or negative)
    """
    if not MIDI_MIN_NUMBER <= midi_number + semitones <= MIDI_MAX_NUMBER:
        raise RangeError(
            ErrorMessages.INVALID_TRANSPOSE.format(
                value=semitones,
                midi=midi_number,
                down=midi_number - MIDI_MIN_NUMBER,
                up=MIDI_MAX_NUMBER - midi_number,
            )
        )
