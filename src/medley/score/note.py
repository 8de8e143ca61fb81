"""
Note - a pitched score element.

A Note ties a Tone and octave to a MIDI number and a frequency, and
carries a Duration and a volume (0-127).

Construction paths:
    Note(tone, octave)          midi = pitch_class + 12 * (octave + 1)
    Note.from_midi(60)          primary spelling, octave = midi // 12 - 1
    Note.from_frequency(450.0)  frequency kept as given, rest from nearest semitone
    Note.parse("C#4")           notation string
"""

from __future__ import annotations

import copy

from medley.constants import DEFAULT_OCTAVE, DEFAULT_VOLUME, SEMITONES_PER_OCTAVE
from medley.core.duration import DEFAULT_DURATION, Duration
from medley.core.frequency import frequency_from_midi_number, midi_number_from_frequency
from medley.core.parser import parse_note
from medley.core.tone import Accidental, Letter, Tone, octave_shift_for_switch
from medley.core.validator import validate_transpose, validate_volume
from medley.score.element import TimedElement


def octave_of(midi_number: int) -> int:
    """Octave of a MIDI note number (60 -> 4)."""
    return midi_number // SEMITONES_PER_OCTAVE - 1


class Note(TimedElement):
    """
    A pitched note.

    Mutable: volume, duration parts, transposition and spelling can be
    changed in place. Every mutator validates before changing anything.
    Notes compare equal when frequency and duration match; being
    mutable, they are not hashable.
    """

    def __init__(
        self,
        tone: Tone,
        octave: int = DEFAULT_OCTAVE,
        duration: Duration = DEFAULT_DURATION,
        volume: int = DEFAULT_VOLUME,
    ) -> None:
        """
        Create a note from a tone and an octave.

        Raises:
            RangeError: If the resulting MIDI number or the volume is out of range
        """
        validate_volume(volume)
        midi_number = tone.pitch_class + SEMITONES_PER_OCTAVE * (octave + 1)

        self._frequency = frequency_from_midi_number(midi_number)
        self._midi_number = midi_number
        self._tone = tone
        self._octave = octave
        self._duration = duration
        self._volume = volume

    @classmethod
    def from_midi(
        cls,
        midi_number: int,
        duration: Duration = DEFAULT_DURATION,
        volume: int = DEFAULT_VOLUME,
    ) -> Note:
        """Create a note from a MIDI number (0-127)."""
        return cls(Tone.from_midi(midi_number), octave_of(midi_number), duration, volume)

    @classmethod
    def from_frequency(
        cls,
        frequency: float,
        duration: Duration = DEFAULT_DURATION,
        volume: int = DEFAULT_VOLUME,
    ) -> Note:
        """
        Create a note from an arbitrary frequency.

        The frequency is stored verbatim; MIDI number, tone and octave
        come from the nearest semitone, so they may differ from the
        frequency by up to 50 cents.
        """
        note = cls.from_midi(midi_number_from_frequency(frequency), duration, volume)
        note._frequency = frequency
        return note

    @classmethod
    def parse(
        cls,
        notation: str,
        duration: Duration = DEFAULT_DURATION,
        volume: int = DEFAULT_VOLUME,
        default_octave: int = DEFAULT_OCTAVE,
    ) -> Note:
        """
        Create a note from notation like 'C4', 'C#4', 'Bb' or 'A-1'.

        Raises:
            FormatError: If the notation is invalid
        """
        tone, octave = parse_note(notation, default_octave=default_octave)
        return cls(tone, octave, duration, volume)

    def copy(self) -> Note:
        """Return an independent copy of this note."""
        return copy.copy(self)

    # Pitch accessors

    @property
    def tone(self) -> Tone:
        return self._tone

    @property
    def letter(self) -> Letter:
        return self._tone.letter

    @property
    def accidental(self) -> Accidental:
        return self._tone.accidental

    @property
    def octave(self) -> int:
        return self._octave

    @property
    def frequency(self) -> float:
        """Frequency in Hz."""
        return self._frequency

    @property
    def midi_number(self) -> int:
        return self._midi_number

    @property
    def volume(self) -> int:
        return self._volume

    @volume.setter
    def volume(self, volume: int) -> None:
        validate_volume(volume)
        self._volume = volume

    # Pitch mutators

    def transpose(self, semitones: int) -> None:
        """
        Shift the note by a number of semitones.

        The note is re-spelled from its new MIDI number (primary spelling).

        Raises:
            RangeError: If the result would leave MIDI 0-127; the note is unchanged
        """
        if semitones == 0:
            return

        validate_transpose(self._midi_number, semitones)

        self._midi_number += semitones
        self._frequency = frequency_from_midi_number(self._midi_number)
        self._tone = Tone.from_midi(self._midi_number)
        self._octave = octave_of(self._midi_number)

    def semitone_up(self) -> None:
        self.transpose(1)

    def semitone_down(self) -> None:
        self.transpose(-1)

    def switch_accidental(self) -> None:
        """
        Switch to the other spelling of the same pitch.

        C4 becomes B#3 and B#3 becomes C4 again; the octave follows the
        letter. MIDI number and frequency are unchanged.
        """
        self._octave += octave_shift_for_switch(self._tone)
        self._tone = self._tone.switch_accidental()

    # Display

    @property
    def notation(self) -> str:
        """
        ASCII notation, e.g. 'C#4'.

        Note.parse reads it back with midi = pitch_class + 12 * (octave + 1).
        A B# reached by switch_accidental keeps its MIDI number while its
        octave drops, so it does not read back to the same pitch: C4
        switches to B#3 (MIDI 60), and parsing 'B#3' gives MIDI 48.
        """
        return f"{self._tone.notation}{self._octave}"

    def describe(self) -> str:
        """Multi-line summary of every field."""
        lines = [
            f"Note:           {self}",
            f"Name:           {self._tone.letter.value}",
            f"Accidental:     {self._tone.accidental.display_name}",
            f"Octave:         {self._octave}",
            f"Frequency:      {self._frequency:.3f}Hz",
            f"MIDI number:    {self._midi_number}",
            f"Duration:       {self._duration}",
            f"Duration value: {self.duration_value}",
            f"Volume:         {self._volume}",
        ]
        return "\n".join(lines)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Note):
            return NotImplemented
        return self._frequency == other._frequency and self._duration == other._duration

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f"{self._tone}{self._octave}"

    def __repr__(self) -> str:
        return f"Note({self.notation!r}, midi={self._midi_number}, {self._duration!r})"
