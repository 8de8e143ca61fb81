"""
Tone primitives - Letter, Accidental and the enharmonic Tone table.

Every pitch class (0-11) has exactly two registered spellings:
index 0 is the sharp/natural spelling, index 1 the flat (or alternate)
spelling. A Tone is one of those 24 spellings; anything else (double
sharps, double flats) cannot be represented.

Tones compare and hash by pitch class only, so C# == Db.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from medley.constants import SPELLING_ALTERNATE, SPELLING_PRIMARY
from medley.core.frequency import midi_number_from_frequency
from medley.core.validator import validate_midi_number, validate_pitch_class, validate_spelling


class Letter(str, Enum):
    """The seven natural note names."""

    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"
    A = "A"
    B = "B"


class Accidental(str, Enum):
    """Pitch alteration applied to a letter."""

    FLAT = "flat"
    NATURAL = "natural"
    SHARP = "sharp"

    @property
    def display_name(self) -> str:
        """Capitalized name, e.g. 'Sharp'."""
        return self.value.capitalize()

    @property
    def symbol(self) -> str:
        """Unicode music symbol."""
        return _SYMBOLS[self]

    @property
    def token(self) -> str:
        """ASCII token used in note notation ('' for natural)."""
        return _TOKENS[self]


# Display mappings (module level to avoid Enum member issues)
_SYMBOLS: dict[Accidental, str] = {
    Accidental.FLAT: "♭",
    Accidental.NATURAL: "♮",
    Accidental.SHARP: "♯",
}
_TOKENS: dict[Accidental, str] = {
    Accidental.FLAT: "b",
    Accidental.NATURAL: "",
    Accidental.SHARP: "#",
}

Spelling = tuple[Letter, Accidental]

# pitch class -> (primary spelling, alternate spelling)
TONE_TABLE: tuple[tuple[Spelling, Spelling], ...] = (
    ((Letter.C, Accidental.NATURAL), (Letter.B, Accidental.SHARP)),  # 0
    ((Letter.C, Accidental.SHARP), (Letter.D, Accidental.FLAT)),  # 1
    ((Letter.D, Accidental.NATURAL), (Letter.D, Accidental.NATURAL)),  # 2
    ((Letter.D, Accidental.SHARP), (Letter.E, Accidental.FLAT)),  # 3
    ((Letter.E, Accidental.NATURAL), (Letter.F, Accidental.FLAT)),  # 4
    ((Letter.F, Accidental.NATURAL), (Letter.E, Accidental.SHARP)),  # 5
    ((Letter.F, Accidental.SHARP), (Letter.G, Accidental.FLAT)),  # 6
    ((Letter.G, Accidental.NATURAL), (Letter.G, Accidental.NATURAL)),  # 7
    ((Letter.G, Accidental.SHARP), (Letter.A, Accidental.FLAT)),  # 8
    ((Letter.A, Accidental.NATURAL), (Letter.A, Accidental.NATURAL)),  # 9
    ((Letter.A, Accidental.SHARP), (Letter.B, Accidental.FLAT)),  # 10
    ((Letter.B, Accidental.NATURAL), (Letter.C, Accidental.FLAT)),  # 11
)

PRIMARY = SPELLING_PRIMARY
ALTERNATE = SPELLING_ALTERNATE


def _find_spelling(letter: Letter, accidental: Accidental) -> tuple[int, int]:
    """Return (pitch_class, spelling index) of a registered spelling."""
    for pitch_class, spellings in enumerate(TONE_TABLE):
        for index, spelling in enumerate(spellings):
            if spelling == (letter, accidental):
                return pitch_class, index

    # Every letter/accidental pair the parser can produce is in the table
    raise AssertionError(f"No registered spelling for {letter.value} {accidental.value}")


def pitch_class_for(letter: Letter, accidental: Accidental) -> int:
    """Pitch class (0-11) of a registered spelling."""
    pitch_class, _ = _find_spelling(letter, accidental)
    return pitch_class


@dataclass(frozen=True, eq=False)
class Tone:
    """
    A spelled pitch class: letter + accidental + pitch class.

    `spelling` selects which of the two table entries for the pitch class
    is active (0 = primary, 1 = alternate). Use the classmethods to build
    Tones; the constructor rejects spellings that are not in the table.

    Immutable. Equality and hashing use the pitch class only.
    """

    letter: Letter
    accidental: Accidental
    pitch_class: int
    spelling: int = PRIMARY

    def __post_init__(self) -> None:
        validate_pitch_class(self.pitch_class)
        validate_spelling(self.spelling)
        if TONE_TABLE[self.pitch_class][self.spelling] != (self.letter, self.accidental):
            raise ValueError(
                f"{self.letter.value}{self.accidental.token} is not spelling "
                f"{self.spelling} of pitch class {self.pitch_class}"
            )

    @classmethod
    def from_pitch_class(cls, pitch_class: int, spelling: int = PRIMARY) -> Tone:
        """
        Build a Tone from the table entry for a pitch class.

        Raises:
            RangeError: If pitch_class is outside 0-11 or spelling is not 0 or 1
        """
        validate_pitch_class(pitch_class)
        validate_spelling(spelling)
        letter, accidental = TONE_TABLE[pitch_class][spelling]
        return cls(letter, accidental, pitch_class, spelling)

    @classmethod
    def from_midi(cls, midi_number: int) -> Tone:
        """
        Tone of a MIDI note number, using the primary spelling.

        Raises:
            RangeError: If midi_number is outside 0-127
        """
        validate_midi_number(midi_number)
        return cls.from_pitch_class(midi_number % 12)

    @classmethod
    def from_frequency(cls, frequency: float) -> Tone:
        """Tone of the nearest MIDI note to a frequency."""
        return cls.from_midi(midi_number_from_frequency(frequency))

    @classmethod
    def lookup(cls, letter: Letter, accidental: Accidental) -> Tone:
        """Find a Tone by letter and accidental (linear scan of the table)."""
        pitch_class, spelling = _find_spelling(letter, accidental)
        return cls(letter, accidental, pitch_class, spelling)

    def switch_accidental(self) -> Tone:
        """
        Return the other registered spelling of this pitch class.

        C <-> B#, C# <-> Db, E <-> Fb, ... Pitch classes 2, 7 and 9 have a
        single spelling, so only the selector flips. The pitch class never
        changes and switching twice gives back the original spelling.

        Octave bookkeeping is the caller's job, see octave_shift_for_switch.
        """
        return Tone.from_pitch_class(self.pitch_class, ALTERNATE - self.spelling)

    @property
    def notation(self) -> str:
        """ASCII spelling accepted by the note parser, e.g. 'C#', 'Bb'."""
        return f"{self.letter.value}{self.accidental.token}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tone):
            return NotImplemented
        return self.pitch_class == other.pitch_class

    def __hash__(self) -> int:
        return hash(self.pitch_class)

    def __str__(self) -> str:
        if self.accidental is Accidental.NATURAL:
            return self.letter.value
        return f"{self.letter.value}{self.accidental.symbol}"

    def __repr__(self) -> str:
        return f"Tone({self.letter.value}, {self.accidental.display_name}, {self.pitch_class})"


def octave_shift_for_switch(tone: Tone) -> int:
    """
    Octave change an owner applies when it switches `tone`'s spelling.

    C natural becomes B sharp one octave down; B sharp becomes C natural
    one octave up. Every other switch keeps the octave.
    """
    if tone.letter is Letter.C and tone.accidental is Accidental.NATURAL:
        return -1
    if tone.letter is Letter.B and tone.accidental is Accidental.SHARP:
        return 1
    return 0
