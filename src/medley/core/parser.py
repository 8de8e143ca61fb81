"""
Note notation parser.

Grammar:
    NOTE       := LETTER ACCIDENTAL* OCTAVE?
    LETTER     := [A-G]          (case-insensitive)
    ACCIDENTAL := 'b' | '#'
    OCTAVE     := '-'? DIGIT+

Examples: 'C', 'C4', 'C#4', 'Bb', 'Bb3', 'A-1'.

The whole input must match; surrounding whitespace is an error.

Only one accidental is meaningful: the table has no double accidentals,
so 'C##4' is rejected when the tail after the first accidental is not
an octave.
"""

from __future__ import annotations

import re

from medley.constants import DEFAULT_OCTAVE, ErrorMessages
from medley.core.tone import Accidental, Letter, Tone
from medley.errors import FormatError

NOTE_PATTERN = re.compile(r"[A-G][b#]*(-)?[0-9]*")
OCTAVE_PATTERN = re.compile(r"-?[0-9]+")

_ACCIDENTAL_TOKENS: dict[str, Accidental] = {
    "b": Accidental.FLAT,
    "#": Accidental.SHARP,
}


def parse_letter(name: str) -> Letter:
    """
    Parse a single note letter ('c' or 'C').

    Raises:
        FormatError: If name is not one of A-G
    """
    try:
        return Letter(name.upper())
    except ValueError:
        raise FormatError(ErrorMessages.INVALID_NAME.format(name=name)) from None


def parse_accidental(token: str) -> Accidental:
    """
    Parse a single accidental token ('b' or '#').

    Raises:
        FormatError: If token is not a recognized accidental
    """
    if token not in _ACCIDENTAL_TOKENS:
        raise FormatError(ErrorMessages.INVALID_ACCIDENTAL.format(accidental=token))
    return _ACCIDENTAL_TOKENS[token]


def _parse_octave(octave: str, note: str) -> int:
    if not OCTAVE_PATTERN.fullmatch(octave):
        raise FormatError(ErrorMessages.INVALID_OCTAVE.format(octave=octave, note=note))
    return int(octave)


def parse_note(note: str, default_octave: int = DEFAULT_OCTAVE) -> tuple[Tone, int]:
    """
    Parse a note notation into a Tone and an octave.

    Args:
        note: Notation like 'C4', 'C#4', 'Bb' or 'A-1'
        default_octave: Octave used when the notation has none

    Returns:
        (tone, octave) tuple

    Raises:
        FormatError: If the notation does not match the grammar

    Example:
        >>> parse_note("Bb")
        (Tone(B, Flat, 10), 4)
    """
    # Letter is case-insensitive; the rest is not ('b' is a flat)
    text = note[:1].upper() + note[1:]

    if not NOTE_PATTERN.fullmatch(text):
        raise FormatError(ErrorMessages.INVALID_NOTE.format(note=note))

    letter = parse_letter(text[0])

    # Name only
    if len(text) == 1:
        return Tone.lookup(letter, Accidental.NATURAL), default_octave

    # Name + octave
    remainder = text[1:]
    if OCTAVE_PATTERN.fullmatch(remainder):
        return Tone.lookup(letter, Accidental.NATURAL), int(remainder)

    accidental = parse_accidental(text[1])
    tone = Tone.lookup(letter, accidental)

    # Name + accidental
    if len(text) == 2:
        return tone, default_octave

    # Name + accidental + octave
    return tone, _parse_octave(text[2:], note)
