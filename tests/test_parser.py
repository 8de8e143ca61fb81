"""
Tests for the note notation parser.
"""

import pytest

from medley.core.parser import parse_accidental, parse_letter, parse_note
from medley.core.tone import Accidental, Letter
from medley.errors import FormatError


class TestParseTokens:
    """Tests for single-token helpers."""

    def test_parse_letter(self) -> None:
        """Letters parse case-insensitively."""
        assert parse_letter("C") is Letter.C
        assert parse_letter("g") is Letter.G

    def test_parse_letter_invalid(self) -> None:
        """Letters outside A-G are rejected."""
        with pytest.raises(FormatError, match="note name"):
            parse_letter("H")

    def test_parse_accidental(self) -> None:
        """'b' is flat and '#' is sharp."""
        assert parse_accidental("b") is Accidental.FLAT
        assert parse_accidental("#") is Accidental.SHARP

    def test_parse_accidental_invalid(self) -> None:
        """Other tokens are rejected."""
        with pytest.raises(FormatError, match="accidental"):
            parse_accidental("x")
        with pytest.raises(FormatError):
            parse_accidental("B")


class TestParseNote:
    """Tests for full notation parsing."""

    def test_letter_and_octave(self) -> None:
        """'C4' is C natural in octave 4."""
        tone, octave = parse_note("C4")
        assert tone.letter is Letter.C
        assert tone.accidental is Accidental.NATURAL
        assert octave == 4

    def test_sharp_and_octave(self) -> None:
        """'C#4' is C sharp in octave 4."""
        tone, octave = parse_note("C#4")
        assert tone.letter is Letter.C
        assert tone.accidental is Accidental.SHARP
        assert tone.pitch_class == 1
        assert octave == 4

    def test_flat_default_octave(self) -> None:
        """'Bb' defaults to octave 4."""
        tone, octave = parse_note("Bb")
        assert tone.letter is Letter.B
        assert tone.accidental is Accidental.FLAT
        assert tone.pitch_class == 10
        assert octave == 4

    def test_letter_only(self) -> None:
        """A bare letter is natural in octave 4."""
        tone, octave = parse_note("E")
        assert tone.letter is Letter.E
        assert tone.accidental is Accidental.NATURAL
        assert octave == 4

    def test_negative_octave(self) -> None:
        """'A-1' is A natural in octave -1."""
        tone, octave = parse_note("A-1")
        assert tone.letter is Letter.A
        assert tone.accidental is Accidental.NATURAL
        assert octave == -1

    def test_accidental_with_negative_octave(self) -> None:
        """Accidentals combine with negative octaves."""
        tone, octave = parse_note("C#-1")
        assert tone.accidental is Accidental.SHARP
        assert octave == -1

    def test_multi_digit_octave(self) -> None:
        """Octaves may have several digits."""
        _, octave = parse_note("G10")
        assert octave == 10

    def test_lowercase_letter(self) -> None:
        """The letter is case-insensitive, the flat stays a flat."""
        tone, octave = parse_note("bb3")
        assert tone.letter is Letter.B
        assert tone.accidental is Accidental.FLAT
        assert octave == 3

    @pytest.mark.parametrize("text", [" C4", "C4 ", "  G5 ", "C4\n"])
    def test_surrounding_whitespace_rejected(self, text: str) -> None:
        """The whole input must match the grammar."""
        with pytest.raises(FormatError, match="Invalid note"):
            parse_note(text)

    def test_enharmonic_spellings(self) -> None:
        """Edge spellings resolve to the right pitch class."""
        assert parse_note("B#3")[0].pitch_class == 0
        assert parse_note("Cb4")[0].pitch_class == 11
        assert parse_note("E#")[0].pitch_class == 5
        assert parse_note("Fb")[0].pitch_class == 4

    def test_custom_default_octave(self) -> None:
        """The default octave can be overridden."""
        _, octave = parse_note("D", default_octave=2)
        assert octave == 2
        _, octave = parse_note("D5", default_octave=2)
        assert octave == 5

    @pytest.mark.parametrize(
        "notation",
        ["H4", "C##4", "", "4", "C-", "Cb-", "C4.5", "C#b", "Cx4", "C 4"],
    )
    def test_invalid_notation(self, notation: str) -> None:
        """Notation outside the grammar raises FormatError."""
        with pytest.raises(FormatError):
            parse_note(notation)

    def test_format_error_is_value_error(self) -> None:
        """FormatError can be caught as ValueError."""
        with pytest.raises(ValueError):
            parse_note("H4")
