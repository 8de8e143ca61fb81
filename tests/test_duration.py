"""
Tests for NoteValue and Duration.
"""

import pytest

from medley.core.duration import DEFAULT_DURATION, Duration, NoteValue
from medley.errors import FormatError, RangeError


class TestNoteValue:
    """Tests for NoteValue base time values."""

    def test_base_values(self) -> None:
        """Whole note is 1, each value halves the previous."""
        assert NoteValue.BREVE.value == 2.0
        assert NoteValue.SEMIBREVE.value == 1.0
        assert NoteValue.MINIM.value == 0.5
        assert NoteValue.CROTCHET.value == 0.25
        assert NoteValue.HEMIDEMISEMIQUAVER.value == 1 / 64

    def test_halving(self) -> None:
        """Consecutive values halve."""
        values = list(NoteValue)
        for longer, shorter in zip(values, values[1:]):
            assert shorter.value * 2 == longer.value

    def test_parse(self) -> None:
        """Names parse case-insensitively."""
        assert NoteValue.parse("crotchet") is NoteValue.CROTCHET
        assert NoteValue.parse(" Minim ") is NoteValue.MINIM

    def test_parse_unknown(self) -> None:
        """Unknown names raise FormatError."""
        with pytest.raises(FormatError):
            NoteValue.parse("eighth")


class TestDuration:
    """Tests for Duration."""

    def test_default(self) -> None:
        """Default duration is an undotted minim."""
        assert Duration() == Duration(NoteValue.MINIM, 0)
        assert DEFAULT_DURATION.value is NoteValue.MINIM
        assert DEFAULT_DURATION.dots == 0

    def test_undotted_value(self) -> None:
        """No dots gives the base value."""
        assert Duration(NoteValue.CROTCHET).duration_value == 0.25

    def test_dotted_values(self) -> None:
        """Each dot adds half of the previous addition."""
        assert Duration(NoteValue.CROTCHET, 1).duration_value == 0.375
        assert Duration(NoteValue.CROTCHET, 2).duration_value == 0.4375
        assert Duration(NoteValue.CROTCHET, 3).duration_value == 0.46875
        assert Duration(NoteValue.BREVE, 1).duration_value == 3.0

    def test_dots_increase_duration(self) -> None:
        """More dots always means a longer duration."""
        for value in NoteValue:
            lengths = [Duration(value, dots).duration_value for dots in range(4)]
            assert lengths == sorted(lengths)
            assert len(set(lengths)) == 4

    def test_invalid_dots(self) -> None:
        """Dots outside 0-3 raise RangeError."""
        with pytest.raises(RangeError):
            Duration(NoteValue.MINIM, 4)
        with pytest.raises(RangeError):
            Duration(NoteValue.MINIM, -1)

    @pytest.mark.parametrize("dots", [1.5, 2.5, True])
    def test_fractional_dots_rejected(self, dots: object) -> None:
        """Dot counts must be whole numbers; nothing is built otherwise."""
        with pytest.raises(RangeError):
            Duration(NoteValue.MINIM, dots)  # type: ignore[arg-type]
        with pytest.raises(RangeError):
            Duration(NoteValue.MINIM).with_dots(dots)  # type: ignore[arg-type]

    def test_with_dots(self) -> None:
        """with_dots returns a validated copy."""
        minim = Duration(NoteValue.MINIM)
        dotted = minim.with_dots(1)
        assert dotted.dots == 1
        assert minim.dots == 0
        with pytest.raises(RangeError):
            minim.with_dots(4)

    def test_with_value(self) -> None:
        """with_value keeps the dots."""
        dotted = Duration(NoteValue.MINIM, 2).with_value(NoteValue.QUAVER)
        assert dotted.value is NoteValue.QUAVER
        assert dotted.dots == 2

    def test_equality(self) -> None:
        """Durations compare by value and dots."""
        assert Duration(NoteValue.MINIM, 1) == Duration(NoteValue.MINIM, 1)
        assert Duration(NoteValue.MINIM, 0) != Duration(NoteValue.CROTCHET, 0)
        assert Duration(NoteValue.MINIM, 0) != Duration(NoteValue.MINIM, 1)

    def test_hashable(self) -> None:
        """Equal durations hash alike."""
        durations = {Duration(NoteValue.MINIM), Duration(NoteValue.MINIM), Duration()}
        assert len(durations) == 1

    def test_immutable(self) -> None:
        """Fields cannot be reassigned."""
        from dataclasses import FrozenInstanceError

        with pytest.raises(FrozenInstanceError):
            Duration().dots = 2  # type: ignore[misc]

    def test_str(self) -> None:
        """Human-readable names mention the dots."""
        assert str(Duration(NoteValue.MINIM)) == "Minim"
        assert str(Duration(NoteValue.CROTCHET, 1)) == "Crotchet with 1 dot"
        assert str(Duration(NoteValue.QUAVER, 2)) == "Quaver with 2 dots"
