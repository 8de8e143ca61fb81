"""
Duration primitives - NoteValue and dotted Duration.

Time values are fractions of a whole note (semibreve = 1). Each dot
extends the note by half of the previous extension:
    1 dot  -> 1.5x
    2 dots -> 1.75x
    3 dots -> 1.875x
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from medley.constants import DEFAULT_DOTS
from medley.core.validator import validate_dots
from medley.errors import FormatError


class NoteValue(Enum):
    """Note values and their base time value (whole note = 1)."""

    BREVE = 2.0
    SEMIBREVE = 1.0
    MINIM = 1 / 2
    CROTCHET = 1 / 4
    QUAVER = 1 / 8
    SEMIQUAVER = 1 / 16
    DEMISEMIQUAVER = 1 / 32
    HEMIDEMISEMIQUAVER = 1 / 64

    @property
    def display_name(self) -> str:
        """Capitalized name, e.g. 'Crotchet'."""
        return self.name.capitalize()

    @classmethod
    def parse(cls, name: str) -> NoteValue:
        """Parse a note value from its name, case-insensitive ('minim', 'Crotchet')."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise FormatError(f"Unknown note value: {name}") from None


# Extension factor added per dot count
_DOT_EXTENSIONS: tuple[float, ...] = (0.0, 1 / 2, 1 / 2 + 1 / 4, 1 / 2 + 1 / 4 + 1 / 8)


@dataclass(frozen=True, eq=False)
class Duration:
    """
    A note value with 0-3 augmentation dots.

    Immutable and hashable. Use with_value / with_dots to get modified
    copies.
    """

    value: NoteValue = NoteValue.MINIM
    dots: int = DEFAULT_DOTS

    def __post_init__(self) -> None:
        validate_dots(self.dots)

    @property
    def duration_value(self) -> float:
        """Time value including dots (whole note = 1)."""
        base = self.value.value
        return base + base * _DOT_EXTENSIONS[self.dots]

    def with_value(self, value: NoteValue) -> Duration:
        """Return a copy with a different note value."""
        return replace(self, value=value)

    def with_dots(self, dots: int) -> Duration:
        """
        Return a copy with a different dot count.

        Raises:
            RangeError: If dots is outside 0-3
        """
        return replace(self, dots=dots)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        if self.duration_value != other.duration_value:
            return False
        return self.value is other.value and self.dots == other.dots

    def __hash__(self) -> int:
        return hash((self.value, self.dots))

    def __str__(self) -> str:
        if self.dots == 0:
            return self.value.display_name
        suffix = "dot" if self.dots == 1 else "dots"
        return f"{self.value.display_name} with {self.dots} {suffix}"

    def __repr__(self) -> str:
        return f"Duration(NoteValue.{self.value.name}, dots={self.dots})"


DEFAULT_DURATION = Duration(NoteValue.MINIM)
