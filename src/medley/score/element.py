"""
Duration handling shared by score elements.

Notes and rests both own a Duration; this mixin exposes its parts and
routes mutation through Duration's validated copy methods.
"""

from __future__ import annotations

from medley.core.duration import Duration, NoteValue


class TimedElement:
    """Something that occupies a Duration in a score."""

    _duration: Duration

    @property
    def duration(self) -> Duration:
        return self._duration

    @duration.setter
    def duration(self, duration: Duration) -> None:
        self._duration = duration

    @property
    def value(self) -> NoteValue:
        """Note value of the duration."""
        return self._duration.value

    @value.setter
    def value(self, value: NoteValue) -> None:
        self._duration = self._duration.with_value(value)

    @property
    def dots(self) -> int:
        """Number of dots (0-3)."""
        return self._duration.dots

    @dots.setter
    def dots(self, dots: int) -> None:
        self._duration = self._duration.with_dots(dots)

    @property
    def duration_value(self) -> float:
        """Time value including dots (whole note = 1)."""
        return self._duration.duration_value
