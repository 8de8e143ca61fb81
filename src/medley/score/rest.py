"""
Rest - a silent score element.
"""

from __future__ import annotations

from medley.constants import ErrorMessages
from medley.core.duration import DEFAULT_DURATION, Duration
from medley.score.element import TimedElement


class Rest(TimedElement):
    """
    A period of silence.

    A rest's volume is always 0; assigning it raises AttributeError.
    """

    def __init__(self, duration: Duration = DEFAULT_DURATION) -> None:
        self._duration = duration

    @property
    def volume(self) -> int:
        return 0

    @volume.setter
    def volume(self, volume: int) -> None:
        raise AttributeError(ErrorMessages.REST_VOLUME)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rest):
            return NotImplemented
        return self._duration == other._duration

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f"Rest ({self._duration})"

    def __repr__(self) -> str:
        return f"Rest({self._duration!r})"
