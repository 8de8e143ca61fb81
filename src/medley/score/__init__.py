"""
Score elements - Notes and Rests built from the core values.
"""

from medley.score.element import TimedElement
from medley.score.note import Note, octave_of
from medley.score.rest import Rest

__all__ = [
    "Note",
    "Rest",
    "TimedElement",
    "octave_of",
]
