"""
Error types for the medley value library.

Two families of failure exist:
- RangeError: a numeric argument is outside its documented bounds
- FormatError: a notation string (or one of its tokens) is not recognized

Both subclass ValueError so callers can treat them as ordinary bad input.
"""


class MedleyError(Exception):
    """Base class for all medley errors."""


class RangeError(MedleyError, ValueError):
    """A numeric value (frequency, MIDI number, dots, ...) is out of range."""


class FormatError(MedleyError, ValueError):
    """A note notation string or token does not match the grammar."""
